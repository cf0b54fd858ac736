"""Customer API Package - REST service for customer records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
