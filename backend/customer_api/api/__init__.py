"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every customer endpoint answers with the ApiResponse envelope, success or failure
"""
