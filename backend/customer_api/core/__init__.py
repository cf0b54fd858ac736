"""Core Layer - domain types, error hierarchy and boundary contracts.

Invariants:
    - No module in core/ imports from api/ or infrastructure/ at runtime
    - No IO, no DB sessions

Design Decisions:
    - Contracts live here so routes and adapters meet on neutral ground
"""
