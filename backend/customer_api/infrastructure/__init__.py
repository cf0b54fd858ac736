"""Infrastructure Layer - database engine, repository adapters and logging setup.

Invariants:
    - SQLAlchemy exceptions never leave this layer un-mapped (PersistenceError)
"""
