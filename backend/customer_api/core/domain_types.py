"""Domain Types - identity wrapper for the customer aggregate.

Invariants:
    - CustomerId is an int assigned by the database, never by a client
"""

from typing import NewType

CustomerId = NewType("CustomerId", int)
