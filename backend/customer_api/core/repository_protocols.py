"""Boundary Protocols - contracts between the API layer and persistence.

Invariants:
    - Routes depend on CustomerRepository, never on a concrete adapter
    - save() returns the entity with its database-assigned id populated
    - Persistence failures surface as PersistenceError (core/errors.py), never raw driver errors

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO against an AsyncSession
"""

from typing import TYPE_CHECKING, Protocol

from customer_api.core.domain_types import CustomerId

if TYPE_CHECKING:
    from customer_api.models.customer import Customer
    from customer_api.schemas.customer import CustomerCreate


class CustomerRepository(Protocol):
    """Contract for customer persistence - implemented by infrastructure."""
    async def save(self, data: "CustomerCreate") -> "Customer": ...
    async def find_by_id(self, customer_id: CustomerId) -> "Customer | None": ...
    async def find_all(self) -> list["Customer"]: ...
    async def delete_by_id(self, customer_id: CustomerId) -> bool: ...
    async def count(self) -> int: ...
