"""Customer Repository - SQLAlchemy adapter for the CustomerRepository protocol.

Invariants:
    - save() commits and refreshes, so the returned Customer has its id
    - Every SQLAlchemy failure rolls the session back and raises PersistenceError
      carrying the driver's own message as detail
    - One repository per request session; no state beyond the session
"""

import logging

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.domain_types import CustomerId
from customer_api.core.errors import PersistenceError
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.infrastructure.database import get_db
from customer_api.models.customer import Customer
from customer_api.schemas.customer import CustomerCreate

logger = logging.getLogger(__name__)


def describe_db_error(exc: SQLAlchemyError) -> str:
    """Driver-level message when available, SQLAlchemy's own text otherwise."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class SqlAlchemyCustomerRepository:
    """CustomerRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def save(self, data: CustomerCreate) -> Customer:
        customer = Customer(
            name=data.name, address=data.address, salary=data.salary,
        )
        try:
            self._db.add(customer)
            await self._db.commit()
            await self._db.refresh(customer)
        except SQLAlchemyError as e:
            await self._db.rollback()
            detail = describe_db_error(e)
            logger.error(
                f"Customer save failed: {detail}",
                extra={"operation": "save"},
            )
            raise PersistenceError(detail, "save") from e
        return customer

    async def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        try:
            return await self._db.get(Customer, customer_id)
        except SQLAlchemyError as e:
            raise PersistenceError(describe_db_error(e), "find") from e

    async def find_all(self) -> list[Customer]:
        try:
            result = await self._db.execute(
                select(Customer).order_by(Customer.id),
            )
        except SQLAlchemyError as e:
            raise PersistenceError(describe_db_error(e), "find") from e
        return list(result.scalars().all())

    async def delete_by_id(self, customer_id: CustomerId) -> bool:
        try:
            result = await self._db.execute(
                delete(Customer).where(Customer.id == customer_id),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise PersistenceError(describe_db_error(e), "delete") from e
        return result.rowcount > 0

    async def count(self) -> int:
        try:
            result = await self._db.execute(
                select(func.count()).select_from(Customer),
            )
        except SQLAlchemyError as e:
            raise PersistenceError(describe_db_error(e), "count") from e
        return result.scalar_one()


def get_customer_repository(
    db: AsyncSession = Depends(get_db),
) -> CustomerRepository:
    """FastAPI dependency - repository bound to the request's session."""
    return SqlAlchemyCustomerRepository(db)
