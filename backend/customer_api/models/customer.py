"""Customer ORM - the single persisted entity.

Invariants:
    - id is an autoincrement integer primary key, assigned on first flush
    - name, address and salary are nullable; no validation at this layer
    - table name customer_model matches the existing production schema

Design Decisions:
    - Float for salary: stored as double precision on PostgreSQL
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.db.base import Base


class Customer(Base):
    """Customer record - identity plus three optional attributes."""
    __tablename__ = "customer_model"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    salary: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Customer(id={self.id!r}, name={self.name!r}, "
            f"address={self.address!r}, salary={self.salary!r})"
        )
