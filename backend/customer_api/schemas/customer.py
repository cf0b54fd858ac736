"""Customer Schemas - payload accepted on create and entity returned to clients.

Invariants:
    - CustomerCreate has no id field; a client-supplied id is silently dropped
    - CustomerResponse always carries the database-assigned id
    - All three attributes are optional; salary is coerced to float
    - salary must be finite: JSON overflow like 1e999 decodes to inf and is rejected
"""

from pydantic import BaseModel, ConfigDict


class CustomerCreate(BaseModel):
    """Customer creation payload - identity is never client-controlled."""
    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    name: str | None = None
    address: str | None = None
    salary: float | None = None


class CustomerResponse(BaseModel):
    """Persisted customer as returned in the envelope's data field."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    address: str | None = None
    salary: float | None = None
