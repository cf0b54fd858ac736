"""Response Envelope - standardized {message, success, data} wrapper for every endpoint.

Invariants:
    - data is None whenever success is False (validated, not just conventional)
    - data key is always serialized, as null when absent

Design Decisions:
    - Generic over the payload type: each endpoint declares ApiResponse[ItsPayload]
      so OpenAPI documents the concrete shape instead of an untyped box
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, model_validator

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Standard response envelope."""
    message: str
    success: bool
    data: DataT | None = None

    @model_validator(mode="after")
    def check_no_data_on_failure(self) -> "ApiResponse[DataT]":
        if not self.success and self.data is not None:
            raise ValueError("failure envelope cannot carry data")
        return self

    @classmethod
    def ok(cls, message: str, data: DataT) -> "ApiResponse[DataT]":
        return cls(message=message, success=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ApiResponse[DataT]":
        return cls(message=message, success=False, data=None)
