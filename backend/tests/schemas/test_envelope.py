"""Response Envelope - data present only on success, always serialized.

Invariants:
    - failure envelopes reject data
    - data key survives serialization as null
    - parametrized envelope validates its payload type
"""

import pytest
from pydantic import ValidationError

from customer_api.schemas.customer import CustomerResponse
from customer_api.schemas.envelope import ApiResponse


def test_ok_carries_payload():
    customer = CustomerResponse(id=3, name="Ann", address=None, salary=1.5)
    env = ApiResponse[CustomerResponse].ok("done", customer)
    assert env.success is True
    assert env.data.id == 3


def test_failure_serializes_null_data():
    assert ApiResponse.failure("nope").model_dump() == {
        "message": "nope", "success": False, "data": None,
    }


def test_failure_with_data_is_rejected():
    with pytest.raises(ValidationError):
        ApiResponse[CustomerResponse](
            message="bad", success=False,
            data=CustomerResponse(id=1),
        )


def test_success_without_data_is_allowed():
    env = ApiResponse[CustomerResponse](message="ok", success=True)
    assert env.data is None


def test_parametrized_envelope_validates_payload():
    with pytest.raises(ValidationError):
        ApiResponse[CustomerResponse](
            message="ok", success=True, data={"name": "missing id"},
        )
