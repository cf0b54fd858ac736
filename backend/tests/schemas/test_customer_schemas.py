"""Customer Schemas - create payload never carries identity, response reads ORM rows."""

import pytest
from pydantic import ValidationError

from customer_api.models.customer import Customer
from customer_api.schemas.customer import CustomerCreate, CustomerResponse


def test_create_drops_client_id():
    body = CustomerCreate.model_validate({"id": 5, "name": "X"})
    assert "id" not in body.model_dump()


def test_create_coerces_integer_salary_to_float():
    body = CustomerCreate(salary=65000)
    assert body.salary == 65000.0
    assert isinstance(body.salary, float)


def test_create_fields_are_optional():
    assert CustomerCreate().model_dump() == {
        "name": None, "address": None, "salary": None,
    }


def test_create_rejects_non_numeric_salary():
    with pytest.raises(ValidationError):
        CustomerCreate(salary="plenty")


def test_response_reads_orm_attributes():
    row = Customer(id=9, name="Jane", address="456 Oak Ave", salary=65000.0)
    resp = CustomerResponse.model_validate(row)
    assert resp.model_dump() == {
        "id": 9, "name": "Jane", "address": "456 Oak Ave", "salary": 65000.0,
    }
