"""Customer Routes - create endpoint answering with the standard envelope.

Invariants:
    - Absent or null body → MissingCustomerDataError (400), repository never called
    - Successful save → 201 with the persisted customer, id included
    - PersistenceError from the repository → CustomerSaveFailedError (500) with the store's detail
    - No retries, no duplicate detection
"""

import logging

from fastapi import APIRouter, Body, Depends, status

from customer_api.core.errors import (
    CustomerSaveFailedError, MissingCustomerDataError, PersistenceError,
)
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.infrastructure.customer_repository import (
    get_customer_repository,
)
from customer_api.schemas.customer import CustomerCreate, CustomerResponse
from customer_api.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customer", tags=["Customer Controller"])

CUSTOMER_TAG_METADATA = {
    "name": "Customer Controller",
    "description": "To manage customer details",
}


@router.post(
    "/add-customer",
    response_model=ApiResponse[CustomerResponse],
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ApiResponse[CustomerResponse]},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ApiResponse[CustomerResponse],
        },
    },
)
async def add_customer(
    body: CustomerCreate | None = Body(None),
    repository: CustomerRepository = Depends(get_customer_repository),
):
    """Persist a new customer and return it with its assigned id."""
    if body is None:
        raise MissingCustomerDataError()
    try:
        customer = await repository.save(body)
    except PersistenceError as e:
        raise CustomerSaveFailedError(e.detail) from e
    logger.info("Customer created", extra={"customer_id": customer.id})
    return ApiResponse[CustomerResponse].ok(
        "Customer Added Successfully",
        CustomerResponse.model_validate(customer),
    )
