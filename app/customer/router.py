from typing import List

from fastapi import APIRouter, Depends, status

from app.customer import schemas
from app.customer.service import CustomerService
from app.dependencies import get_customer_service
from app.responses import Envelope
from app.security.permissions import CurrentPrincipal, require_customer
from app.validation import validate_body

router = APIRouter()


@router.post(
    "",
    response_model=Envelope[schemas.CustomerOut],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED
)
def sign_up(
    customer: schemas.CustomerCreate = Depends(validate_body(schemas.CustomerCreate)),
    service: CustomerService = Depends(get_customer_service),
):
    new_customer = service.create_customer(customer)
    return Envelope(status=True, message="Customer created successfully", data=new_customer)


@router.post("/auth", response_model=Envelope[schemas.CustomerAuthOut], response_model_exclude_unset=True)
def login(
    credentials: schemas.CustomerLogin = Depends(validate_body(schemas.CustomerLogin)),
    service: CustomerService = Depends(get_customer_service),
):
    result = service.authenticate_customer(credentials)
    return Envelope(status=True, message="Customer authenticated successfully", data=result)


# public directory; no principal required
@router.get("", response_model=Envelope[List[schemas.CustomerOut]], response_model_exclude_unset=True)
def list_all_customers(service: CustomerService = Depends(get_customer_service)):
    customers = service.get_customers()
    return Envelope(status=True, message="Customers fetched successfully", data=customers)


@router.get("/me", response_model=Envelope[schemas.CustomerOut], response_model_exclude_unset=True)
def get_current_customer_info(
    current_customer: CurrentPrincipal = Depends(require_customer),
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.get_customer(current_customer.id)
    return Envelope(status=True, message="Customer fetched successfully", data=customer)


@router.put("/me", response_model=Envelope[schemas.CustomerOut], response_model_exclude_unset=True)
def update_current_customer(
    customer_update: schemas.CustomerUpdate = Depends(validate_body(schemas.CustomerUpdate)),
    current_customer: CurrentPrincipal = Depends(require_customer),
    service: CustomerService = Depends(get_customer_service),
):
    customer = service.update_customer(current_customer.id, customer_update)
    return Envelope(status=True, message="Customer updated successfully", data=customer)
