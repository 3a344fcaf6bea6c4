from typing import List

from loguru import logger
from sqlalchemy.exc import IntegrityError

from app.customer import schemas
from app.customer.repository import CustomerRepository
from app.errors import AppError
from app.security.passwords import hash_password, verify_password
from app.security.tokens import PrincipalType, TokenClaims, create_access_token


class CustomerService:
    def __init__(self, customer_repository: CustomerRepository):
        self.customer_repository = customer_repository

    def create_customer(self, customer: schemas.CustomerCreate) -> schemas.CustomerOut:
        if self.customer_repository.get_by_email(customer.email):
            raise AppError.conflict("Customer already exists")

        data = customer.model_dump()
        data["password"] = hash_password(customer.password)
        try:
            new_customer = self.customer_repository.create(data)
        except IntegrityError:
            raise AppError.conflict("Customer already exists")

        logger.info(f"Customer registered: id={new_customer.id}")
        return schemas.CustomerOut.model_validate(new_customer)

    def authenticate_customer(self, credentials: schemas.CustomerLogin) -> schemas.CustomerAuthOut:
        customer = self.customer_repository.get_by_email(credentials.email)

        if not customer or not verify_password(credentials.password, customer.password):
            logger.warning("Customer authentication denied")
            raise AppError.unauthorized("Invalid email or password")

        token = create_access_token(
            TokenClaims(id=customer.id, email=customer.email, type=PrincipalType.CUSTOMER)
        )
        logger.info(f"Customer authenticated: id={customer.id}")
        return schemas.CustomerAuthOut(
            customer=schemas.CustomerOut.model_validate(customer), token=token
        )

    def get_customer(self, customer_id: int) -> schemas.CustomerOut:
        customer = self.customer_repository.get_by_id(customer_id)
        if not customer:
            raise AppError.not_found("Customer not found")
        return schemas.CustomerOut.model_validate(customer)

    def get_customers(self) -> List[schemas.CustomerOut]:
        return [schemas.CustomerOut.model_validate(c) for c in self.customer_repository.list_all()]

    def update_customer(self, customer_id: int, customer_update: schemas.CustomerUpdate) -> schemas.CustomerOut:
        customer = self.customer_repository.get_by_id(customer_id)
        if not customer:
            raise AppError.not_found("Customer not found")

        changes = customer_update.model_dump(exclude_unset=True, exclude_none=True)
        customer = self.customer_repository.update(customer, changes)
        logger.info(f"Customer updated: id={customer.id}")
        return schemas.CustomerOut.model_validate(customer)
