from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.customer.models import Customer


class CustomerRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: dict) -> Customer:
        customer = Customer(**data)
        self.db.add(customer)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(customer)
        return customer

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def get_by_email(self, email: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.email == email).first()

    def list_all(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.id).all()

    def update(self, customer: Customer, changes: dict) -> Customer:
        for key, value in changes.items():
            setattr(customer, key, value)
        self.db.commit()
        self.db.refresh(customer)
        return customer
