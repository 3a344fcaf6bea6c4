"""
Per-request object graph: session -> repositories -> services.

Every collaborator is passed in through its constructor; FastAPI's
dependency cache makes all of them share the request's session.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from app.customer.repository import CustomerRepository
from app.customer.service import CustomerService
from app.database import get_db
from app.menu_item.repository import MenuItemRepository
from app.menu_item.service import MenuItemService
from app.vendor.repository import VendorRepository
from app.vendor.service import VendorService


def get_vendor_repository(db: Session = Depends(get_db)) -> VendorRepository:
    return VendorRepository(db)


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    return CustomerRepository(db)


def get_menu_item_repository(db: Session = Depends(get_db)) -> MenuItemRepository:
    return MenuItemRepository(db)


def get_vendor_service(
    vendor_repository: VendorRepository = Depends(get_vendor_repository),
) -> VendorService:
    return VendorService(vendor_repository)


def get_customer_service(
    customer_repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerService:
    return CustomerService(customer_repository)


def get_menu_item_service(
    menu_item_repository: MenuItemRepository = Depends(get_menu_item_repository),
    vendor_repository: VendorRepository = Depends(get_vendor_repository),
) -> MenuItemService:
    return MenuItemService(menu_item_repository, vendor_repository)
