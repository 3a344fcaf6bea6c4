import math
from typing import List

from loguru import logger

from app.errors import AppError
from app.menu_item import schemas
from app.menu_item.models import MenuItem
from app.menu_item.repository import MenuItemRepository
from app.responses import PaginationMeta
from app.vendor.models import Vendor
from app.vendor.repository import VendorRepository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class MenuItemService:
    def __init__(self, menu_item_repository: MenuItemRepository, vendor_repository: VendorRepository):
        self.menu_item_repository = menu_item_repository
        self.vendor_repository = vendor_repository

    def _validate_vendor(self, vendor_id: int) -> Vendor:
        vendor = self.vendor_repository.get_by_id(vendor_id)
        if not vendor:
            raise AppError.not_found("Vendor not found")
        return vendor

    def _get_owned_item(self, vendor_id: int, menu_item_id: int, action: str) -> MenuItem:
        # repeated here so the service is safe to call without the route guard
        menu_item = self.menu_item_repository.get_by_id(menu_item_id)
        if not menu_item:
            raise AppError.not_found("Menu item not found")
        if menu_item.vendor_id != vendor_id:
            logger.warning(
                f"Vendor {vendor_id} tried to {action} menu item {menu_item_id} owned by vendor {menu_item.vendor_id}"
            )
            raise AppError.forbidden(f"You do not have permission to {action} this menu item")
        return menu_item

    def create_menu_items(self, vendor_id: int, items: List[schemas.MenuItemCreate]) -> List[schemas.MenuItemOut]:
        self._validate_vendor(vendor_id)

        rows = []
        for item in items:
            row = item.model_dump(mode="json")
            row["vendor_id"] = vendor_id
            rows.append(row)

        created = self.menu_item_repository.create_many(rows)
        logger.info(f"Vendor {vendor_id} created {len(created)} menu item(s)")
        return [schemas.MenuItemOut.model_validate(m) for m in created]

    def get_vendor_menu_items(self, vendor_id: int, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> schemas.MenuItemPage:
        self._validate_vendor(vendor_id)

        total = self.menu_item_repository.count_by_vendor(vendor_id)
        menu_items = self.menu_item_repository.list_by_vendor(
            vendor_id, limit=limit, offset=(page - 1) * limit
        )
        total_pages = math.ceil(total / limit)

        return schemas.MenuItemPage(
            data=[schemas.MenuItemOut.model_validate(m) for m in menu_items],
            meta=PaginationMeta(
                page=page,
                limit=limit,
                total=total,
                total_pages=total_pages,
                has_next=page < total_pages,
                has_prev=page > 1,
            ),
        )

    def get_menu_item(self, menu_item_id: int) -> schemas.MenuItemOut:
        menu_item = self.menu_item_repository.get_by_id(menu_item_id)
        if not menu_item:
            raise AppError.not_found("Menu item not found")
        return schemas.MenuItemOut.model_validate(menu_item)

    def update_menu_item(self, vendor_id: int, menu_item_id: int, menu_item_update: schemas.MenuItemUpdate) -> schemas.MenuItemOut:
        menu_item = self._get_owned_item(vendor_id, menu_item_id, "update")
        changes = menu_item_update.model_dump(mode="json", exclude_unset=True, exclude_none=True)
        menu_item = self.menu_item_repository.update(menu_item, changes)
        logger.info(f"Menu item {menu_item_id} updated by vendor {vendor_id}")
        return schemas.MenuItemOut.model_validate(menu_item)

    def delete_menu_item(self, vendor_id: int, menu_item_id: int):
        menu_item = self._get_owned_item(vendor_id, menu_item_id, "delete")
        self.menu_item_repository.delete(menu_item)
        logger.info(f"Menu item {menu_item_id} deleted by vendor {vendor_id}")
