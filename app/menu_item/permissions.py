from fastapi import Depends
from loguru import logger

from app.dependencies import get_menu_item_repository
from app.errors import AppError
from app.menu_item.repository import MenuItemRepository
from app.security.permissions import CurrentPrincipal, require_vendor


def menu_item_owner_required(
    menu_item_id: int,
    current_vendor: CurrentPrincipal = Depends(require_vendor),
    menu_item_repository: MenuItemRepository = Depends(get_menu_item_repository),
) -> CurrentPrincipal:
    """
    The authenticated vendor must own the menu item named in the path.
    Looked up on every request.
    """
    menu_item = menu_item_repository.get_by_id(menu_item_id)
    if not menu_item:
        raise AppError.not_found("Menu item not found")

    if menu_item.vendor_id != current_vendor.id:
        logger.warning(
            f"Ownership check failed: vendor {current_vendor.id} on menu item {menu_item_id}"
        )
        raise AppError.forbidden("You do not have permission to access this menu item")

    return current_vendor
