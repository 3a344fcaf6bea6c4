from typing import Annotated, List

from fastapi import APIRouter, Depends, status
from pydantic import Field

from app.dependencies import get_menu_item_service
from app.errors import AppError
from app.menu_item import schemas
from app.menu_item.permissions import menu_item_owner_required
from app.menu_item.service import DEFAULT_LIMIT, DEFAULT_PAGE, MenuItemService
from app.responses import Envelope
from app.security.permissions import CurrentPrincipal, require_vendor
from app.validation import validate_body, validate_query

MAX_LIMIT = 100

MenuItemBatch = Annotated[List[schemas.MenuItemCreate], Field(min_length=1)]

router = APIRouter()


# ================= CREATE =================
@router.post(
    "",
    response_model=Envelope[List[schemas.MenuItemOut]],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED
)
def create_menu_items(
    items: List[schemas.MenuItemCreate] = Depends(validate_body(MenuItemBatch)),
    current_vendor: CurrentPrincipal = Depends(require_vendor),
    service: MenuItemService = Depends(get_menu_item_service),
):
    created = service.create_menu_items(current_vendor.id, items)
    return Envelope(status=True, message="Menu items created successfully", data=created)


# ================= LIST =================
@router.get("", response_model=Envelope[List[schemas.MenuItemOut]], response_model_exclude_unset=True)
def list_vendor_menu_items(
    query: schemas.MenuItemQuery = Depends(validate_query(schemas.MenuItemQuery)),
    service: MenuItemService = Depends(get_menu_item_service),
):
    if query.vendor_id is None:
        raise AppError.bad_request("Vendor ID is required")

    page = DEFAULT_PAGE if query.page is None else max(query.page, 1)
    limit = DEFAULT_LIMIT if query.limit is None else min(max(query.limit, 1), MAX_LIMIT)

    result = service.get_vendor_menu_items(query.vendor_id, page=page, limit=limit)
    return Envelope(
        status=True,
        message="Menu items fetched successfully",
        data=result.data,
        meta=result.meta,
    )


# ================= READ =================
@router.get("/{menu_item_id}", response_model=Envelope[schemas.MenuItemOut], response_model_exclude_unset=True)
def read_menu_item(menu_item_id: int, service: MenuItemService = Depends(get_menu_item_service)):
    menu_item = service.get_menu_item(menu_item_id)
    return Envelope(status=True, message="Menu item fetched successfully", data=menu_item)


# ================= UPDATE =================
@router.put("/{menu_item_id}", response_model=Envelope[schemas.MenuItemOut], response_model_exclude_unset=True)
def update_menu_item(
    menu_item_id: int,
    menu_item_update: schemas.MenuItemUpdate = Depends(validate_body(schemas.MenuItemUpdate)),
    current_vendor: CurrentPrincipal = Depends(menu_item_owner_required),
    service: MenuItemService = Depends(get_menu_item_service),
):
    menu_item = service.update_menu_item(current_vendor.id, menu_item_id, menu_item_update)
    return Envelope(status=True, message="Menu item updated successfully", data=menu_item)


# ================= DELETE =================
@router.delete("/{menu_item_id}", response_model=Envelope, response_model_exclude_unset=True)
def delete_menu_item(
    menu_item_id: int,
    current_vendor: CurrentPrincipal = Depends(menu_item_owner_required),
    service: MenuItemService = Depends(get_menu_item_service),
):
    service.delete_menu_item(current_vendor.id, menu_item_id)
    return Envelope(status=True, message="Menu item deleted successfully")
