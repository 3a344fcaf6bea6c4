from datetime import datetime
from typing import List, Optional

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter, ValidationError, validator

from app.responses import PaginationMeta

_uri_adapter = TypeAdapter(AnyUrl)


def check_uri(value: Optional[str]) -> Optional[str]:
    """Reject non-URIs but keep the string exactly as the client sent it."""
    if value is None:
        return value
    try:
        _uri_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid uri")
    return value


# ================= CREATE =================
class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: int = Field(..., gt=0)
    image: str

    @validator("image")
    def image_is_uri(cls, v):
        return check_uri(v)


# ================= UPDATE =================
class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(None, gt=0)
    image: Optional[str] = None

    @validator("image")
    def image_is_uri(cls, v):
        return check_uri(v)


# ================= LIST QUERY =================
class MenuItemQuery(BaseModel):
    vendor_id: Optional[int] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    @validator("vendor_id", "page", "limit", pre=True)
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


# ================= RESPONSE =================
class MenuItemOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: int
    image: Optional[str] = None
    vendor_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MenuItemPage(BaseModel):
    data: List[MenuItemOut]
    meta: PaginationMeta
