from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# -------- REQUESTS --------
class CustomerCreate(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8)


class CustomerUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)


class CustomerLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# -------- RESPONSES --------
class CustomerOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class CustomerAuthOut(BaseModel):
    customer: CustomerOut
    token: str
