from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from app.config import settings
from app.errors import AppError


class PrincipalType(str, Enum):
    CUSTOMER = "customer"
    VENDOR = "vendor"


class TokenClaims(BaseModel):
    id: int
    email: str
    type: PrincipalType


def create_access_token(claims: TokenClaims, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign {id, email, type} into a JWT that expires after
    ACCESS_TOKEN_EXPIRE_MINUTES unless expires_delta is given.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = claims.model_dump(mode="json")
    to_encode.update({"exp": expire, "iat": now})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature and expiry and return the embedded claims.
    Raises AppError (401) on any failure.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return TokenClaims(**payload)
    except (JWTError, ValidationError):
        raise AppError.unauthorized("Invalid or expired token")
