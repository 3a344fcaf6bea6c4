from typing import Optional

from fastapi import Depends, Request
from loguru import logger
from pydantic import BaseModel

from app.errors import AppError
from app.security.tokens import PrincipalType, decode_access_token


class CurrentPrincipal(BaseModel):
    id: int
    email: str


def get_bearer_token(request: Request) -> str:
    auth_header: Optional[str] = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise AppError.unauthorized("No token provided")
    token = auth_header[len("Bearer "):].strip()
    if not token:
        raise AppError.unauthorized("No token provided")
    return token


def principal_required(expected_type: PrincipalType):
    """
    Dependency factory: the request must carry a valid bearer token whose
    type claim equals expected_type. Yields {id, email} of the principal.
    """

    def wrapper(token: str = Depends(get_bearer_token)) -> CurrentPrincipal:
        claims = decode_access_token(token)
        if claims.type != expected_type:
            logger.warning(
                f"Token type '{claims.type.value}' rejected on {expected_type.value} route"
            )
            raise AppError.unauthorized("Invalid token type")
        return CurrentPrincipal(id=claims.id, email=claims.email)

    return wrapper


require_vendor = principal_required(PrincipalType.VENDOR)
require_customer = principal_required(PrincipalType.CUSTOMER)
