import json
from typing import Any, Dict, List

from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from app.errors import AppError

# request sections that prefix every error location
_SECTIONS = {"body", "query", "path", "header"}


def format_validation_error(errors: List[Dict[str, Any]]) -> str:
    """First validation failure as '<field>: <message>', double quotes stripped."""
    if not errors:
        return "Invalid request"
    error = errors[0]
    loc = [str(part) for part in error.get("loc", ()) if part not in _SECTIONS]
    msg = error.get("msg", "Invalid request")
    message = f"{'.'.join(loc)}: {msg}" if loc else msg
    return message.replace('"', "")


def validate_body(schema):
    """
    Dependency factory: parse the JSON body and validate it against schema
    (a pydantic model or any type TypeAdapter accepts, e.g. List[Model]).
    Declare it before auth dependencies so malformed input fails first.
    """
    adapter = TypeAdapter(schema)

    async def dependency(request: Request):
        raw = await request.body()
        if not raw:
            raise AppError.bad_request("Invalid request")
        try:
            payload = json.loads(raw)
        except ValueError:
            raise AppError.bad_request("Invalid request")
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise AppError.bad_request(format_validation_error(exc.errors()))

    return dependency


def validate_query(schema):
    """Dependency factory: validate the query string against schema."""
    adapter = TypeAdapter(schema)

    def dependency(request: Request):
        try:
            return adapter.validate_python(dict(request.query_params))
        except ValidationError as exc:
            raise AppError.bad_request(format_validation_error(exc.errors()))

    return dependency
