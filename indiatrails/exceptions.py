"""
Domain exceptions raised by repositories and converted to JSON by the app's exception handlers.
"""

import uuid

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class IndiaTrailsError(Exception):
    """Base exception. Carries the HTTP status the API should answer with."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class InvalidReferenceError(IndiaTrailsError):
    """A walk points at a region or difficulty that does not exist."""

    def __init__(self, entity: str, entity_id: uuid.UUID):
        super().__init__(f"{entity} with id {entity_id} does not exist")
        self.entity = entity
        self.entity_id = entity_id


class UserAlreadyExistsError(IndiaTrailsError):
    def __init__(self, email: str):
        super().__init__("User with this email already exists")
        self.email = email


async def indiatrails_exception_handler(request: Request, exc: IndiaTrailsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _field_name(loc: tuple) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts in front of the field
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing fields are a 400 with one entry per failing field."""
    errors = [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )
