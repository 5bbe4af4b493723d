from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class Envelope(BaseModel):
    """Shape shared by every JSON body the API returns."""

    success: bool
    data: Any = None
    message: str | None = None
    error: str | None = None


def json_response(
    success: bool,
    status: int,
    data: Any = None,
    message: str | None = None,
    error: str | None = None,
) -> JSONResponse:
    envelope = Envelope(
        success=success,
        data=jsonable_encoder(data),
        message=message,
        error=error,
    )
    return JSONResponse(content=envelope.model_dump(), status_code=status)


def ok(data: Any = None, message: str = "Request successful", status: int = 200) -> JSONResponse:
    return json_response(True, status, data=data, message=message)


def created(data: Any = None, message: str = "Resource created") -> JSONResponse:
    return json_response(True, 201, data=data, message=message)


def not_found(message: str = "Resource not found") -> JSONResponse:
    return json_response(False, 404, message=message, error=message)


def bad_request(message: str = "Bad request") -> JSONResponse:
    return json_response(False, 400, message=message, error=message)


def fail(message: str = "Internal server error", status: int = 500) -> JSONResponse:
    return json_response(False, status, message=message, error=message)
