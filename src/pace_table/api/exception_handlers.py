"""
Error responses for the pace table API.

Every failure leaves the API as {"error": {"code", "message", "details"}}:
- PaceTableError subclasses keep their own code and HTTP status
- bad query parameters or bodies answer 422 with the offending fields
- anything else is logged and answers 500
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ErrorCode, PaceTableError, error_body

logger = logging.getLogger(__name__)


def error_response(
    status_code: int,
    code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(code.value, message, details))


async def pace_table_error_handler(request: Request, exc: PaceTableError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc!r}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(
    request: Request,
    exc: PydanticValidationError | RequestValidationError,
) -> JSONResponse:
    """List each rejected field with pydantic's message for it."""
    fields = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    return error_response(
        422,
        ErrorCode.VALIDATION_ERROR,
        "Invalid pace table parameters",
        details={"errors": fields},
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error on {request.method} {request.url.path}")
    return error_response(500, ErrorCode.INTERNAL_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PaceTableError, pace_table_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PydanticValidationError, validation_error_handler)
    # Catch-all, registered last
    app.add_exception_handler(Exception, unexpected_error_handler)
