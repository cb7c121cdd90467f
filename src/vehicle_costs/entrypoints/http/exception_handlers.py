"""FastAPI exception handlers.

Every failure leaves the API in the same shape:
``{"detail": ..., "code": ..., "errors": [{"field", "message", "code"}]}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from vehicle_costs.domain.errors import DomainError

logger = logging.getLogger(__name__)

# HTTP_422_UNPROCESSABLE_CONTENT; the constant name differs across Starlette releases
UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": UNPROCESSABLE,
    "MARKET_CONFIG_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its HTTP status; unknown codes become 400.

    Validation failures keep their field-level ``errors`` list so the caller
    can show every problem inline.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={"error_code": exc.error_code, "error_message": exc.message, **_request_context(request)},
        )

    error_dict = exc.to_dict()
    content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies (wrong JSON types, missing objects) as 422."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info("Request validation error", extra={"errors": errors, **_request_context(request)})

    return JSONResponse(
        status_code=UNPROCESSABLE,
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.info("Value error", extra={"error_message": str(exc), **_request_context(request)})

    return JSONResponse(
        status_code=UNPROCESSABLE,
        content={"detail": str(exc), "code": "INVALID_VALUE"},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: log with traceback, answer with a generic 500."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, "error_message": str(exc), **_request_context(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
