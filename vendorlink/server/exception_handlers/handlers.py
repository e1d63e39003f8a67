"""
Handlers for expected errors.

Every error response has the shape ``{"message": str}``; validation errors
add the ``errors`` list.
"""

import re
from typing import Tuple

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vendorlink.core.logging_config import get_logger
from vendorlink.server.auth import OIDCError
from vendorlink.server.services.errors import MarketplaceError

logger = get_logger(__name__)

# First match wins, so nested paths come before their parents
VALIDATION_MESSAGES: Tuple[Tuple[re.Pattern, str], ...] = tuple(
    (re.compile(pattern), message)
    for pattern, message in (
        (r"^/api/products/[^/]+/reviews$", "Invalid review data"),
        (r"^/api/products/[^/]+/stock$", "Invalid stock data"),
        (r"^/api/products", "Invalid product data"),
        (r"^/api/categories", "Invalid category data"),
        (r"^/api/orders/[^/]+/status$", "Invalid order status"),
        (r"^/api/orders", "Invalid order data"),
        (r"^/api/group-orders/[^/]+/join$", "Invalid participation data"),
        (r"^/api/group-orders/[^/]+/status$", "Invalid group order status"),
        (r"^/api/group-orders", "Invalid group order data"),
        (r"^/api/reviews", "Invalid review data"),
        (r"^/api/price-alerts", "Invalid price alert data"),
        (r"^/api/support-tickets/[^/]+/status$", "Invalid ticket status"),
        (r"^/api/support-tickets", "Invalid support ticket data"),
        (r"^/api/user/role$", "Invalid role"),
        (r"^/api/user/profile$", "Invalid profile data"),
    )
)


def validation_message(path: str) -> str:
    """Resource-specific message for a validation failure on ``path``."""
    for pattern, message in VALIDATION_MESSAGES:
        if pattern.match(path):
            return message
    return "Invalid request data"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(request.url.path)
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "errors": jsonable_encoder(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    logger.info(
        f"{request.method} {request.url.path} rejected with {exc.status_code}: {exc.message}",
        extra={"error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def oidc_error_handler(request: Request, exc: OIDCError) -> JSONResponse:
    logger.error(
        f"Identity provider error in {request.method} {request.url.path}: {exc}",
        extra={"status_code": exc.status_code, "details": exc.details},
    )
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"message": "Authentication provider error"})
