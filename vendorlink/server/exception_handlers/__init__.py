"""
Exception handlers for the VendorLink server.

This package contains the handlers for expected and unexpected errors and a
setup function to register them with the FastAPI application.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from vendorlink.core.logging_config import get_logger
from vendorlink.server.auth import OIDCError
from vendorlink.server.services.errors import MarketplaceError

from .global_handler import global_exception_handler
from .handlers import (
    http_exception_handler,
    marketplace_error_handler,
    oidc_error_handler,
    validation_exception_handler,
    validation_message,
)

logger = get_logger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(OIDCError, oidc_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")


__all__ = [
    "global_exception_handler",
    "http_exception_handler",
    "marketplace_error_handler",
    "oidc_error_handler",
    "setup_exception_handlers",
    "validation_exception_handler",
    "validation_message",
]
