"""Domain errors raised by services and routers.

Each error carries the HTTP status it is rendered with by the exception
handlers, so services stay free of FastAPI types.
"""

from __future__ import annotations


class MarketplaceError(Exception):
    """Base error for rejected marketplace operations.

    Args:
        message: Human-readable error description returned to the client.
    """

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MarketplaceError):
    """The resource does not exist or does not belong to the caller."""

    status_code = 404


class PermissionDeniedError(MarketplaceError):
    """The caller's marketplace role does not allow the operation."""

    status_code = 403


class ConflictError(MarketplaceError):
    """The resource's current state does not allow the operation."""

    status_code = 409


class BusinessRuleError(MarketplaceError):
    """The request is well-formed but breaks a marketplace rule."""

    status_code = 400
