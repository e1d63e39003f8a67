"""Role checks for marketplace operations."""

from __future__ import annotations

from vendorlink.core.database.entities import User
from vendorlink.core.models.domain import UserRole

from .errors import PermissionDeniedError


def require_buyer(user: User) -> None:
    """Only vendors (or users with both roles) may place orders."""
    if not UserRole(user.role).can_buy:
        raise PermissionDeniedError("Only vendors can place orders")


def require_seller(user: User) -> None:
    """Only suppliers (or users with both roles) may list products."""
    if not UserRole(user.role).can_sell:
        raise PermissionDeniedError("Only suppliers can list products")
