"""Domain enums for the marketplace."""

from __future__ import annotations

from enum import Enum


class UserRole(str, Enum):
    """
    Marketplace role of a user.

    Vendors place orders, suppliers list products. ``both`` may do either.
    """

    vendor = "vendor"
    supplier = "supplier"
    both = "both"

    @property
    def can_buy(self) -> bool:
        return self in (UserRole.vendor, UserRole.both)

    @property
    def can_sell(self) -> bool:
        return self in (UserRole.supplier, UserRole.both)


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    pending = "pending"
    processing = "processing"
    in_transit = "in_transit"
    delivered = "delivered"
    cancelled = "cancelled"


# Orders a vendor still waits on
ACTIVE_ORDER_STATUSES = (OrderStatus.pending, OrderStatus.processing, OrderStatus.in_transit)


class GroupOrderStatus(str, Enum):
    """Lifecycle status of a group order. Only ``active`` group orders accept participants."""

    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class TicketPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TicketStatus(str, Enum):
    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class TicketCategory(str, Enum):
    technical = "technical"
    billing = "billing"
    general = "general"
    feedback = "feedback"
