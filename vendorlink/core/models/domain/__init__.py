"""Domain enums and pricing helpers for the marketplace."""

from .enums import (
    ACTIVE_ORDER_STATUSES,
    GroupOrderStatus,
    OrderStatus,
    TicketCategory,
    TicketPriority,
    TicketStatus,
    UserRole,
)
from .pricing import (
    average_rating,
    group_savings,
    line_total,
    to_money,
    total_savings,
)

__all__ = [
    "ACTIVE_ORDER_STATUSES",
    "GroupOrderStatus",
    "OrderStatus",
    "TicketCategory",
    "TicketPriority",
    "TicketStatus",
    "UserRole",
    "average_rating",
    "group_savings",
    "line_total",
    "to_money",
    "total_savings",
]
