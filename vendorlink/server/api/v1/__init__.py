"""Version 1 API routers."""

from . import (
    auth,
    categories,
    group_orders,
    health,
    orders,
    price_alerts,
    products,
    reviews,
    stats,
    support_tickets,
    users,
)

__all__ = [
    "auth",
    "categories",
    "group_orders",
    "health",
    "orders",
    "price_alerts",
    "products",
    "reviews",
    "stats",
    "support_tickets",
    "users",
]
