"""
Database entity models.

Modules:
- users: Marketplace users and their role
- catalog: Categories and products
- orders: Vendor orders
- group_orders: Group buying campaigns and their participants
- reviews: Supplier reviews and product reviews
- price_alerts: Vendor price alerts
- support_tickets: Support requests
- sessions: Server-side login sessions
"""

from . import (
    catalog,
    group_orders,
    orders,
    price_alerts,
    reviews,
    sessions,
    support_tickets,
    users,
)
from .catalog import Category, Product
from .group_orders import GroupOrder, GroupOrderParticipant
from .orders import Order
from .price_alerts import PriceAlert
from .reviews import ProductReview, Review
from .sessions import LoginSession
from .support_tickets import SupportTicket
from .users import User

__all__ = [
    "Category",
    "GroupOrder",
    "GroupOrderParticipant",
    "LoginSession",
    "Order",
    "PriceAlert",
    "Product",
    "ProductReview",
    "Review",
    "SupportTicket",
    "User",
    "catalog",
    "group_orders",
    "orders",
    "price_alerts",
    "reviews",
    "sessions",
    "support_tickets",
    "users",
]
