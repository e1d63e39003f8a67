"""
Repository layer, one repository per aggregate.

All repositories take the request's ``AsyncSession``. Methods named
``create``/``update``/``delete`` commit; ``add`` and the group order slot
reservation only flush so services can group several writes into one
transaction.
"""

from .catalog import CategoryRepository, ProductRepository
from .group_orders import GroupOrderRepository
from .orders import OrderRepository
from .price_alerts import PriceAlertRepository
from .reviews import ProductReviewRepository, ReviewRepository
from .sessions import SessionRepository
from .support_tickets import SupportTicketRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "AsyncCrudRepository",
    "CategoryRepository",
    "GroupOrderRepository",
    "OrderRepository",
    "PriceAlertRepository",
    "ProductRepository",
    "ProductReviewRepository",
    "ReviewRepository",
    "SessionRepository",
    "SupportTicketRepository",
    "UserRepository",
]
