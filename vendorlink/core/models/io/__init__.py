"""
I/O models for API requests and responses.

These Pydantic schemas define the contract between API endpoints and clients
and are kept separate from the database entities. Field names are snake_case
in Python and camelCase on the wire.
"""

from .auth import SessionDebug
from .base import CamelModel, NaiveUTCDatetime
from .catalog import (
    CategoryCreate,
    CategoryRead,
    ProductCreate,
    ProductRead,
    ProductUpdate,
    StockUpdate,
)
from .group_orders import (
    GroupOrderCreate,
    GroupOrderRead,
    GroupOrderStatusUpdate,
    JoinGroupOrder,
    ParticipantRead,
)
from .orders import (
    CartCheckout,
    CartItem,
    CheckoutResult,
    OrderCreate,
    OrderRead,
    OrderStatusUpdate,
)
from .price_alerts import PriceAlertCreate, PriceAlertRead, TriggeredPriceAlert
from .reviews import ProductReviewCreate, ProductReviewRead, ReviewCreate, ReviewRead
from .stats import SupplierStats, VendorStats
from .support_tickets import TicketCreate, TicketRead, TicketStatusUpdate
from .users import ProfileUpdate, RoleUpdate, UserRead

__all__ = [
    "CamelModel",
    "CartCheckout",
    "CartItem",
    "CategoryCreate",
    "CategoryRead",
    "CheckoutResult",
    "GroupOrderCreate",
    "GroupOrderRead",
    "GroupOrderStatusUpdate",
    "JoinGroupOrder",
    "NaiveUTCDatetime",
    "OrderCreate",
    "OrderRead",
    "OrderStatusUpdate",
    "ParticipantRead",
    "PriceAlertCreate",
    "PriceAlertRead",
    "ProductCreate",
    "ProductRead",
    "ProductReviewCreate",
    "ProductReviewRead",
    "ProductUpdate",
    "ProfileUpdate",
    "ReviewCreate",
    "ReviewRead",
    "RoleUpdate",
    "SessionDebug",
    "StockUpdate",
    "SupplierStats",
    "TicketCreate",
    "TicketRead",
    "TicketStatusUpdate",
    "TriggeredPriceAlert",
    "UserRead",
    "VendorStats",
]
