"""
Order placement and fulfilment.

Prices always come from the product at the time of ordering; a client can
only choose the product and the quantity.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import Order, User
from vendorlink.core.database.repositories import OrderRepository, ProductRepository
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.domain import OrderStatus, line_total
from vendorlink.core.models.io import CartCheckout, OrderCreate
from vendorlink.core.models.io.orders import DeliveryDetails
from vendorlink.core.monitoring import log_business_event

from .access import require_buyer
from .errors import BusinessRuleError, NotFoundError

logger = get_logger(__name__)


class OrderService:
    """Place orders for a vendor and move them through their lifecycle."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.orders = OrderRepository(session)
        self.products = ProductRepository(session)

    async def _build_order(self, vendor_id: str, product_id: str, quantity: int, details: DeliveryDetails) -> Order:
        product = await self.products.get_by_id(product_id)
        if product is None or not product.is_active:
            raise NotFoundError("Product not found")
        if quantity < product.minimum_order_quantity:
            raise BusinessRuleError(
                f"Minimum order quantity for {product.name} is {product.minimum_order_quantity}"
            )
        return Order(
            vendor_id=vendor_id,
            supplier_id=product.supplier_id,
            product_id=product.id,
            quantity=quantity,
            price_per_unit=product.price_per_unit,
            total_amount=line_total(product.price_per_unit, quantity),
            status=OrderStatus.pending.value,
            delivery_address=details.delivery_address,
            expected_delivery_date=details.expected_delivery_date,
            notes=details.notes,
        )

    async def place_order(self, vendor: User, payload: OrderCreate) -> Order:
        require_buyer(vendor)
        order = await self._build_order(vendor.id, payload.product_id, payload.quantity, payload)
        order = await self.orders.create(order)
        log_business_event("order.created", order_id=order.id, vendor_id=vendor.id, total=str(order.total_amount))
        return order

    async def checkout(self, vendor: User, cart: CartCheckout) -> List[Order]:
        """Create one order per cart item; either all of them are stored or none."""
        require_buyer(vendor)
        vendor_id = vendor.id
        try:
            orders = []
            for item in cart.items:
                order = await self._build_order(vendor_id, item.product_id, item.quantity, cart)
                orders.append(await self.orders.add(order))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        for order in orders:
            await self.session.refresh(order)
        log_business_event("order.checkout", vendor_id=vendor_id, orders=len(orders))
        return orders

    async def list_orders(self, user_id: str, kind: Optional[str] = None, status: Optional[str] = None) -> List[Order]:
        """The user's orders as vendor, as supplier, or both (vendor orders first)."""
        if kind == "vendor":
            return await self.orders.list_for_vendor(user_id, status)
        if kind == "supplier":
            return await self.orders.list_for_supplier(user_id, status)
        combined = await self.orders.list_for_vendor(user_id, status)
        seen = {order.id for order in combined}
        combined.extend(o for o in await self.orders.list_for_supplier(user_id, status) if o.id not in seen)
        return combined

    async def get_order(self, user_id: str, order_id: str) -> Order:
        order = await self.orders.get_for_party(order_id, user_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def update_status(self, supplier_id: str, order_id: str, status: OrderStatus) -> Order:
        """Move an order to ``status``. Only the order's supplier may do this."""
        order = await self.orders.get_by_id(order_id)
        if order is None or order.supplier_id != supplier_id:
            raise NotFoundError("Order not found")
        order.status = status.value
        order.updated_at = utc_now_naive()
        if status is OrderStatus.delivered:
            order.actual_delivery_date = utc_now_naive()
        order = await self.orders.update(order)
        log_business_event("order.status_changed", order_id=order.id, status=order.status)
        return order
