"""
Group buying.

Joining is the only operation in the system where concurrent requests compete
for the same row. ``join`` reserves a slot with one conditional UPDATE and
inserts the participant in the same transaction; the unique constraint on
(group_order_id, vendor_id) turns a racing duplicate join into an
``IntegrityError`` which is reported as a conflict.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import GroupOrder, GroupOrderParticipant, Order, User
from vendorlink.core.database.repositories import GroupOrderRepository, ProductRepository
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.domain import GroupOrderStatus, OrderStatus, line_total
from vendorlink.core.models.io import GroupOrderCreate
from vendorlink.core.monitoring import log_business_event

from .errors import BusinessRuleError, ConflictError, NotFoundError

logger = get_logger(__name__)


def _join_rejection(status: str, deadline: datetime, now: datetime) -> str:
    if status != GroupOrderStatus.active.value:
        return "Group order is no longer active"
    if deadline <= now:
        return "Group order deadline has passed"
    # Either full when read or another join took the last slot since
    return "Group order is full"


class GroupOrderService:
    """Organise, join and close group orders."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.group_orders = GroupOrderRepository(session)
        self.products = ProductRepository(session)

    async def create(self, organizer: User, payload: GroupOrderCreate) -> GroupOrder:
        if await self.products.get_by_id(payload.product_id) is None:
            raise NotFoundError("Product not found")
        if payload.deadline <= utc_now_naive():
            raise BusinessRuleError("Deadline must be in the future")
        group_order = GroupOrder(organizer_id=organizer.id, **payload.model_dump())
        group_order = await self.group_orders.create(group_order)
        log_business_event("group_order.created", group_order_id=group_order.id, organizer_id=organizer.id)
        return group_order

    async def join(self, group_order_id: str, vendor: User, quantity: int) -> GroupOrderParticipant:
        """Add the vendor to the group order with ``quantity`` units and return the participation.

        Raises:
            NotFoundError: The group order does not exist.
            ConflictError: It is full, no longer active, past its deadline, or
                the vendor already joined.
        """
        vendor_id = vendor.id
        group_order = await self.group_orders.get_by_id(group_order_id)
        if group_order is None:
            raise NotFoundError("Group order not found")
        if await self.group_orders.get_participant(group_order_id, vendor_id) is not None:
            raise ConflictError("You have already joined this group order")

        now = utc_now_naive()
        # Read before the UPDATE; a rollback expires the instance
        status, deadline = group_order.status, group_order.deadline
        try:
            if not await self.group_orders.reserve_slot(group_order_id, quantity, now):
                await self.session.rollback()
                raise ConflictError(_join_rejection(status, deadline, now))
            participant = await self.group_orders.add_participant(
                GroupOrderParticipant(group_order_id=group_order_id, vendor_id=vendor_id, quantity=quantity)
            )
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError("You have already joined this group order") from e

        await self.session.refresh(group_order)
        await self.session.refresh(participant)
        log_business_event("group_order.joined", group_order_id=group_order_id, vendor_id=vendor_id, quantity=quantity)
        return participant

    async def participants(self, group_order_id: str) -> List[GroupOrderParticipant]:
        if await self.group_orders.get_by_id(group_order_id) is None:
            raise NotFoundError("Group order not found")
        return await self.group_orders.list_participants(group_order_id)

    async def update_status(self, group_order_id: str, organizer_id: str, status: GroupOrderStatus) -> GroupOrder:
        """Close an active group order.

        Completing requires the target quantity to be reached and places one
        pending order per participant at the group price. Cancelling just
        closes the group order.
        """
        group_order = await self.group_orders.get_by_id(group_order_id)
        if group_order is None or group_order.organizer_id != organizer_id:
            raise NotFoundError("Group order not found")
        if group_order.status != GroupOrderStatus.active.value:
            raise ConflictError(f"Group order is already {group_order.status}")
        if status is GroupOrderStatus.active:
            raise ConflictError("Group order is already active")

        created = 0
        if status is GroupOrderStatus.completed:
            if group_order.current_quantity < group_order.target_quantity:
                raise ConflictError(
                    f"Target quantity not reached ({group_order.current_quantity}/{group_order.target_quantity})"
                )
            product = await self.products.get_by_id(group_order.product_id)
            if product is None:
                raise NotFoundError("Product not found")
            for participant in await self.group_orders.list_participants(group_order_id):
                self.session.add(
                    Order(
                        vendor_id=participant.vendor_id,
                        supplier_id=product.supplier_id,
                        product_id=product.id,
                        group_order_id=group_order.id,
                        quantity=participant.quantity,
                        price_per_unit=group_order.group_price_per_unit,
                        total_amount=line_total(group_order.group_price_per_unit, participant.quantity),
                        status=OrderStatus.pending.value,
                    )
                )
                created += 1

        group_order.status = status.value
        group_order.updated_at = utc_now_naive()
        group_order = await self.group_orders.update(group_order)
        log_business_event(
            "group_order.closed", group_order_id=group_order.id, status=group_order.status, orders_created=created
        )
        return group_order
