"""
Group Order Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from vendorlink.core.database.repositories import GroupOrderRepository
from vendorlink.core.models.io import (
    GroupOrderCreate,
    GroupOrderRead,
    GroupOrderStatusUpdate,
    JoinGroupOrder,
    ParticipantRead,
)
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.errors import NotFoundError
from vendorlink.server.services.group_orders import GroupOrderService

router = APIRouter(prefix="/group-orders", tags=["group-orders"])


@router.get("", response_model=List[GroupOrderRead], summary="List Active Group Orders")
async def list_group_orders(user: CurrentUserDep, session: SessionDep) -> List[GroupOrderRead]:
    """Active group orders, soonest deadline first."""
    group_orders = await GroupOrderRepository(session).list_active()
    return [GroupOrderRead.model_validate(g) for g in group_orders]


@router.get(
    "/{group_order_id}",
    response_model=GroupOrderRead,
    summary="Get Group Order",
    responses={404: {"description": "Group order not found"}},
)
async def get_group_order(group_order_id: str, user: CurrentUserDep, session: SessionDep) -> GroupOrderRead:
    group_order = await GroupOrderRepository(session).get_by_id(group_order_id)
    if group_order is None:
        raise NotFoundError("Group order not found")
    return GroupOrderRead.model_validate(group_order)


@router.get(
    "/{group_order_id}/participants",
    response_model=List[ParticipantRead],
    summary="List Participants",
    responses={404: {"description": "Group order not found"}},
)
async def list_participants(group_order_id: str, user: CurrentUserDep, session: SessionDep) -> List[ParticipantRead]:
    participants = await GroupOrderService(session).participants(group_order_id)
    return [ParticipantRead.model_validate(p) for p in participants]


@router.post(
    "",
    response_model=GroupOrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Organise Group Order",
    responses={400: {"description": "Invalid group order data"}, 404: {"description": "Product not found"}},
)
async def create_group_order(payload: GroupOrderCreate, user: CurrentUserDep, session: SessionDep) -> GroupOrderRead:
    """
    Start a group order for a product.

    - **groupPricePerUnit** must not exceed **regularPricePerUnit**.
    - **deadline** must be in the future.
    """
    group_order = await GroupOrderService(session).create(user, payload)
    return GroupOrderRead.model_validate(group_order)


@router.post(
    "/{group_order_id}/join",
    response_model=ParticipantRead,
    summary="Join Group Order",
    description="Join with a quantity. Fails when the group order is full, closed, past its deadline or already joined.",
    responses={
        400: {"description": "Invalid participation data"},
        404: {"description": "Group order not found"},
        409: {"description": "Group order cannot be joined"},
    },
)
async def join_group_order(
    group_order_id: str, payload: JoinGroupOrder, user: CurrentUserDep, session: SessionDep
) -> ParticipantRead:
    participant = await GroupOrderService(session).join(group_order_id, user, payload.quantity)
    return ParticipantRead.model_validate(participant)


@router.patch(
    "/{group_order_id}/status",
    response_model=GroupOrderRead,
    summary="Close Group Order",
    description="Complete or cancel an active group order. Only the organizer may do this.",
    responses={
        404: {"description": "Group order not found"},
        409: {"description": "Group order is closed or below its target quantity"},
    },
)
async def update_group_order_status(
    group_order_id: str, payload: GroupOrderStatusUpdate, user: CurrentUserDep, session: SessionDep
) -> GroupOrderRead:
    group_order = await GroupOrderService(session).update_status(group_order_id, user.id, payload.status)
    return GroupOrderRead.model_validate(group_order)
