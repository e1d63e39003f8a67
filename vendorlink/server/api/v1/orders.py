"""
Order Endpoints.
"""

from typing import List, Literal, Optional, Union

from fastapi import APIRouter, Query, status

from vendorlink.core.models.domain import OrderStatus
from vendorlink.core.models.io import CartCheckout, CheckoutResult, OrderCreate, OrderRead, OrderStatusUpdate
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.orders import OrderService

router = APIRouter(tags=["orders"])


@router.get(
    "/orders",
    response_model=List[OrderRead],
    summary="List Orders",
    description="The caller's orders as vendor, as supplier, or both when `type` is omitted. Newest first.",
)
async def list_orders(
    user: CurrentUserDep,
    session: SessionDep,
    kind: Optional[Literal["vendor", "supplier"]] = Query(default=None, alias="type"),
    order_status: Optional[OrderStatus] = Query(default=None, alias="status"),
) -> List[OrderRead]:
    orders = await OrderService(session).list_orders(
        user.id, kind, order_status.value if order_status else None
    )
    return [OrderRead.model_validate(o) for o in orders]


@router.get(
    "/orders/{order_id}",
    response_model=OrderRead,
    summary="Get Order",
    responses={404: {"description": "Order not found or caller is not a party to it"}},
)
async def get_order(order_id: str, user: CurrentUserDep, session: SessionDep) -> OrderRead:
    return OrderRead.model_validate(await OrderService(session).get_order(user.id, order_id))


@router.post(
    "/orders",
    response_model=Union[CheckoutResult, OrderRead],
    status_code=status.HTTP_201_CREATED,
    summary="Place Order",
    description="Place a single order, or check out a cart by sending an `items` list.",
    responses={
        400: {"description": "Invalid order data or below the minimum order quantity"},
        403: {"description": "Caller is not a vendor"},
        404: {"description": "Product not found"},
    },
)
async def create_order(
    payload: Union[CartCheckout, OrderCreate], user: CurrentUserDep, session: SessionDep
) -> Union[CheckoutResult, OrderRead]:
    """
    Place orders.

    Prices come from the product; the total is price per unit times quantity.
    A cart checkout creates every order or none of them.
    """
    service = OrderService(session)
    if isinstance(payload, CartCheckout):
        orders = await service.checkout(user, payload)
        return CheckoutResult(
            message=f"{len(orders)} orders created successfully",
            orders=[OrderRead.model_validate(o) for o in orders],
        )
    return OrderRead.model_validate(await service.place_order(user, payload))


@router.patch(
    "/orders/{order_id}/status",
    response_model=OrderRead,
    summary="Update Order Status",
    description="Move an order through its lifecycle. Only the order's supplier may do this.",
    responses={400: {"description": "Unknown status"}, 404: {"description": "Order not found"}},
)
async def update_order_status(
    order_id: str, payload: OrderStatusUpdate, user: CurrentUserDep, session: SessionDep
) -> OrderRead:
    order = await OrderService(session).update_status(user.id, order_id, payload.status)
    return OrderRead.model_validate(order)
