"""
Price Alert Endpoints.
"""

from typing import List

from fastapi import APIRouter, Response, status

from vendorlink.core.database.entities import PriceAlert
from vendorlink.core.database.repositories import PriceAlertRepository, ProductRepository
from vendorlink.core.models.io import PriceAlertCreate, PriceAlertRead, TriggeredPriceAlert
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.errors import NotFoundError

router = APIRouter(prefix="/price-alerts", tags=["price-alerts"])


@router.get("", response_model=List[PriceAlertRead], summary="List Price Alerts")
async def list_price_alerts(user: CurrentUserDep, session: SessionDep) -> List[PriceAlertRead]:
    """The caller's active alerts."""
    alerts = await PriceAlertRepository(session).list_active(user.id)
    return [PriceAlertRead.model_validate(a) for a in alerts]


@router.get(
    "/triggered",
    response_model=List[TriggeredPriceAlert],
    summary="List Triggered Price Alerts",
    description="Active alerts whose product currently sells at or below the target price.",
)
async def list_triggered_price_alerts(user: CurrentUserDep, session: SessionDep) -> List[TriggeredPriceAlert]:
    pairs = await PriceAlertRepository(session).list_triggered(user.id)
    return [
        TriggeredPriceAlert(
            **PriceAlertRead.model_validate(alert).model_dump(),
            product_name=product.name,
            current_price=product.price_per_unit,
        )
        for alert, product in pairs
    ]


@router.post(
    "",
    response_model=PriceAlertRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Price Alert",
    responses={400: {"description": "Invalid price alert data"}, 404: {"description": "Product not found"}},
)
async def create_price_alert(payload: PriceAlertCreate, user: CurrentUserDep, session: SessionDep) -> PriceAlertRead:
    if await ProductRepository(session).get_by_id(payload.product_id) is None:
        raise NotFoundError("Product not found")
    alert = await PriceAlertRepository(session).create(PriceAlert(vendor_id=user.id, **payload.model_dump()))
    return PriceAlertRead.model_validate(alert)


@router.delete(
    "/{alert_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Price Alert",
    responses={404: {"description": "Price alert not found"}},
)
async def delete_price_alert(alert_id: str, user: CurrentUserDep, session: SessionDep) -> Response:
    """Deactivate one of the caller's alerts."""
    alerts = PriceAlertRepository(session)
    alert = await alerts.get_owned(alert_id, user.id)
    if alert is None or not alert.is_active:
        raise NotFoundError("Price alert not found")
    alert.is_active = False
    await alerts.update(alert)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
