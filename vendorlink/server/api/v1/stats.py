"""
Dashboard Statistics Endpoints.
"""

from fastapi import APIRouter

from vendorlink.core.models.io import SupplierStats, VendorStats
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.stats import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "/vendor",
    response_model=VendorStats,
    summary="Vendor Dashboard",
    description="Active orders, this month's group buying savings, credit score and group order participations.",
)
async def vendor_stats(user: CurrentUserDep, session: SessionDep) -> VendorStats:
    return await StatsService(session).vendor_stats(user)


@router.get(
    "/supplier",
    response_model=SupplierStats,
    summary="Supplier Dashboard",
    description="Pending orders, revenue delivered this month, average rating and active products.",
)
async def supplier_stats(user: CurrentUserDep, session: SessionDep) -> SupplierStats:
    return await StatsService(session).supplier_stats(user)
