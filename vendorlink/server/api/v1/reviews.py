"""
Review Endpoints.
"""

from typing import List

from fastapi import APIRouter, status
from sqlalchemy.exc import IntegrityError

from vendorlink.core.database.entities import Review
from vendorlink.core.database.repositories import OrderRepository, ProductReviewRepository, ReviewRepository
from vendorlink.core.models.io import ProductReviewRead, ReviewCreate, ReviewRead
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.errors import ConflictError, NotFoundError

router = APIRouter(tags=["reviews"])


@router.post(
    "/reviews",
    response_model=ReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Review Supplier",
    description="Review the supplier of one of the caller's orders. Each order can be reviewed once.",
    responses={
        400: {"description": "Invalid review data"},
        404: {"description": "Order not found"},
        409: {"description": "Order already reviewed"},
    },
)
async def create_review(payload: ReviewCreate, user: CurrentUserDep, session: SessionDep) -> ReviewRead:
    order = await OrderRepository(session).get_by_id(payload.order_id)
    if order is None or order.vendor_id != user.id:
        raise NotFoundError("Order not found")
    reviews = ReviewRepository(session)
    if await reviews.get_by_order(order.id) is not None:
        raise ConflictError("Order has already been reviewed")
    try:
        review = await reviews.create(
            Review(
                order_id=order.id,
                vendor_id=user.id,
                supplier_id=order.supplier_id,
                rating=payload.rating,
                comment=payload.comment,
            )
        )
    except IntegrityError as e:
        await session.rollback()
        raise ConflictError("Order has already been reviewed") from e
    return ReviewRead.model_validate(review)


@router.get(
    "/reviews/supplier/{supplier_id}",
    response_model=List[ReviewRead],
    summary="List Supplier Reviews",
)
async def list_supplier_reviews(supplier_id: str, user: CurrentUserDep, session: SessionDep) -> List[ReviewRead]:
    """Reviews of a supplier, newest first."""
    reviews = await ReviewRepository(session).list_for_supplier(supplier_id)
    return [ReviewRead.model_validate(r) for r in reviews]


@router.post(
    "/product-reviews/{review_id}/helpful",
    response_model=ProductReviewRead,
    summary="Mark Review Helpful",
    responses={404: {"description": "Review not found"}},
)
async def mark_review_helpful(review_id: str, user: CurrentUserDep, session: SessionDep) -> ProductReviewRead:
    review = await ProductReviewRepository(session).mark_helpful(review_id)
    if review is None:
        raise NotFoundError("Review not found")
    return ProductReviewRead.model_validate(review)
