"""
Supplier review and product review repositories.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..entities.reviews import ProductReview, Review
from .base import AsyncCrudRepository


class ReviewRepository(AsyncCrudRepository[Review]):
    """Repository for supplier reviews."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Review)

    async def list_for_supplier(self, supplier_id: str) -> List[Review]:
        stmt = select(Review).where(Review.supplier_id == supplier_id).order_by(col(Review.created_at).desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_order(self, order_id: str) -> Optional[Review]:
        result = await self.session.execute(select(Review).where(Review.order_id == order_id))
        return result.scalar_one_or_none()

    async def ratings_for_supplier(self, supplier_id: str) -> List[int]:
        result = await self.session.execute(select(Review.rating).where(Review.supplier_id == supplier_id))
        return [int(r) for r in result.scalars().all()]


class ProductReviewRepository(AsyncCrudRepository[ProductReview]):
    """Repository for product reviews."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ProductReview)

    async def list_for_product(self, product_id: str) -> List[ProductReview]:
        stmt = (
            select(ProductReview)
            .where(ProductReview.product_id == product_id)
            .order_by(col(ProductReview.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_helpful(self, review_id: str) -> Optional[ProductReview]:
        """Increment ``helpful_count`` in place and return the refreshed review."""
        stmt = (
            update(ProductReview)
            .where(col(ProductReview.id) == review_id)
            .values(helpful_count=col(ProductReview.helpful_count) + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        if result.rowcount != 1:
            return None
        review = await self.get_by_id(review_id)
        if review is not None:
            await self.session.refresh(review)
        return review
