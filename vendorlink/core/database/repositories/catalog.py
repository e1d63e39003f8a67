"""
Category and product repositories.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col, select

from ..entities.catalog import Category, Product
from .base import AsyncCrudRepository


class CategoryRepository(AsyncCrudRepository[Category]):
    """Repository for product categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Category)

    async def list_by_name(self) -> List[Category]:
        result = await self.session.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Optional[Category]:
        result = await self.session.execute(select(Category).where(Category.name == name))
        return result.scalars().first()


class ProductRepository(AsyncCrudRepository[Product]):
    """Repository for products."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    async def search(
        self,
        *,
        category_id: Optional[str] = None,
        supplier_id: Optional[str] = None,
        search_term: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[Product]:
        """Active products matching every given filter, ordered by name.

        ``search_term`` is a case-insensitive substring match on the product name.
        """
        stmt = select(Product).where(Product.is_active == True)  # noqa: E712
        if category_id:
            stmt = stmt.where(Product.category_id == category_id)
        if supplier_id:
            stmt = stmt.where(Product.supplier_id == supplier_id)
        if search_term:
            stmt = stmt.where(func.lower(Product.name).contains(search_term.lower(), autoescape=True))
        if min_price is not None:
            stmt = stmt.where(col(Product.price_per_unit) >= min_price)
        if max_price is not None:
            stmt = stmt.where(col(Product.price_per_unit) <= max_price)
        stmt = stmt.order_by(Product.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_owned(self, product_id: str, supplier_id: str) -> Optional[Product]:
        stmt = select(Product).where(Product.id == product_id, Product.supplier_id == supplier_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_active_for_supplier(self, supplier_id: str) -> int:
        stmt = (
            select(func.count())
            .select_from(Product)
            .where(Product.supplier_id == supplier_id, Product.is_active == True)  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
