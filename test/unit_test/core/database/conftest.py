"""Test configuration for database unit tests.

This module provides common fixtures for testing the repositories against
an in-memory SQLite database.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from vendorlink.core.database import create_all, create_sessionmaker
from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import Category, GroupOrder, Product, User


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    async with create_sessionmaker(in_memory_engine)() as session:
        yield session


@pytest.fixture(scope="function")
async def supplier(in_memory_session: AsyncSession) -> User:
    user = User(id="supplier-1", email="supplier@example.com", role="supplier")
    in_memory_session.add(user)
    await in_memory_session.commit()
    return user


@pytest.fixture(scope="function")
async def vendors(in_memory_session: AsyncSession) -> list:
    users = [User(id=f"vendor-{i}", email=f"vendor{i}@example.com") for i in range(1, 4)]
    in_memory_session.add_all(users)
    await in_memory_session.commit()
    return users


@pytest.fixture(scope="function")
async def category(in_memory_session: AsyncSession) -> Category:
    category = Category(name="Spices")
    in_memory_session.add(category)
    await in_memory_session.commit()
    return category


@pytest.fixture(scope="function")
async def product(in_memory_session: AsyncSession, supplier: User, category: Category) -> Product:
    product = Product(
        supplier_id=supplier.id,
        category_id=category.id,
        name="Turmeric",
        unit="kg",
        price_per_unit=Decimal("40.00"),
        minimum_order_quantity=2,
    )
    in_memory_session.add(product)
    await in_memory_session.commit()
    return product


@pytest.fixture(scope="function")
async def open_group_order(in_memory_session: AsyncSession, product: Product, vendors: list) -> GroupOrder:
    """Active group order with room for two participants."""
    group_order = GroupOrder(
        product_id=product.id,
        organizer_id=vendors[0].id,
        title="Turmeric pool",
        target_quantity=10,
        max_participants=2,
        regular_price_per_unit=Decimal("40.00"),
        group_price_per_unit=Decimal("35.00"),
        deadline=utc_now_naive() + timedelta(days=1),
    )
    in_memory_session.add(group_order)
    await in_memory_session.commit()
    return group_order
