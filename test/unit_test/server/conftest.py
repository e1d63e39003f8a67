from datetime import timedelta
from decimal import Decimal
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from vendorlink.core.database import create_all, create_sessionmaker, get_session
from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import Category, GroupOrder, Product, User
from vendorlink.core.database.repositories import UserRepository
from vendorlink.server.services.deps import get_current_user

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

VENDOR_ID = "vendor-1"
OTHER_VENDOR_ID = "vendor-2"
SUPPLIER_ID = "supplier-1"
BOTH_ID = "both-1"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with create_sessionmaker(test_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def users(session: AsyncSession) -> dict:
    """Two vendors, a supplier and a user with both roles."""
    repo = UserRepository(session)
    created = {}
    for user_id, role in (
        (VENDOR_ID, "vendor"),
        (OTHER_VENDOR_ID, "vendor"),
        (SUPPLIER_ID, "supplier"),
        (BOTH_ID, "both"),
    ):
        created[user_id] = await repo.create(
            User(id=user_id, email=f"{user_id}@example.com", first_name=user_id.title(), role=role)
        )
    return created


@pytest_asyncio.fixture
async def category(session: AsyncSession) -> Category:
    category = Category(name="Vegetables", description="Fresh produce")
    session.add(category)
    await session.commit()
    await session.refresh(category)
    return category


@pytest_asyncio.fixture
async def product(session: AsyncSession, users: dict, category: Category) -> Product:
    """Tomatoes at 12.50 per kg, minimum order 5 kg."""
    product = Product(
        supplier_id=SUPPLIER_ID,
        category_id=category.id,
        name="Tomatoes",
        unit="kg",
        price_per_unit=Decimal("12.50"),
        available_quantity=500,
        minimum_order_quantity=5,
    )
    session.add(product)
    await session.commit()
    await session.refresh(product)
    return product


@pytest_asyncio.fixture
async def group_order(session: AsyncSession, product: Product) -> GroupOrder:
    """Active group order for two participants organised by the user with both roles."""
    group_order = GroupOrder(
        product_id=product.id,
        organizer_id=BOTH_ID,
        title="Bulk tomatoes",
        target_quantity=20,
        max_participants=2,
        regular_price_per_unit=Decimal("12.50"),
        group_price_per_unit=Decimal("10.00"),
        deadline=utc_now_naive() + timedelta(days=3),
    )
    session.add(group_order)
    await session.commit()
    await session.refresh(group_order)
    return group_order


@pytest.fixture
def app(session: AsyncSession) -> FastAPI:
    """The application with its database session bound to the test session."""
    from vendorlink.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def login_as(app: FastAPI, session: AsyncSession) -> Callable[[str], None]:
    """Authenticate subsequent requests as the given user id.

    The user is re-read on every request so a rolled back transaction in an
    earlier request does not leave an expired instance behind.
    """

    def _login(user_id: str) -> None:
        async def current_user_override() -> User:
            return await UserRepository(session).get_by_id(user_id)

        app.dependency_overrides[get_current_user] = current_user_override

    return _login


@pytest_asyncio.fixture(name="client")
async def client_fixture(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the application."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
