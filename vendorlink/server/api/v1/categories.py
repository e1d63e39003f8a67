"""
Category Endpoints.
"""

from typing import List

from fastapi import APIRouter, status

from vendorlink.core.database.entities import Category
from vendorlink.core.database.repositories import CategoryRepository
from vendorlink.core.models.io import CategoryCreate, CategoryRead
from vendorlink.server.services.deps import CurrentUserDep, SessionDep

router = APIRouter(tags=["categories"])


@router.get("/categories", response_model=List[CategoryRead], summary="List Categories")
async def list_categories(user: CurrentUserDep, session: SessionDep) -> List[CategoryRead]:
    """All categories ordered by name."""
    categories = await CategoryRepository(session).list_by_name()
    return [CategoryRead.model_validate(c) for c in categories]


@router.post(
    "/categories",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    responses={400: {"description": "Invalid category data"}},
)
async def create_category(payload: CategoryCreate, user: CurrentUserDep, session: SessionDep) -> CategoryRead:
    category = await CategoryRepository(session).create(Category(**payload.model_dump()))
    return CategoryRead.model_validate(category)
