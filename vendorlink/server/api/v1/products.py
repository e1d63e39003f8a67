"""
Product Endpoints.

Anyone logged in can browse active products; only suppliers list them and
only the owning supplier can change them. Product reviews are nested here
because they are addressed by product.
"""

from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Query, status

from vendorlink.core.database.base import utc_now_naive
from vendorlink.core.database.entities import Product, ProductReview
from vendorlink.core.database.repositories import (
    CategoryRepository,
    ProductRepository,
    ProductReviewRepository,
)
from vendorlink.core.logging_config import get_logger
from vendorlink.core.models.io import (
    ProductCreate,
    ProductRead,
    ProductReviewCreate,
    ProductReviewRead,
    ProductUpdate,
    StockUpdate,
)
from vendorlink.server.services.access import require_seller
from vendorlink.server.services.deps import CurrentUserDep, SessionDep
from vendorlink.server.services.errors import NotFoundError

logger = get_logger(__name__)

router = APIRouter(tags=["products"])


@router.get(
    "/products",
    response_model=List[ProductRead],
    summary="Search Products",
    description="List active products ordered by name. All given filters must match; searchTerm is a case-insensitive match on the name.",
)
async def list_products(
    user: CurrentUserDep,
    session: SessionDep,
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    supplier_id: Optional[str] = Query(default=None, alias="supplierId"),
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    min_price: Optional[Decimal] = Query(default=None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(default=None, alias="maxPrice", ge=0),
) -> List[ProductRead]:
    products = await ProductRepository(session).search(
        category_id=category_id,
        supplier_id=supplier_id,
        search_term=search_term,
        min_price=min_price,
        max_price=max_price,
    )
    return [ProductRead.model_validate(p) for p in products]


@router.get(
    "/products/{product_id}",
    response_model=ProductRead,
    summary="Get Product",
    responses={404: {"description": "Product not found"}},
)
async def get_product(product_id: str, user: CurrentUserDep, session: SessionDep) -> ProductRead:
    product = await ProductRepository(session).get_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return ProductRead.model_validate(product)


@router.post(
    "/products",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="List Product",
    description="List a new product as the calling supplier.",
    responses={
        400: {"description": "Invalid product data"},
        403: {"description": "Caller is not a supplier"},
        404: {"description": "Category not found"},
    },
)
async def create_product(payload: ProductCreate, user: CurrentUserDep, session: SessionDep) -> ProductRead:
    """
    Create a product.

    - **pricePerUnit** must be greater than zero.
    - **minimumOrderQuantity** must be at least one.
    - The supplier is always the caller.
    """
    require_seller(user)
    if await CategoryRepository(session).get_by_id(payload.category_id) is None:
        raise NotFoundError("Category not found")
    product = await ProductRepository(session).create(Product(supplier_id=user.id, **payload.model_dump()))
    logger.info(f"Supplier {user.id} listed product {product.id}")
    return ProductRead.model_validate(product)


@router.patch(
    "/products/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    responses={404: {"description": "Product not found or not owned by the caller"}},
)
async def update_product(
    product_id: str, payload: ProductUpdate, user: CurrentUserDep, session: SessionDep
) -> ProductRead:
    products = ProductRepository(session)
    product = await products.get_owned(product_id, user.id)
    if product is None:
        raise NotFoundError("Product not found")
    changes = payload.model_dump(exclude_unset=True)
    new_category = changes.get("category_id")
    if new_category is not None and await CategoryRepository(session).get_by_id(new_category) is None:
        raise NotFoundError("Category not found")
    for key, value in changes.items():
        if value is not None:
            setattr(product, key, value)
    product.updated_at = utc_now_naive()
    product = await products.update(product)
    return ProductRead.model_validate(product)


@router.patch(
    "/products/{product_id}/stock",
    response_model=ProductRead,
    summary="Update Stock",
    responses={404: {"description": "Product not found or not owned by the caller"}},
)
async def update_stock(product_id: str, payload: StockUpdate, user: CurrentUserDep, session: SessionDep) -> ProductRead:
    products = ProductRepository(session)
    product = await products.get_owned(product_id, user.id)
    if product is None:
        raise NotFoundError("Product not found")
    product.available_quantity = payload.quantity
    product.updated_at = utc_now_naive()
    product = await products.update(product)
    return ProductRead.model_validate(product)


@router.get(
    "/products/{product_id}/reviews",
    response_model=List[ProductReviewRead],
    summary="List Product Reviews",
)
async def list_product_reviews(product_id: str, user: CurrentUserDep, session: SessionDep) -> List[ProductReviewRead]:
    reviews = await ProductReviewRepository(session).list_for_product(product_id)
    return [ProductReviewRead.model_validate(r) for r in reviews]


@router.post(
    "/products/{product_id}/reviews",
    response_model=ProductReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Review Product",
    responses={400: {"description": "Invalid review data"}, 404: {"description": "Product not found"}},
)
async def create_product_review(
    product_id: str, payload: ProductReviewCreate, user: CurrentUserDep, session: SessionDep
) -> ProductReviewRead:
    product = await ProductRepository(session).get_by_id(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    review = await ProductReviewRepository(session).create(
        ProductReview(
            product_id=product.id,
            vendor_id=user.id,
            supplier_id=product.supplier_id,
            rating=payload.rating,
            comment=payload.comment,
        )
    )
    return ProductReviewRead.model_validate(review)
