"""Product catalog API endpoints.

Provides endpoints for browsing the catalog:
- GET /products - category listing with search, sort and pages
- GET /products/popular - ten most wished-for products of a category
- GET /products/recommended - three best-stocked products per category
- GET /products/most-purchased - four most purchased products per category
- GET /products/navigation - category navigation menu
- GET /products/{id} - single product
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from petmall.api.dependencies import get_catalog_service, http_error
from petmall.api.schemas import (
    CategoryGroupSchema,
    ErrorResponse,
    NavigationEntrySchema,
    PopularProductsResponse,
    ProductListResponse,
    ProductSchema,
)
from petmall.catalog.categories import get_navigation_data
from petmall.catalog.models import Product
from petmall.catalog.service import CatalogService, CategoryGroup, PaginationParams
from petmall.domain.exceptions import (
    InvalidCategoryError,
    InvalidPageError,
    InvalidSortOptionError,
    ProductNotFoundError,
)

router = APIRouter(prefix="/products", tags=["Products"])

CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]


# ============================================================================
# Converters
# ============================================================================


def product_to_response(product: Product) -> ProductSchema:
    """Convert Product model to response schema."""
    return ProductSchema.model_validate(product)


def group_to_response(group: CategoryGroup) -> CategoryGroupSchema:
    """Convert CategoryGroup to response schema."""
    return CategoryGroupSchema(
        category=group.category,
        products=[product_to_response(p) for p in group.products],
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="List products",
    description="List products of one animal/product category, optionally filtered by a search word.",
)
async def list_products(
    service: CatalogServiceDep,
    animal: str = Query(..., description="Animal category: dog, cat or small"),
    category: str = Query(..., description="Product category token, e.g. food"),
    sort_by: str | None = Query(default=None, description="popularity, newest or price"),
    search: str | None = Query(default=None, description="Substring of name or description"),
    page: int = Query(default=1, description="Page number (1-based)"),
) -> ProductListResponse:
    """List products of a category.

    Page 1 holds up to 32 products, later pages up to 12.

    Raises:
        HTTPException: If a category, sort option or page is invalid.
    """
    try:
        products = await service.list_products(
            animal,
            category,
            search_word=search,
            sort_by=sort_by,
            page=page,
        )
    except (InvalidCategoryError, InvalidSortOptionError, InvalidPageError) as e:
        raise http_error(status.HTTP_400_BAD_REQUEST, e) from e

    return ProductListResponse(
        items=[product_to_response(p) for p in products],
        page=page,
        page_size=PaginationParams(page=page).limit,
        count=len(products),
    )


@router.get(
    "/popular",
    response_model=PopularProductsResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Most wished-for products",
)
async def get_popular_products(
    service: CatalogServiceDep,
    animal: str = Query(..., description="Animal category: dog, cat or small"),
    category: str = Query(..., description="Product category token"),
) -> PopularProductsResponse:
    """Get the ten most wished-for products of a category."""
    try:
        products = await service.popular_ten(animal, category)
    except InvalidCategoryError as e:
        raise http_error(status.HTTP_400_BAD_REQUEST, e) from e

    return PopularProductsResponse(items=[product_to_response(p) for p in products])


@router.get(
    "/recommended",
    response_model=list[CategoryGroupSchema],
    responses={400: {"model": ErrorResponse}},
    summary="Recommended products per category",
)
async def get_recommended_products(
    service: CatalogServiceDep,
    animal: str = Query(..., description="Animal category: dog, cat or small"),
) -> list[CategoryGroupSchema]:
    """Get up to three products per product category, best stocked first."""
    try:
        groups = await service.recommend_three(animal)
    except InvalidCategoryError as e:
        raise http_error(status.HTTP_400_BAD_REQUEST, e) from e

    return [group_to_response(g) for g in groups]


@router.get(
    "/most-purchased",
    response_model=list[CategoryGroupSchema],
    responses={400: {"model": ErrorResponse}},
    summary="Most purchased products per category",
)
async def get_most_purchased_products(
    service: CatalogServiceDep,
    animal: str = Query(..., description="Animal category: dog, cat or small"),
    user_id: int | None = Query(default=None, description="Requesting user"),
) -> list[CategoryGroupSchema]:
    """Get up to four products per product category, most purchased first."""
    try:
        groups = await service.most_purchased(animal, user_id=user_id)
    except InvalidCategoryError as e:
        raise http_error(status.HTTP_400_BAD_REQUEST, e) from e

    return [group_to_response(g) for g in groups]


@router.get(
    "/navigation",
    response_model=list[NavigationEntrySchema],
    summary="Category navigation menu",
)
async def get_navigation() -> list[NavigationEntrySchema]:
    """Get animal categories with their product categories."""
    return [NavigationEntrySchema.model_validate(e) for e in get_navigation_data()]


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product details",
)
async def get_product(
    product_id: int,
    service: CatalogServiceDep,
) -> ProductSchema:
    """Get a product by ID.

    Raises:
        HTTPException: If product not found.
    """
    try:
        product = await service.get_product(product_id)
    except ProductNotFoundError as e:
        raise http_error(status.HTTP_404_NOT_FOUND, e) from e

    return product_to_response(product)
