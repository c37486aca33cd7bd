"""Catalog service for product operations.

High-level service that turns category/sort/search/page tokens into
repository queries and shapes grouped results.
"""

from dataclasses import dataclass, field

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from petmall.catalog.categories import (
    NavigationEntry,
    category_label,
    get_navigation_data,
    parse_animal_category,
    parse_product_category,
    parse_sort_option,
    product_categories_for,
)
from petmall.catalog.models import Product
from petmall.catalog.repository import ProductRepository
from petmall.domain.exceptions import InvalidPageError, ProductNotFoundError

logger = structlog.get_logger()

FIRST_PAGE_SIZE = 32
PAGE_SIZE = 12
POPULAR_LIMIT = 10
RECOMMEND_LIMIT = 3
MOST_PURCHASED_LIMIT = 4

# Offset plus limit of the last page must fit a signed 64-bit integer
MAX_PAGE = (2**63 - 1 - FIRST_PAGE_SIZE - PAGE_SIZE) // PAGE_SIZE + 2


@dataclass
class PaginationParams:
    """Pagination parameters.

    The first page is larger than the following ones: page 1 holds
    32 items, every later page 12, and pages are contiguous
    (page 2 starts right after item 32). Pages past ``MAX_PAGE`` are
    rejected rather than handed to the database as an oversized offset.

    Attributes:
        page: Page number (1-indexed).
    """

    page: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.page <= MAX_PAGE:
            raise InvalidPageError(self.page, MAX_PAGE)

    @property
    def limit(self) -> int:
        """Number of items on this page."""
        return FIRST_PAGE_SIZE if self.page == 1 else PAGE_SIZE

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        if self.page == 1:
            return 0
        return FIRST_PAGE_SIZE + (self.page - 2) * PAGE_SIZE


@dataclass
class CategoryGroup:
    """Products of one product category under a display label."""

    category: str
    products: list[Product] = field(default_factory=list)


class CatalogService:
    """Service for catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            products = await service.list_products(
                "dog", "food", search_word="chicken", sort_by="popularity", page=1
            )
            groups = await service.recommend_three("cat")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.repository = ProductRepository(session)

    async def list_products(
        self,
        animal: str,
        product: str,
        search_word: str | None = None,
        sort_by: str | None = None,
        page: int = 1,
    ) -> list[Product]:
        """List products of one category.

        Args:
            animal: Animal category token.
            product: Product category token.
            search_word: Optional substring for name/description.
            sort_by: "popularity", "newest" or "price" (default).
            page: Page number (1-indexed).

        Returns:
            Products on the requested page; empty when nothing matches.

        Raises:
            InvalidCategoryError: If a category token is unknown.
            InvalidSortOptionError: If the sort token is unknown.
            InvalidPageError: If page is below 1 or past MAX_PAGE.
        """
        animal_category = parse_animal_category(animal)
        product_category = parse_product_category(animal_category, product)
        sort_option = parse_sort_option(sort_by)
        pagination = PaginationParams(page=page)

        products = await self.repository.find_all(
            animal_category=int(animal_category),
            product_category=product_category,
            search=search_word or None,
            sort_by=sort_option,
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return list(products)

    async def popular_ten(self, animal: str, product: str) -> list[Product]:
        """Get the ten most wished-for products of one category."""
        animal_category = parse_animal_category(animal)
        product_category = parse_product_category(animal_category, product)

        products = await self.repository.find_top(
            animal_category=int(animal_category),
            product_category=product_category,
            order_column=Product.wish_count,
            limit=POPULAR_LIMIT,
        )
        return list(products)

    async def recommend_three(self, animal: str) -> list[CategoryGroup]:
        """Get the three best-stocked products of every product category.

        Args:
            animal: Animal category token.

        Returns:
            One group per product category of the animal, in code order.
        """
        return await self._top_per_category(animal, Product.stock, RECOMMEND_LIMIT)

    async def most_purchased(
        self,
        animal: str,
        user_id: int | None = None,
    ) -> list[CategoryGroup]:
        """Get the four most purchased products of every product category.

        Args:
            animal: Animal category token.
            user_id: Requesting user. Accepted but not used for filtering.

        Returns:
            One group per product category of the animal, in code order.
        """
        logger.debug("Most purchased requested", animal=animal, user_id=user_id)
        return await self._top_per_category(animal, Product.purchase_count, MOST_PURCHASED_LIMIT)

    async def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def get_navigation_data(self) -> list[NavigationEntry]:
        """Get the category navigation menu."""
        return get_navigation_data()

    async def _top_per_category(
        self,
        animal: str,
        order_column,
        limit: int,
    ) -> list[CategoryGroup]:
        animal_category = parse_animal_category(animal)
        groups = []

        for code in product_categories_for(animal_category):
            products = await self.repository.find_top(
                animal_category=int(animal_category),
                product_category=code,
                order_column=order_column,
                limit=limit,
            )
            groups.append(
                CategoryGroup(
                    category=category_label(animal_category, code),
                    products=list(products),
                )
            )

        logger.debug(
            "Grouped top products",
            animal=animal_category.token,
            order_by=order_column.key,
            groups=len(groups),
        )
        return groups
