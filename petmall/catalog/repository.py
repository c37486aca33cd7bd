"""Product repository for database operations.

Provides product lookups with category filtering, search, sorting
and pagination. Every query is a SQLAlchemy ``select()`` with bound
parameters; the store is pulled in with a left outer join so only
its name reaches the response.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import and_, exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from petmall.catalog.categories import SortOption
from petmall.catalog.models import Product


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(
                animal_category=1,
                product_category=2,
                sort_by=SortOption.POPULARITY,
                limit=32,
            )
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def save_all(self, products: list[Product]) -> list[Product]:
        """Save multiple products to database."""
        self.session.add_all(products)
        await self.session.flush()
        return products

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID with its store loaded.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        query = (
            select(Product)
            .options(joinedload(Product.store))
            .where(Product.id == product_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists(self, product_id: int) -> bool:
        """Check whether a product exists."""
        query = select(exists().where(Product.id == product_id))
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def find_all(
        self,
        animal_category: int,
        product_category: int,
        search: str | None = None,
        sort_by: SortOption = SortOption.PRICE,
        limit: int = 32,
        offset: int = 0,
    ) -> Sequence[Product]:
        """Find products of one category with search, sorting, and pagination.

        Args:
            animal_category: Animal category code.
            product_category: Product category code.
            search: Substring matched against name or description.
            sort_by: Result ordering.
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of matching products.
        """
        conditions = [
            Product.animal_category == animal_category,
            Product.product_category == product_category,
        ]

        if search:
            search_pattern = f"%{search}%"
            conditions.append(
                or_(
                    Product.name.like(search_pattern),
                    Product.description.like(search_pattern),
                )
            )

        query = (
            select(Product)
            .options(joinedload(Product.store))
            .where(and_(*conditions))
            .order_by(self._get_sort_clause(sort_by), Product.id.asc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_top(
        self,
        animal_category: int,
        product_category: int,
        order_column: Any,
        limit: int,
    ) -> Sequence[Product]:
        """Find the top products of one category by a column, descending.

        Args:
            animal_category: Animal category code.
            product_category: Product category code.
            order_column: Product column to rank by.
            limit: Maximum results.

        Returns:
            Sequence of products, highest first.
        """
        query = (
            select(Product)
            .options(joinedload(Product.store))
            .where(
                and_(
                    Product.animal_category == animal_category,
                    Product.product_category == product_category,
                )
            )
            .order_by(order_column.desc(), Product.id.asc())
            .limit(limit)
        )

        result = await self.session.execute(query)
        return result.scalars().all()

    def _get_sort_clause(self, sort_by: SortOption) -> Any:
        """Get SQLAlchemy order clause for a sort option.

        Args:
            sort_by: Sort option.

        Returns:
            SQLAlchemy order clause.
        """
        clauses = {
            SortOption.POPULARITY: Product.wish_count.desc(),
            SortOption.NEWEST: Product.created_at.desc(),
            SortOption.PRICE: Product.price.asc(),
        }
        return clauses[sort_by]
