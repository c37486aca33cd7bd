"""User and wish repositories for database operations."""

from collections.abc import Sequence

from sqlalchemy import and_, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from petmall.catalog.models import Product
from petmall.wishlist.models import User, Wish


class UserRepository:
    """Repository for User lookups."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, user: User) -> User:
        """Save a user to database."""
        self.session.add(user)
        await self.session.flush()
        return user

    async def exists(self, user_id: int) -> bool:
        """Check whether a user exists."""
        query = select(exists().where(User.id == user_id))
        result = await self.session.execute(query)
        return bool(result.scalar())


class WishRepository:
    """Repository for Wish database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = WishRepository(session)
            wishes = await repo.find_by_user_id(user_id=7)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, wish: Wish) -> Wish:
        """Insert a wish and flush it.

        Args:
            wish: Wish to save.

        Returns:
            Saved wish with its ID assigned.

        Raises:
            IntegrityError: If the (user, product) pair already exists.
        """
        self.session.add(wish)
        await self.session.flush()
        return wish

    async def find_by_user_id(self, user_id: int) -> Sequence[Wish]:
        """Get all wishes of a user with products and stores loaded.

        Args:
            user_id: User ID.

        Returns:
            Wishes ordered by ID; empty if the user has none.
        """
        query = (
            select(Wish)
            .options(joinedload(Wish.product).joinedload(Product.store))
            .where(Wish.user_id == user_id)
            .order_by(Wish.id.asc())
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def find_by_user_and_product(
        self,
        user_id: int,
        product_id: int,
    ) -> Wish | None:
        """Get the wish for a (user, product) pair.

        Args:
            user_id: User ID.
            product_id: Product ID.

        Returns:
            Wish if found, None otherwise.
        """
        query = select(Wish).where(
            and_(
                Wish.user_id == user_id,
                Wish.product_id == product_id,
            )
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def delete(self, wish: Wish) -> None:
        """Delete a wish."""
        await self.session.delete(wish)
        await self.session.flush()
