"""Wishlist service.

Adds, lists and removes the products a user has saved. Duplicate
entries are prevented by the ``uq_wishes_user_product`` constraint;
a conflict on insert is reported as AlreadyInWishlistError.
"""

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petmall.catalog.repository import ProductRepository
from petmall.domain.exceptions import (
    AlreadyInWishlistError,
    NotInWishlistError,
    ProductNotFoundError,
    UserNotFoundError,
)
from petmall.wishlist.models import WISH_UNIQUE_CONSTRAINT, Wish
from petmall.wishlist.repository import UserRepository, WishRepository

logger = structlog.get_logger()

# PostgreSQL names the violated constraint; SQLite lists its columns
_DUPLICATE_WISH_MARKERS = (
    WISH_UNIQUE_CONSTRAINT,
    "UNIQUE constraint failed: wishes.user_id, wishes.product_id",
)


def _is_duplicate_wish(error: IntegrityError) -> bool:
    """Check whether an insert failed on the one-wish-per-pair constraint."""
    message = str(error.orig)
    return any(marker in message for marker in _DUPLICATE_WISH_MARKERS)


class WishlistService:
    """Service for wishlist operations.

    Every method runs inside the caller's session; committing is left
    to the session owner (the request-scoped ``get_session``).
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.users = UserRepository(session)
        self.products = ProductRepository(session)
        self.wishes = WishRepository(session)

    async def add_wish(self, user_id: int, product_id: int) -> Wish:
        """Save a product to a user's wishlist.

        Args:
            user_id: User ID.
            product_id: Product ID.

        Returns:
            The new wish.

        Raises:
            UserNotFoundError: If the user does not exist.
            ProductNotFoundError: If the product does not exist.
            AlreadyInWishlistError: If the product is already saved.
            IntegrityError: If the insert violates any other constraint.
        """
        await self._validate_user(user_id)
        if not await self.products.exists(product_id):
            raise ProductNotFoundError(product_id)

        try:
            wish = await self.wishes.save(Wish(user_id=user_id, product_id=product_id))
        except IntegrityError as e:
            await self.session.rollback()
            if not _is_duplicate_wish(e):
                logger.warning(
                    "Wish insert violated integrity",
                    user_id=user_id,
                    product_id=product_id,
                    error=str(e.orig),
                )
                raise
            logger.info(
                "Duplicate wish rejected",
                user_id=user_id,
                product_id=product_id,
            )
            raise AlreadyInWishlistError(user_id, product_id) from None

        logger.info(
            "Wish added",
            wish_id=wish.id,
            user_id=user_id,
            product_id=product_id,
        )
        return wish

    async def list_wishes(self, user_id: int) -> list[Wish]:
        """Get a user's wishlist.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        await self._validate_user(user_id)
        return list(await self.wishes.find_by_user_id(user_id))

    async def remove_wish(self, user_id: int, product_id: int) -> None:
        """Remove a product from a user's wishlist.

        Raises:
            NotInWishlistError: If the product is not saved by the user.
        """
        wish = await self.wishes.find_by_user_and_product(user_id, product_id)
        if wish is None:
            raise NotInWishlistError(user_id, product_id)

        await self.wishes.delete(wish)
        logger.info(
            "Wish removed",
            wish_id=wish.id,
            user_id=user_id,
            product_id=product_id,
        )

    async def _validate_user(self, user_id: int) -> None:
        if not await self.users.exists(user_id):
            raise UserNotFoundError(user_id)
