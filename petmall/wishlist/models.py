"""SQLAlchemy models for users and wishlists."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petmall.catalog.models import Product
from petmall.infrastructure.database import Base

WISH_UNIQUE_CONSTRAINT = "uq_wishes_user_product"


class User(Base):
    """Registered shopper.

    The wishlist only checks that a user exists; account data is
    owned by the account service.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    nickname: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    wishes: Mapped[list["Wish"]] = relationship(
        "Wish",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<User(id={self.id}, email={self.email})>"


class Wish(Base):
    """A product saved to a user's wishlist.

    At most one row per (user_id, product_id), enforced by
    ``uq_wishes_user_product``.
    """

    __tablename__ = "wishes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="wishes")
    product: Mapped[Product] = relationship(Product)

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name=WISH_UNIQUE_CONSTRAINT),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Wish(id={self.id}, user_id={self.user_id}, product_id={self.product_id})>"
