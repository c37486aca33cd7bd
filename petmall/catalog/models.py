"""SQLAlchemy models for product catalog.

Defines Store and Product tables for persistent storage.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petmall.infrastructure.database import Base


class Store(Base):
    """Seller storefront.

    Attributes:
        id: Store identifier.
        name: Store display name.
    """

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    products: Mapped[list["Product"]] = relationship("Product", back_populates="store")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Store(id={self.id}, name={self.name})>"


class Product(Base):
    """Product entity in the catalog.

    Counters (stock, wish_count, purchase_count) are maintained by other
    services; the catalog only reads them.

    Attributes:
        id: Product identifier.
        image_url: Product image URL.
        animal_category: Animal category code (see catalog.categories).
        product_category: Product category code within the animal's table.
        name: Product name.
        store_id: Selling store, if any.
        model_num: Manufacturer model number.
        origin_label: Country of origin label.
        price: Price in KRW.
        description: Product description.
        stock: Units in stock.
        wish_count: Number of users who saved the product.
        purchase_count: Number of purchases.
        created_at: Creation timestamp.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    animal_category: Mapped[int] = mapped_column(Integer, nullable=False)
    product_category: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    store_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("stores.id", ondelete="SET NULL"),
        nullable=True,
    )
    model_num: Mapped[str | None] = mapped_column(String(100), nullable=True)
    origin_label: Mapped[str | None] = mapped_column(String(100), nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    wish_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    purchase_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    store: Mapped["Store | None"] = relationship("Store", back_populates="products")

    __table_args__ = (
        Index("ix_products_animal_product_category", "animal_category", "product_category"),
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, name={self.name[:30]}...)>"

    @property
    def store_name(self) -> str | None:
        """Name of the selling store (requires store to be loaded)."""
        return self.store.name if self.store else None
