"""API schemas for PetMall API.

Pydantic models for request/response validation and serialization.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(BaseModel):
    """Product as returned by catalog endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product identifier")
    image_url: str | None = Field(default=None, description="Product image URL")
    animal_category: int = Field(..., description="Animal category code")
    product_category: int = Field(..., description="Product category code")
    name: str = Field(..., description="Product name")
    store_name: str | None = Field(default=None, description="Selling store name")
    model_num: str | None = Field(default=None, description="Model number")
    origin_label: str | None = Field(default=None, description="Country of origin")
    price: int = Field(..., ge=0, description="Price in KRW")
    description: str | None = Field(default=None, description="Product description")
    stock: int = Field(..., ge=0, description="Units in stock")
    wish_count: int = Field(..., ge=0, description="Times saved to a wishlist")
    purchase_count: int = Field(..., ge=0, description="Times purchased")
    created_at: datetime = Field(..., description="When the product was listed")


class ProductListResponse(BaseModel):
    """One page of a product listing."""

    items: list[ProductSchema] = Field(..., description="Products on this page")
    page: int = Field(..., description="Current page number")
    page_size: int = Field(..., description="Maximum items on this page")
    count: int = Field(..., description="Number of items returned")


class PopularProductsResponse(BaseModel):
    """Most wished-for products of a category."""

    items: list[ProductSchema] = Field(..., description="Up to ten products")


class CategoryGroupSchema(BaseModel):
    """Products of one product category."""

    category: str = Field(..., description="Category display label")
    products: list[ProductSchema] = Field(
        default_factory=list, description="Products in this category"
    )


# ============================================================================
# Navigation Schemas
# ============================================================================


class NavigationCategorySchema(BaseModel):
    """Product category entry in the navigation menu."""

    model_config = ConfigDict(from_attributes=True)

    label: str = Field(..., description="Category token used in URLs")
    display_value: str = Field(..., description="Korean display label")


class NavigationEntrySchema(BaseModel):
    """Navigation menu section for one animal."""

    model_config = ConfigDict(from_attributes=True)

    animal_id: str = Field(..., description="Animal token used in URLs")
    label: str = Field(..., description="Korean display label")
    product_categories: list[NavigationCategorySchema] = Field(
        ..., description="Product categories of this animal"
    )


# ============================================================================
# Wishlist Schemas
# ============================================================================


class WishCreateRequest(BaseModel):
    """Request to save a product to the wishlist."""

    product_id: int = Field(..., ge=1, description="Product to save")


class WishResponse(BaseModel):
    """A newly created wish."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Wish identifier")
    user_id: int = Field(..., description="Owning user")
    product_id: int = Field(..., description="Saved product")
    created_at: datetime = Field(..., description="When the product was saved")


class WishItemSchema(BaseModel):
    """Wishlist entry with its product."""

    wish_id: int = Field(..., description="Wish identifier")
    product: ProductSchema = Field(..., description="Saved product")


class WishListResponse(BaseModel):
    """A user's wishlist."""

    items: list[WishItemSchema] = Field(..., description="Saved products")
    total: int = Field(..., description="Number of saved products")
