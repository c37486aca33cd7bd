"""Domain layer - business rule errors shared by catalog and wishlist.

Example usage:
    from petmall.domain import ProductNotFoundError

    try:
        product = await service.get_product(product_id)
    except ProductNotFoundError as e:
        print(e.error_code, e.details)
"""

from petmall.domain.exceptions import (
    AlreadyInWishlistError,
    DomainError,
    InvalidCategoryError,
    InvalidPageError,
    InvalidSortOptionError,
    NotInWishlistError,
    ProductNotFoundError,
    UserNotFoundError,
    WishlistError,
)

__all__ = [
    "AlreadyInWishlistError",
    "DomainError",
    "InvalidCategoryError",
    "InvalidPageError",
    "InvalidSortOptionError",
    "NotInWishlistError",
    "ProductNotFoundError",
    "UserNotFoundError",
    "WishlistError",
]
