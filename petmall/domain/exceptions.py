"""Domain exceptions.

All domain-level errors raised by the catalog and wishlist services.
Each carries a machine-readable ``error_code`` so the API layer can
map it to a client-facing status without inspecting messages.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Request Parameter Errors
# ============================================================================


class InvalidCategoryError(DomainError):
    """Raised when an animal or product category token is not recognized."""

    error_code = "INVALID_CATEGORY"

    def __init__(self, kind: str, token: str | None, allowed: list[str]) -> None:
        """Initialize invalid category error.

        Args:
            kind: Which category was being parsed ("animal" or "product").
            token: The rejected token.
            allowed: Tokens that would have been accepted.
        """
        super().__init__(
            f"Unknown {kind} category '{token}'. Allowed: {allowed}",
            details={"kind": kind, "token": token, "allowed": allowed},
        )


class InvalidSortOptionError(DomainError):
    """Raised when a sort token is not recognized."""

    error_code = "INVALID_SORT_OPTION"

    def __init__(self, token: str, allowed: list[str]) -> None:
        super().__init__(
            f"Unknown sort option '{token}'. Allowed: {allowed}",
            details={"token": token, "allowed": allowed},
        )


class InvalidPageError(DomainError):
    """Raised when a page number is outside the pageable range."""

    error_code = "INVALID_PAGE"

    def __init__(self, page: int, max_page: int) -> None:
        super().__init__(
            f"Page number must be between 1 and {max_page}, got {page}",
            details={"page": page, "max_page": max_page},
        )


# ============================================================================
# Lookup Errors
# ============================================================================


class ProductNotFoundError(DomainError):
    """Raised when a product does not exist."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int) -> None:
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )


class UserNotFoundError(DomainError):
    """Raised when a user does not exist."""

    error_code = "USER_NOT_FOUND"

    def __init__(self, user_id: int) -> None:
        super().__init__(
            f"User not found: {user_id}",
            details={"user_id": user_id},
        )


# ============================================================================
# Wishlist Errors
# ============================================================================


class WishlistError(DomainError):
    """Base class for wishlist-related errors."""

    pass


class AlreadyInWishlistError(WishlistError):
    """Raised when a product is already in the user's wishlist."""

    error_code = "ALREADY_IN_WISHLIST"

    def __init__(self, user_id: int, product_id: int) -> None:
        """Initialize already-in-wishlist error.

        Args:
            user_id: ID of the user.
            product_id: ID of the product.
        """
        super().__init__(
            f"Product {product_id} is already in the wishlist of user {user_id}",
            details={"user_id": user_id, "product_id": product_id},
        )


class NotInWishlistError(WishlistError):
    """Raised when removing a product that is not in the user's wishlist."""

    error_code = "NOT_IN_WISHLIST"

    def __init__(self, user_id: int, product_id: int) -> None:
        """Initialize not-in-wishlist error.

        Args:
            user_id: ID of the user.
            product_id: ID of the product.
        """
        super().__init__(
            f"Product {product_id} is not in the wishlist of user {user_id}",
            details={"user_id": user_id, "product_id": product_id},
        )
