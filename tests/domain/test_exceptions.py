"""Tests for domain exceptions."""

from petmall.domain.exceptions import (
    AlreadyInWishlistError,
    DomainError,
    InvalidCategoryError,
    InvalidPageError,
    NotInWishlistError,
    WishlistError,
)


def test_error_codes() -> None:
    """Each error carries a stable machine-readable code."""
    assert InvalidPageError(0, 10).error_code == "INVALID_PAGE"
    assert AlreadyInWishlistError(1, 2).error_code == "ALREADY_IN_WISHLIST"
    assert NotInWishlistError(1, 2).error_code == "NOT_IN_WISHLIST"


def test_hierarchy() -> None:
    """Wishlist errors share a base; everything is a DomainError."""
    error = AlreadyInWishlistError(1, 2)
    assert isinstance(error, WishlistError)
    assert isinstance(error, DomainError)


def test_message_and_details() -> None:
    """Message is the exception text; details keep the context."""
    error = InvalidCategoryError("animal", "bird", ["dog", "cat", "small"])
    assert str(error) == error.message
    assert "bird" in error.message
    assert error.details == {"kind": "animal", "token": "bird", "allowed": ["dog", "cat", "small"]}
