"""Wishlist module.

Users save products to a wishlist; each (user, product) pair is
stored at most once.
"""

from petmall.wishlist.models import User, Wish
from petmall.wishlist.repository import UserRepository, WishRepository
from petmall.wishlist.service import WishlistService

__all__ = [
    "User",
    "Wish",
    "UserRepository",
    "WishRepository",
    "WishlistService",
]
