"""Product Catalog Service.

Provides category translation, navigation metadata, and product
listing/lookup operations.
"""

from petmall.catalog.categories import (
    AnimalCategory,
    NavigationCategory,
    NavigationEntry,
    ProductCategory,
    SmallAnimalCategory,
    SortOption,
    get_navigation_data,
)
from petmall.catalog.models import Product, Store
from petmall.catalog.repository import ProductRepository
from petmall.catalog.service import CatalogService, CategoryGroup, PaginationParams

__all__ = [
    # Categories
    "AnimalCategory",
    "ProductCategory",
    "SmallAnimalCategory",
    "SortOption",
    "NavigationCategory",
    "NavigationEntry",
    "get_navigation_data",
    # Models
    "Product",
    "Store",
    # Repository
    "ProductRepository",
    # Service
    "CatalogService",
    "CategoryGroup",
    "PaginationParams",
]
