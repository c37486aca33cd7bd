"""Animal and product category tables.

Products are classified on two levels: an animal category (dog, cat,
small animal) and a product category whose code space depends on the
animal. Dog and cat share one product table; small animals have their
own, smaller one:

    dog / cat:  1 food  2 snack  3 clean  4 tableware  5 house  6 cloth
    small:      1 food  2 equipment  3 house

Every enum member carries its URL token and Korean display label, so
the token and label lookups are total over the members.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from petmall.domain.exceptions import InvalidCategoryError, InvalidSortOptionError


class _CodedCategory(IntEnum):
    """Integer-coded category with a token and display label."""

    def __new__(cls, code: int, token: str, label: str) -> "_CodedCategory":
        obj = int.__new__(cls, code)
        obj._value_ = code
        obj.token = token
        obj.label = label
        return obj

    @classmethod
    def from_token(cls, token: str) -> "_CodedCategory | None":
        """Find a member by token, or None."""
        for member in cls:
            if member.token == token:
                return member
        return None

    @classmethod
    def tokens(cls) -> list[str]:
        """All tokens in code order."""
        return [member.token for member in cls]


class AnimalCategory(_CodedCategory):
    """Top-level animal category."""

    DOG = (1, "dog", "강아지")
    CAT = (2, "cat", "고양이")
    SMALL = (3, "small", "소동물")


class ProductCategory(_CodedCategory):
    """Product categories for dogs and cats."""

    FOOD = (1, "food", "사료")
    SNACK = (2, "snack", "간식")
    CLEAN = (3, "clean", "위생")
    TABLEWARE = (4, "tableware", "급식기/급수기")
    HOUSE = (5, "house", "집/울타리")
    CLOTH = (6, "cloth", "의류/악세사리")


class SmallAnimalCategory(_CodedCategory):
    """Product categories for small animals."""

    FOOD = (1, "food", "사료")
    EQUIPMENT = (2, "equipment", "기구")
    HOUSE = (3, "house", "집/울타리")


class SortOption(str, Enum):
    """Product list ordering."""

    PRICE = "price"
    POPULARITY = "popularity"
    NEWEST = "newest"


DEFAULT_SORT = SortOption.PRICE


def _normalize(token: str | None) -> str:
    return (token or "").strip().lower()


def category_table(animal: AnimalCategory) -> type[_CodedCategory]:
    """Get the product category enum used by an animal category."""
    if animal is AnimalCategory.SMALL:
        return SmallAnimalCategory
    return ProductCategory


def parse_animal_category(token: str | None) -> AnimalCategory:
    """Convert an animal token ("dog", "cat", "small") to its category.

    Raises:
        InvalidCategoryError: If the token is empty or unknown.
    """
    animal = AnimalCategory.from_token(_normalize(token))
    if animal is None:
        raise InvalidCategoryError("animal", token, AnimalCategory.tokens())
    return animal


def parse_product_category(animal: AnimalCategory, token: str | None) -> int:
    """Convert a product token to its code within an animal's table.

    Raises:
        InvalidCategoryError: If the token is not valid for this animal.
    """
    table = category_table(animal)
    category = table.from_token(_normalize(token))
    if category is None:
        raise InvalidCategoryError("product", token, table.tokens())
    return int(category)


def parse_sort_option(token: str | None) -> SortOption:
    """Convert a sort token to a SortOption.

    A missing or blank token selects the default (price ascending).

    Raises:
        InvalidSortOptionError: If the token is not a known option.
    """
    normalized = _normalize(token)
    if not normalized:
        return DEFAULT_SORT
    try:
        return SortOption(normalized)
    except ValueError:
        raise InvalidSortOptionError(token, [o.value for o in SortOption]) from None


def product_categories_for(animal: AnimalCategory) -> list[int]:
    """Get every product category code valid for an animal, in code order."""
    return [int(category) for category in category_table(animal)]


def category_label(animal: AnimalCategory, code: int) -> str:
    """Get the display label of a product category code.

    Raises:
        InvalidCategoryError: If the code is not valid for this animal.
    """
    table = category_table(animal)
    try:
        return table(code).label
    except ValueError:
        raise InvalidCategoryError("product", str(code), table.tokens()) from None


# ============================================================================
# Navigation
# ============================================================================


@dataclass(frozen=True)
class NavigationCategory:
    """One product category entry in the navigation menu."""

    label: str
    display_value: str


@dataclass(frozen=True)
class NavigationEntry:
    """Navigation menu section for one animal category."""

    animal_id: str
    label: str
    product_categories: list[NavigationCategory] = field(default_factory=list)


def get_navigation_data() -> list[NavigationEntry]:
    """Build the navigation menu from the category tables.

    Pure: every call returns a new, equal structure.
    """
    return [
        NavigationEntry(
            animal_id=animal.token,
            label=animal.label,
            product_categories=[
                NavigationCategory(label=category.token, display_value=category.label)
                for category in category_table(animal)
            ],
        )
        for animal in AnimalCategory
    ]
