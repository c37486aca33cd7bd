"""Tests for category tables and token parsing."""

import pytest

from petmall.catalog.categories import (
    AnimalCategory,
    NavigationCategory,
    ProductCategory,
    SmallAnimalCategory,
    SortOption,
    category_label,
    get_navigation_data,
    parse_animal_category,
    parse_product_category,
    parse_sort_option,
    product_categories_for,
)
from petmall.domain.exceptions import InvalidCategoryError, InvalidSortOptionError


class TestAnimalCategory:
    """Tests for animal token parsing."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("dog", AnimalCategory.DOG),
            ("cat", AnimalCategory.CAT),
            ("small", AnimalCategory.SMALL),
            ("  Dog ", AnimalCategory.DOG),
        ],
    )
    def test_parse_known_tokens(self, token: str, expected: AnimalCategory) -> None:
        """Known tokens map to their category, ignoring case and spaces."""
        assert parse_animal_category(token) is expected

    def test_codes(self) -> None:
        """Animal codes are 1, 2, 3."""
        assert [int(a) for a in AnimalCategory] == [1, 2, 3]

    @pytest.mark.parametrize("token", ["bird", "", None])
    def test_unknown_token_rejected(self, token: str | None) -> None:
        """Unknown or missing tokens raise a typed error."""
        with pytest.raises(InvalidCategoryError) as exc_info:
            parse_animal_category(token)
        assert exc_info.value.error_code == "INVALID_CATEGORY"
        assert exc_info.value.details["allowed"] == ["dog", "cat", "small"]

    def test_every_member_has_label(self) -> None:
        """Every animal carries a token and a label."""
        for animal in AnimalCategory:
            assert animal.token
            assert animal.label


class TestProductCategory:
    """Tests for product token parsing."""

    def test_dog_and_cat_share_table(self) -> None:
        """Dog and cat resolve tokens through the same table."""
        assert parse_product_category(AnimalCategory.DOG, "snack") == 2
        assert parse_product_category(AnimalCategory.CAT, "snack") == 2
        assert parse_product_category(AnimalCategory.CAT, "cloth") == 6

    def test_small_animal_table(self) -> None:
        """Small animals have their own code space."""
        assert parse_product_category(AnimalCategory.SMALL, "food") == 1
        assert parse_product_category(AnimalCategory.SMALL, "equipment") == 2
        assert parse_product_category(AnimalCategory.SMALL, "house") == 3

    def test_token_of_other_table_rejected(self) -> None:
        """A dog/cat token is not valid for small animals and vice versa."""
        with pytest.raises(InvalidCategoryError):
            parse_product_category(AnimalCategory.SMALL, "snack")
        with pytest.raises(InvalidCategoryError):
            parse_product_category(AnimalCategory.DOG, "equipment")

    def test_product_categories_for(self) -> None:
        """Code lists are ordered and sized per animal."""
        assert product_categories_for(AnimalCategory.DOG) == [1, 2, 3, 4, 5, 6]
        assert product_categories_for(AnimalCategory.CAT) == [1, 2, 3, 4, 5, 6]
        assert product_categories_for(AnimalCategory.SMALL) == [1, 2, 3]

    def test_category_label_uses_animal_table(self) -> None:
        """Code 2 means snack for dogs but equipment for small animals."""
        assert category_label(AnimalCategory.DOG, 2) == "간식"
        assert category_label(AnimalCategory.SMALL, 2) == "기구"
        assert category_label(AnimalCategory.SMALL, 3) == "집/울타리"

    def test_category_label_unknown_code(self) -> None:
        """A code outside the animal's table is rejected."""
        with pytest.raises(InvalidCategoryError):
            category_label(AnimalCategory.SMALL, 6)

    def test_tables_are_total(self) -> None:
        """Every product category member has a unique token and a label."""
        for table in (ProductCategory, SmallAnimalCategory):
            tokens = table.tokens()
            assert len(tokens) == len(set(tokens))
            assert all(member.label for member in table)


class TestSortOption:
    """Tests for sort token parsing."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("popularity", SortOption.POPULARITY),
            ("newest", SortOption.NEWEST),
            ("price", SortOption.PRICE),
            ("NEWEST", SortOption.NEWEST),
            (None, SortOption.PRICE),
            ("", SortOption.PRICE),
        ],
    )
    def test_parse(self, token: str | None, expected: SortOption) -> None:
        """Known tokens parse; missing tokens default to price."""
        assert parse_sort_option(token) is expected

    def test_unknown_rejected(self) -> None:
        """Unknown sort tokens raise a typed error."""
        with pytest.raises(InvalidSortOptionError) as exc_info:
            parse_sort_option("rating")
        assert exc_info.value.error_code == "INVALID_SORT_OPTION"


class TestNavigationData:
    """Tests for the navigation menu."""

    def test_structure(self) -> None:
        """Three animals; dog and cat have 6 entries, small has 3."""
        data = get_navigation_data()
        assert [entry.animal_id for entry in data] == ["dog", "cat", "small"]
        assert [entry.label for entry in data] == ["강아지", "고양이", "소동물"]
        assert [len(entry.product_categories) for entry in data] == [6, 6, 3]

    def test_entries(self) -> None:
        """Entries pair a token with its Korean label."""
        dog, _, small = get_navigation_data()
        assert dog.product_categories[0] == NavigationCategory(label="food", display_value="사료")
        assert dog.product_categories[3] == NavigationCategory(
            label="tableware", display_value="급식기/급수기"
        )
        assert [c.label for c in small.product_categories] == ["food", "equipment", "house"]

    def test_deterministic(self) -> None:
        """Two calls return equal but independent structures."""
        first = get_navigation_data()
        second = get_navigation_data()
        assert first == second
        assert first is not second
        assert first[0].product_categories is not second[0].product_categories
