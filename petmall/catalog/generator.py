"""Demo catalog generator with deterministic seeding.

Generates a pet-supplies catalog covering every animal/product
category pair. Uses seeded random for reproducibility.
"""

import hashlib
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterator

from petmall.catalog.categories import AnimalCategory, category_table
from petmall.catalog.models import Product, Store


# ============================================================================
# Constants
# ============================================================================

STORE_NAMES = [
    "멍냥상회",
    "펫스토리",
    "해피테일",
    "포근한집사",
    "작은친구들",
]

ORIGIN_LABELS = ["국내산", "미국", "캐나다", "독일", "일본", "중국"]

# Price ranges by product category token (KRW)
PRICE_RANGES: dict[str, tuple[int, int]] = {
    "food": (15000, 120000),
    "snack": (3000, 30000),
    "clean": (5000, 60000),
    "tableware": (8000, 70000),
    "house": (20000, 250000),
    "cloth": (9000, 60000),
    "equipment": (5000, 80000),
    "default": (5000, 50000),
}

# Product name templates by product category token
NAME_TEMPLATES: dict[str, list[str]] = {
    "food": ["{adj} {animal} 사료", "{adj} 그레인프리 {animal} 사료", "{adj} 연어 {animal} 사료"],
    "snack": ["{adj} {animal} 져키", "{adj} {animal} 트릿", "{adj} 동결건조 간식"],
    "clean": ["{adj} 배변패드", "{adj} {animal} 샴푸", "{adj} 탈취 스프레이"],
    "tableware": ["{adj} 세라믹 식기", "{adj} 자동 급수기", "{adj} 높이조절 식탁"],
    "house": ["{adj} {animal} 하우스", "{adj} 방석 쿠션", "{adj} 울타리"],
    "cloth": ["{adj} {animal} 후드티", "{adj} 하네스", "{adj} 니트 조끼"],
    "equipment": ["{adj} 쳇바퀴", "{adj} 터널 놀이기구", "{adj} 은신처"],
    "default": ["{adj} {animal} 용품"],
}

ADJECTIVES = ["프리미엄", "데일리", "유기농", "베이직", "스페셜", "내추럴", "소프트"]


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for catalog generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category pair.
        base_time: Newest possible creation time of a product.
    """

    seed: int = 42
    products_per_category: int = 10
    base_time: datetime = datetime(2026, 1, 1, tzinfo=timezone.utc)

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for small catalog (5 per category, 75 products)."""
        return cls(seed=42, products_per_category=5)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for full catalog (40 per category, 600 products)."""
        return cls(seed=42, products_per_category=40)


# ============================================================================
# Catalog Generator
# ============================================================================


class ProductGenerator:
    """Generates demo stores and products with deterministic seeding.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small())
        stores = generator.generate_stores()
        products = generator.generate_list(stores)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator with configuration.

        Args:
            config: Generator configuration.
        """
        self.config = config

    def _deterministic_seed(self, *args: str | int) -> int:
        """Create deterministic seed from arguments."""
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_image_url(self, *args: str | int) -> str:
        """Generate placeholder image URL."""
        seed = self._deterministic_seed(*args)
        return f"https://picsum.photos/seed/{seed}/400/400"

    def generate_stores(self) -> list[Store]:
        """Generate the demo stores."""
        return [Store(name=name) for name in STORE_NAMES]

    def _generate_product(
        self,
        animal: AnimalCategory,
        code: int,
        token: str,
        index: int,
        stores: list[Store],
    ) -> Product:
        """Generate a single product.

        Args:
            animal: Animal category.
            code: Product category code.
            token: Product category token.
            index: Product index within the category pair.
            stores: Stores to assign products to.

        Returns:
            Generated Product.
        """
        rng = random.Random(self._deterministic_seed(self.config.seed, int(animal), code, index))

        adj = rng.choice(ADJECTIVES)
        template = rng.choice(NAME_TEMPLATES.get(token, NAME_TEMPLATES["default"]))
        name = template.format(adj=adj, animal=animal.label)

        min_price, max_price = PRICE_RANGES.get(token, PRICE_RANGES["default"])
        price = (rng.randint(min_price, max_price) // 100) * 100

        model_num = f"{animal.token[:1].upper()}{code:02d}-{index:04d}"

        return Product(
            image_url=self._generate_image_url(int(animal), code, index),
            animal_category=int(animal),
            product_category=code,
            name=name,
            store=stores[rng.randrange(len(stores))] if stores else None,
            model_num=model_num,
            origin_label=rng.choice(ORIGIN_LABELS),
            price=price,
            description=f"{animal.label} 전용 {adj} 상품입니다. ({model_num})",
            stock=rng.randint(0, 300),
            wish_count=rng.randint(0, 500),
            purchase_count=rng.randint(0, 1000),
            created_at=self.config.base_time - timedelta(days=rng.randint(0, 365)),
        )

    def generate(self, stores: list[Store] | None = None) -> Iterator[Product]:
        """Generate products for every animal/product category pair.

        Yields:
            Generated Product instances.
        """
        stores = stores or []
        for animal in AnimalCategory:
            for category in category_table(animal):
                for i in range(self.config.products_per_category):
                    yield self._generate_product(animal, int(category), category.token, i, stores)

    def generate_list(self, stores: list[Store] | None = None) -> list[Product]:
        """Generate all products as a list."""
        return list(self.generate(stores))

    @property
    def expected_count(self) -> int:
        """Get expected number of products."""
        pairs = sum(len(category_table(animal)) for animal in AnimalCategory)
        return pairs * self.config.products_per_category
