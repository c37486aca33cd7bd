#!/usr/bin/env python3
"""Seed demo catalog script.

Creates the tables and fills them with a deterministic pet-supplies
catalog plus a few demo users.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --users 10
"""

import argparse
import asyncio

from petmall.catalog.generator import GeneratorConfig, ProductGenerator
from petmall.catalog.repository import ProductRepository
from petmall.infrastructure.database import Base, async_session_factory, engine
from petmall.wishlist.models import User
from petmall.wishlist.repository import UserRepository


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(mode: str, user_count: int) -> dict:
    """Seed stores, products and users.

    Args:
        mode: Catalog size (small/full).
        user_count: Number of demo users to create.

    Returns:
        Seeding result.
    """
    config = GeneratorConfig.full() if mode == "full" else GeneratorConfig.small()
    generator = ProductGenerator(config)

    async with async_session_factory() as session:
        stores = generator.generate_stores()
        session.add_all(stores)

        products = await ProductRepository(session).save_all(
            generator.generate_list(stores)
        )

        users = UserRepository(session)
        for i in range(1, user_count + 1):
            await users.save(User(email=f"demo{i}@petmall.dev", nickname=f"demo{i}"))

        await session.commit()

    return {
        "stores_created": len(stores),
        "products_created": len(products),
        "users_created": user_count,
    }


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the PetMall demo catalog",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (75 products) or full (600 products)",
    )
    parser.add_argument(
        "--users",
        type=int,
        default=3,
        help="Number of demo users to create (default: 3)",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("PetMall Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    result = await seed(mode=args.mode, user_count=args.users)

    print(f"  ✓ Stores: {result['stores_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Users: {result['users_created']}")
    print()

    await engine.dispose()

    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
