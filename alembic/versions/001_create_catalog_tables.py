"""Create stores, products, users and wishes tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog and wishlist tables."""
    op.create_table(
        'stores',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
    )

    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('image_url', sa.String(1000), nullable=True),
        sa.Column('animal_category', sa.Integer(), nullable=False),
        sa.Column('product_category', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('store_id', sa.Integer(),
                  sa.ForeignKey('stores.id', ondelete='SET NULL'), nullable=True),
        sa.Column('model_num', sa.String(100), nullable=True),
        sa.Column('origin_label', sa.String(100), nullable=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('wish_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('purchase_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )
    op.create_index(
        'ix_products_animal_product_category',
        'products',
        ['animal_category', 'product_category'],
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('nickname', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    op.create_table(
        'wishes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(),
                  sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
    )

    # One wish per (user, product)
    op.create_unique_constraint(
        'uq_wishes_user_product',
        'wishes',
        ['user_id', 'product_id'],
    )


def downgrade() -> None:
    """Drop catalog and wishlist tables."""
    op.drop_table('wishes')
    op.drop_table('users')
    op.drop_index('ix_products_animal_product_category', table_name='products')
    op.drop_table('products')
    op.drop_table('stores')
