"""Initial marketplace schema for VendorLink

Revision ID: 20261018_000000
Revises: None
Create Date: 2026-10-18 00:00:00.000000

Creates the marketplace tables:
- users, categories, products
- orders, group orders and their participants
- supplier reviews, product reviews, price alerts, support tickets
- server-side login sessions

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261018_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MONEY = sa.Numeric(10, 2)


def upgrade() -> None:
    """Create all marketplace tables."""

    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("profile_image_url", sa.Text(), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="vendor"),
        sa.Column("business_name", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("pincode", sa.String(20), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("credit_score", sa.Integer(), nullable=False, server_default="600"),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("supplier_id", sa.String(255), nullable=False),
        sa.Column("category_id", sa.String(36), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("unit", sa.String(50), nullable=False),
        sa.Column("price_per_unit", MONEY, nullable=False),
        sa.Column("available_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("minimum_order_quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["supplier_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.Index("ix_products_supplier_id", "supplier_id"),
        sa.Index("ix_products_category_id", "category_id"),
    )

    op.create_table(
        "group_orders",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("organizer_id", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("target_quantity", sa.Integer(), nullable=False),
        sa.Column("current_quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("max_participants", sa.Integer(), nullable=False, server_default="10"),
        sa.Column("current_participants", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("regular_price_per_unit", MONEY, nullable=False),
        sa.Column("group_price_per_unit", MONEY, nullable=False),
        sa.Column("deadline", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.ForeignKeyConstraint(["organizer_id"], ["users.id"]),
        sa.Index("ix_group_orders_organizer_id", "organizer_id"),
        sa.Index("ix_group_orders_status", "status"),
    )

    op.create_table(
        "group_order_participants",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("group_order_id", sa.String(36), nullable=False),
        sa.Column("vendor_id", sa.String(255), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("joined_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["group_order_id"], ["group_orders.id"]),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.id"]),
        sa.UniqueConstraint("group_order_id", "vendor_id", name="uq_group_order_participant"),
        sa.Index("ix_group_order_participants_group_order_id", "group_order_id"),
        sa.Index("ix_group_order_participants_vendor_id", "vendor_id"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("vendor_id", sa.String(255), nullable=False),
        sa.Column("supplier_id", sa.String(255), nullable=False),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("group_order_id", sa.String(36), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price_per_unit", MONEY, nullable=False),
        sa.Column("total_amount", MONEY, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("delivery_address", sa.Text(), nullable=True),
        sa.Column("expected_delivery_date", sa.DateTime(), nullable=True),
        sa.Column("actual_delivery_date", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["supplier_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.ForeignKeyConstraint(["group_order_id"], ["group_orders.id"]),
        sa.Index("ix_orders_vendor_id", "vendor_id"),
        sa.Index("ix_orders_supplier_id", "supplier_id"),
        sa.Index("ix_orders_status", "status"),
        sa.Index("ix_orders_created_at", "created_at"),
    )

    op.create_table(
        "reviews",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("order_id", sa.String(36), nullable=False),
        sa.Column("vendor_id", sa.String(255), nullable=False),
        sa.Column("supplier_id", sa.String(255), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"]),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["supplier_id"], ["users.id"]),
        sa.UniqueConstraint("order_id"),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
        sa.Index("ix_reviews_supplier_id", "supplier_id"),
    )

    op.create_table(
        "product_reviews",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("vendor_id", sa.String(255), nullable=False),
        sa.Column("supplier_id", sa.String(255), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.Column("helpful_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["supplier_id"], ["users.id"]),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_product_reviews_rating"),
        sa.Index("ix_product_reviews_product_id", "product_id"),
    )

    op.create_table(
        "price_alerts",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("vendor_id", sa.String(255), nullable=False),
        sa.Column("product_id", sa.String(36), nullable=False),
        sa.Column("target_price", MONEY, nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["vendor_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"]),
        sa.Index("ix_price_alerts_vendor_id", "vendor_id"),
    )

    op.create_table(
        "support_tickets",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(20), nullable=False, server_default="open"),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("assigned_to", sa.String(255), nullable=True),
        sa.Column("resolution", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.Index("ix_support_tickets_user_id", "user_id"),
    )

    op.create_table(
        "sessions",
        sa.Column("sid", sa.String(255), nullable=False),
        sa.Column("sess", sa.JSON(), nullable=False),
        sa.Column("expire", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("sid"),
        sa.Index("ix_sessions_expire", "expire"),
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("sessions")
    op.drop_table("support_tickets")
    op.drop_table("price_alerts")
    op.drop_table("product_reviews")
    op.drop_table("reviews")
    op.drop_table("orders")
    op.drop_table("group_order_participants")
    op.drop_table("group_orders")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("users")
