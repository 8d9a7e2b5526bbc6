"""create quote and quote_line tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "quote",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("fulfillment_frequency", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_quote")),
    )
    op.create_table(
        "quote_line",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("quote_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("product_id", sa.String(length=64), nullable=False),
        sa.Column("product_code", sa.String(), nullable=False),
        sa.Column("product_name", sa.String(), nullable=True),
        sa.Column("order_account_id", sa.String(length=64), nullable=True),
        sa.Column("order_account_name", sa.String(), nullable=True),
        sa.Column("quantity", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("net_price", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("amend_type", sa.String(), nullable=True),
        sa.Column("amended_from_id", sa.String(length=64), nullable=True),
        sa.Column("original_quantity", sa.Numeric(precision=12, scale=3), nullable=True),
        sa.Column("original_net_price", sa.Numeric(precision=14, scale=2), nullable=True),
        sa.ForeignKeyConstraint(
            ["quote_id"],
            ["quote.id"],
            name=op.f("fk_quote_line_quote_id_quote"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["amended_from_id"],
            ["quote_line.id"],
            name=op.f("fk_quote_line_amended_from_id_quote_line"),
            ondelete="SET NULL",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_quote_line")),
    )
    op.create_index("ix_quote_line_quote_id", "quote_line", ["quote_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_quote_line_quote_id", table_name="quote_line")
    op.drop_table("quote_line")
    op.drop_table("quote")
