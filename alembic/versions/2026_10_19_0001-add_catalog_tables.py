"""add_catalog_tables

Revision ID: c4f1a7d2e901
Revises:
Create Date: 2026-10-19 00:01:00.000000

Creates the catalog tables: manufacturers, locomotive_models, owners,
units, tags, pictures (with picture_tags) and documentations.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "c4f1a7d2e901"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "verified",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def _record_indexes(table: str) -> None:
    op.create_index(f"ix_{table}_id", table, ["id"], unique=False)
    op.create_index(f"ix_{table}_verified", table, ["verified"], unique=False)


def _reference(column: str, target: str) -> tuple[sa.Column, sa.ForeignKeyConstraint]:
    return (
        sa.Column(column, sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint([column], [f"{target}.id"], ondelete="SET NULL"),
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "manufacturers",
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("short_name", sa.String(length=50), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("creation_date", sa.Date(), nullable=True),
        sa.Column("works", sa.Boolean(), nullable=False),
        sa.Column("date_of_liquidation", sa.Date(), nullable=True),
        *_record_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("manufacturers")
    op.create_index("ix_manufacturers_country", "manufacturers", ["country"])

    manufacturer_col, manufacturer_fk = _reference("manufacturer_id", "manufacturers")
    op.create_table(
        "locomotive_models",
        sa.Column("model_name", sa.String(length=255), nullable=False),
        sa.Column("factory_type", sa.String(length=255), nullable=True),
        manufacturer_col,
        sa.Column("manufacturer_model", sa.String(length=255), nullable=True),
        sa.Column("intended_use", sa.String(length=255), nullable=True),
        sa.Column("type", sa.String(length=255), nullable=True),
        sa.Column("spec_table", sa.JSON(), nullable=True),
        sa.Column("series", sa.String(length=255), nullable=True),
        *_record_columns(),
        manufacturer_fk,
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("locomotive_models")
    op.create_index(
        "ix_locomotive_models_manufacturer_id", "locomotive_models", ["manufacturer_id"]
    )
    op.create_index("ix_locomotive_models_type", "locomotive_models", ["type"])

    op.create_table(
        "owners",
        sa.Column("name", sa.String(length=255), nullable=False),
        *_record_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("owners")
    op.create_index("ix_owners_name", "owners", ["name"])

    model_col, model_fk = _reference("model_id", "locomotive_models")
    owner_col, owner_fk = _reference("owner_id", "owners")
    manufacturer_col, manufacturer_fk = _reference("manufacturer_id", "manufacturers")
    op.create_table(
        "units",
        sa.Column("number", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        model_col,
        owner_col,
        manufacturer_col,
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("assignments", sa.JSON(), nullable=False),
        sa.Column("repair_history", sa.JSON(), nullable=False),
        sa.Column("country_of_operation", sa.String(length=100), nullable=True),
        *_record_columns(),
        model_fk,
        owner_fk,
        manufacturer_fk,
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("units")
    for column in (
        "number",
        "model_id",
        "owner_id",
        "manufacturer_id",
        "state",
        "country_of_operation",
    ):
        op.create_index(f"ix_units_{column}", "units", [column])

    op.create_table(
        "tags",
        sa.Column("name", sa.String(length=100), nullable=False),
        *_record_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("tags")
    op.create_index("ix_tags_name", "tags", ["name"], unique=True)

    unit_col, unit_fk = _reference("unit_id", "units")
    model_col, model_fk = _reference("model_id", "locomotive_models")
    op.create_table(
        "pictures",
        sa.Column("url", sa.String(length=2048), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=True),
        sa.Column("author", sa.String(length=255), nullable=True),
        unit_col,
        model_col,
        *_record_columns(),
        unit_fk,
        model_fk,
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("pictures")
    op.create_index("ix_pictures_unit_id", "pictures", ["unit_id"])
    op.create_index("ix_pictures_model_id", "pictures", ["model_id"])

    op.create_table(
        "picture_tags",
        sa.Column("picture_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["picture_id"], ["pictures.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("picture_id", "tag_id"),
    )

    model_col, model_fk = _reference("model_id", "locomotive_models")
    op.create_table(
        "documentations",
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("author", sa.String(length=255), nullable=True),
        sa.Column("issue_number", sa.String(length=50), nullable=True),
        sa.Column("publisher", sa.String(length=255), nullable=True),
        sa.Column("release_date", sa.Date(), nullable=True),
        sa.Column("type", sa.String(length=255), nullable=True),
        sa.Column("url", sa.String(length=2048), nullable=True),
        model_col,
        *_record_columns(),
        model_fk,
        sa.PrimaryKeyConstraint("id"),
    )
    _record_indexes("documentations")
    op.create_index("ix_documentations_publisher", "documentations", ["publisher"])
    op.create_index("ix_documentations_type", "documentations", ["type"])
    op.create_index("ix_documentations_model_id", "documentations", ["model_id"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Indexes go with their tables
    op.drop_table("documentations")
    op.drop_table("picture_tags")
    op.drop_table("pictures")
    op.drop_table("tags")
    op.drop_table("units")
    op.drop_table("owners")
    op.drop_table("locomotive_models")
    op.drop_table("manufacturers")
