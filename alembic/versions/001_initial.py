"""Initial schema: difficulties, regions, walks, users + seed rows

Revision ID: 001
Revises:
Create Date: 2025-10-11

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from indiatrails.db.seed import DIFFICULTIES, REGIONS

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    difficulties = op.create_table(
        "difficulties",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_difficulties"),
    )

    regions = op.create_table(
        "regions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("region_image_url", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_regions"),
    )
    op.create_index("ix_regions_name", "regions", ["name"], unique=False)

    op.create_table(
        "walks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("length_in_km", sa.Float(), nullable=False),
        sa.Column("walk_image_url", sa.Text(), nullable=True),
        sa.Column("difficulty_id", sa.Uuid(), nullable=False),
        sa.Column("region_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ["difficulty_id"], ["difficulties.id"], name="fk_walks_difficulty_id_difficulties", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["region_id"], ["regions.id"], name="fk_walks_region_id_regions", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_walks"),
    )
    op.create_index("ix_walks_name", "walks", ["name"], unique=False)
    op.create_index("ix_walks_difficulty_id", "walks", ["difficulty_id"], unique=False)
    op.create_index("ix_walks_region_id", "walks", ["region_id"], unique=False)

    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email_lower", "users", [sa.text("lower(email)")], unique=True)

    op.bulk_insert(difficulties, DIFFICULTIES)
    op.bulk_insert(regions, REGIONS)


def downgrade() -> None:
    op.drop_index("ix_users_email_lower", "users")
    op.drop_table("users")
    op.drop_index("ix_walks_region_id", "walks")
    op.drop_index("ix_walks_difficulty_id", "walks")
    op.drop_index("ix_walks_name", "walks")
    op.drop_table("walks")
    op.drop_index("ix_regions_name", "regions")
    op.drop_table("regions")
    op.drop_table("difficulties")
