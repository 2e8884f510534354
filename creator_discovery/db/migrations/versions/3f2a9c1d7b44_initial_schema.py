"""Initial schema

Revision ID: 3f2a9c1d7b44
Revises:
Create Date: 2026-10-19 09:12:41.508311

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b44"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "countries",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "industries",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("value", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "creators",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("username", sa.String(), nullable=True),
        sa.Column("nickname", sa.String(), nullable=True),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column(
            "visibility", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "follower_count", sa.BigInteger(), nullable=False, server_default="0"
        ),
        sa.Column("view_count", sa.String(), nullable=True),
        sa.Column("like_count", sa.String(), nullable=True),
        sa.Column("comment_count", sa.String(), nullable=True),
        sa.Column("share_count", sa.String(), nullable=True),
        sa.Column("country_id", sa.String(), nullable=True),
        sa.ForeignKeyConstraint(["country_id"], ["countries.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_creators_username", "creators", ["username"])
    op.create_index("ix_creators_country_id", "creators", ["country_id"])
    # Serves the visibility filter together with the follower-count sort
    op.create_index(
        "ix_creators_visibility_follower_count",
        "creators",
        ["visibility", "follower_count"],
    )

    op.create_table(
        "creator_industries",
        sa.Column("creator_id", sa.String(), nullable=False),
        sa.Column("industry_id", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["creator_id"], ["creators.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["industry_id"], ["industries.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("creator_id", "industry_id"),
    )
    op.create_index(
        "ix_creator_industries_industry_id", "creator_industries", ["industry_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_creator_industries_industry_id", table_name="creator_industries")
    op.drop_table("creator_industries")
    op.drop_index("ix_creators_visibility_follower_count", table_name="creators")
    op.drop_index("ix_creators_country_id", table_name="creators")
    op.drop_index("ix_creators_username", table_name="creators")
    op.drop_table("creators")
    op.drop_table("industries")
    op.drop_table("countries")
