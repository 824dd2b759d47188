"""Create bookmarks, labels and bookmark_labels tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

# Must match versemark.domain.annotations.bookmark_style.RESERVED_STYLES
RESERVED_STYLE_PREDICATE = "bookmark_style IN ('SPEAK')"


def upgrade() -> None:
    """Create bookmark and label tables with their association table."""
    op.create_table(
        "bookmarks",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("kjv_ordinal_start", sa.Integer(), nullable=False),
        sa.Column("kjv_ordinal_end", sa.Integer(), nullable=False),
        sa.Column("versification", sa.String(length=32), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "kjv_ordinal_start <= kjv_ordinal_end", name="ck_bookmarks_ordinal_order"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_bookmarks_id"), "bookmarks", ["id"], unique=False)
    op.create_index(
        op.f("ix_bookmarks_kjv_ordinal_start"), "bookmarks", ["kjv_ordinal_start"], unique=False
    )
    op.create_index(
        op.f("ix_bookmarks_kjv_ordinal_end"), "bookmarks", ["kjv_ordinal_end"], unique=False
    )
    op.create_index(
        "ix_bookmarks_ordinal_range",
        "bookmarks",
        ["kjv_ordinal_start", "kjv_ordinal_end"],
        unique=False,
    )

    op.create_table(
        "labels",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("bookmark_style", sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_labels_id"), "labels", ["id"], unique=False)
    op.create_index(op.f("ix_labels_bookmark_style"), "labels", ["bookmark_style"], unique=False)
    # At most one label per reserved style
    op.create_index(
        "uq_labels_reserved_style",
        "labels",
        ["bookmark_style"],
        unique=True,
        sqlite_where=sa.text(RESERVED_STYLE_PREDICATE),
        postgresql_where=sa.text(RESERVED_STYLE_PREDICATE),
    )

    op.create_table(
        "bookmark_labels",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("bookmark_id", sa.Integer(), nullable=False),
        sa.Column("label_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["bookmark_id"],
            ["bookmarks.id"],
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["label_id"],
            ["labels.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("bookmark_id", "label_id", name="uq_bookmark_labels_pair"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        op.f("ix_bookmark_labels_bookmark_id"), "bookmark_labels", ["bookmark_id"], unique=False
    )
    op.create_index(
        op.f("ix_bookmark_labels_label_id"), "bookmark_labels", ["label_id"], unique=False
    )


def downgrade() -> None:
    """Drop bookmark and label tables."""
    op.drop_index(op.f("ix_bookmark_labels_label_id"), table_name="bookmark_labels")
    op.drop_index(op.f("ix_bookmark_labels_bookmark_id"), table_name="bookmark_labels")
    op.drop_table("bookmark_labels")

    op.drop_index("uq_labels_reserved_style", table_name="labels")
    op.drop_index(op.f("ix_labels_bookmark_style"), table_name="labels")
    op.drop_index(op.f("ix_labels_id"), table_name="labels")
    op.drop_table("labels")

    op.drop_index("ix_bookmarks_ordinal_range", table_name="bookmarks")
    op.drop_index(op.f("ix_bookmarks_kjv_ordinal_end"), table_name="bookmarks")
    op.drop_index(op.f("ix_bookmarks_kjv_ordinal_start"), table_name="bookmarks")
    op.drop_index(op.f("ix_bookmarks_id"), table_name="bookmarks")
    op.drop_table("bookmarks")
