"""Database models."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from versemark.database import Base
from versemark.domain.annotations.bookmark_style import RESERVED_STYLES

# Partial index predicate; at most one label row per reserved style
RESERVED_STYLE_PREDICATE = "bookmark_style IN ({})".format(
    ", ".join(f"'{style.value}'" for style in sorted(RESERVED_STYLES))
)


class Bookmark(Base):
    """Bookmark over a canonical verse ordinal range."""

    __tablename__ = "bookmarks"
    __table_args__ = (
        CheckConstraint(
            "kjv_ordinal_start <= kjv_ordinal_end", name="ck_bookmarks_ordinal_order"
        ),
        Index("ix_bookmarks_ordinal_range", "kjv_ordinal_start", "kjv_ordinal_end"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    kjv_ordinal_start: Mapped[int] = mapped_column(nullable=False, index=True)
    kjv_ordinal_end: Mapped[int] = mapped_column(nullable=False, index=True)
    versification: Mapped[str] = mapped_column(String(32), nullable=False, default="KJV")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Bookmark."""
        return (
            f"<Bookmark(id={self.id}, "
            f"range=[{self.kjv_ordinal_start}, {self.kjv_ordinal_end}])>"
        )


class Label(Base):
    """Label that can be attached to many bookmarks."""

    __tablename__ = "labels"
    __table_args__ = (
        Index(
            "uq_labels_reserved_style",
            "bookmark_style",
            unique=True,
            sqlite_where=text(RESERVED_STYLE_PREDICATE),
            postgresql_where=text(RESERVED_STYLE_PREDICATE),
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    bookmark_style: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of Label."""
        return f"<Label(id={self.id}, name='{self.name}', style={self.bookmark_style})>"


class BookmarkToLabel(Base):
    """Association row linking one bookmark to one label."""

    __tablename__ = "bookmark_labels"
    __table_args__ = (
        UniqueConstraint("bookmark_id", "label_id", name="uq_bookmark_labels_pair"),
        # Association ids are never reused
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    bookmark_id: Mapped[int] = mapped_column(
        ForeignKey("bookmarks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    label_id: Mapped[int] = mapped_column(
        ForeignKey("labels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    def __repr__(self) -> str:
        """String representation of BookmarkToLabel."""
        return f"<BookmarkToLabel(bookmark_id={self.bookmark_id}, label_id={self.label_id})>"
