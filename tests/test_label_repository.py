"""Tests for LabelRepository, including the reserved speak label."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker

from versemark import models
from versemark.database import Base
from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.label import Label
from versemark.domain.common.value_objects import LabelId
from versemark.exceptions import ConstraintError, LabelNotFoundError, StorageError
from versemark.infrastructure.annotations.repositories import (
    BookmarkLabelRepository,
    LabelRepository,
)
from tests.conftest import create_test_bookmark, create_test_label


def speak_label_count(db_session: Session) -> int:
    stmt = (
        select(func.count())
        .select_from(models.Label)
        .where(models.Label.bookmark_style == BookmarkStyle.SPEAK.value)
    )
    return db_session.scalar(stmt) or 0


class TestLabelCrud:
    def test_insert_and_find(self, label_repository: LabelRepository) -> None:
        label = Label.create("Promises", BookmarkStyle.GREEN_HIGHLIGHT)

        saved = label.with_id(label_repository.insert(label))

        assert label_repository.find_by_id(saved.id) == saved

    def test_names_need_not_be_unique(self, db_session: Session) -> None:
        first = create_test_label(db_session, "Same")
        second = create_test_label(db_session, "Same")

        assert first.id != second.id

    def test_update_renames_and_restyles(
        self, db_session: Session, label_repository: LabelRepository
    ) -> None:
        label = create_test_label(db_session, "Old")
        label.rename("New")
        label.restyle(BookmarkStyle.UNDERLINE)

        label_repository.update(label)

        fetched = label_repository.find_by_id(label.id)
        assert fetched is not None
        assert fetched.name == "New"
        assert fetched.bookmark_style == BookmarkStyle.UNDERLINE

    def test_update_missing_raises(self, label_repository: LabelRepository) -> None:
        label = Label.create("Ghost").with_id(LabelId(999))

        with pytest.raises(LabelNotFoundError):
            label_repository.update(label)

    def test_update_cannot_move_label_into_reserved_style(
        self, db_session: Session, label_repository: LabelRepository
    ) -> None:
        label = create_test_label(db_session)
        label.bookmark_style = BookmarkStyle.SPEAK

        with pytest.raises(ConstraintError):
            label_repository.update(label)

        assert speak_label_count(db_session) == 0

    def test_delete_missing_raises(self, label_repository: LabelRepository) -> None:
        with pytest.raises(LabelNotFoundError):
            label_repository.delete(Label.create("Ghost").with_id(LabelId(999)))

    def test_delete_cascades_associations(
        self,
        db_session: Session,
        label_repository: LabelRepository,
        bookmark_label_repository: BookmarkLabelRepository,
    ) -> None:
        bookmark = create_test_bookmark(db_session, 1, 5)
        doomed = create_test_label(db_session, "Doomed")
        kept = create_test_label(db_session, "Kept")
        bookmark_label_repository.insert_batch([(bookmark.id, doomed.id), (bookmark.id, kept.id)])

        label_repository.delete(doomed)

        assert label_repository.find_by_id(doomed.id) is None
        assert bookmark_label_repository.labels_for(bookmark.id) == [kept]
        assert bookmark_label_repository.bookmarks_for(doomed.id) == []

    def test_find_all_sorted_by_name(
        self, db_session: Session, label_repository: LabelRepository
    ) -> None:
        create_test_label(db_session, "Mercy")
        create_test_label(db_session, "Faith")
        create_test_label(db_session, "Hope")

        names = [label.name for label in label_repository.find_all_sorted_by_name()]

        assert names == ["Faith", "Hope", "Mercy"]

    def test_find_by_style(self, db_session: Session, label_repository: LabelRepository) -> None:
        underline = create_test_label(db_session, "Study", BookmarkStyle.UNDERLINE)
        create_test_label(db_session, "Later", BookmarkStyle.UNDERLINE)

        assert label_repository.find_by_style(BookmarkStyle.UNDERLINE) == underline
        assert label_repository.find_by_style(BookmarkStyle.RED_HIGHLIGHT) is None


class TestReservedLabel:
    def test_created_lazily_with_empty_name(
        self, db_session: Session, label_repository: LabelRepository
    ) -> None:
        assert label_repository.find_by_style(BookmarkStyle.SPEAK) is None

        speak = label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)

        assert speak.is_persisted()
        assert speak.name == ""
        assert speak.bookmark_style == BookmarkStyle.SPEAK

    def test_idempotent(self, db_session: Session, label_repository: LabelRepository) -> None:
        first = label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)
        second = label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)

        assert first.id == second.id
        assert speak_label_count(db_session) == 1

    def test_rejects_non_reserved_style(self, label_repository: LabelRepository) -> None:
        with pytest.raises(ConstraintError):
            label_repository.get_or_create_reserved(BookmarkStyle.YELLOW_STARS)

    def test_second_reserved_row_rejected_by_storage(
        self, db_session: Session, label_repository: LabelRepository
    ) -> None:
        label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)

        with pytest.raises(StorageError):
            label_repository.insert(Label.create_reserved(BookmarkStyle.SPEAK))

        assert speak_label_count(db_session) == 1

    def test_lost_race_returns_existing_row(
        self,
        db_session: Session,
        label_repository: LabelRepository,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Another writer inserts between our lookup and our insert."""
        winner = label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)
        real_find_by_style = label_repository.find_by_style
        lookups: list[BookmarkStyle] = []

        def stale_find_by_style(style: BookmarkStyle) -> Label | None:
            lookups.append(style)
            if len(lookups) == 1:
                return None
            return real_find_by_style(style)

        monkeypatch.setattr(label_repository, "find_by_style", stale_find_by_style)

        result = label_repository.get_or_create_reserved(BookmarkStyle.SPEAK)

        assert result.id == winner.id
        assert len(lookups) == 2
        assert speak_label_count(db_session) == 1

    def test_concurrent_callers_share_one_label(self, tmp_path: Path) -> None:
        engine = create_engine(
            f"sqlite:///{tmp_path / 'speak.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        Base.metadata.create_all(bind=engine)
        session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

        def get_speak_label_id(_: int) -> int:
            with session_factory() as session:
                return LabelRepository(session).get_or_create_reserved(BookmarkStyle.SPEAK).id.value

        try:
            with ThreadPoolExecutor(max_workers=8) as executor:
                ids = set(executor.map(get_speak_label_id, range(32)))

            with session_factory() as session:
                count = speak_label_count(session)
        finally:
            engine.dispose()

        assert len(ids) == 1
        assert count == 1
