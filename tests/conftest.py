"""Pytest configuration and fixtures."""

from collections.abc import Generator
from dataclasses import replace
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from versemark import models  # noqa: F401
from versemark.application.annotations.services.bookmark_query_service import (
    BookmarkQueryService,
)
from versemark.database import Base
from versemark.domain.annotations.bookmark_style import BookmarkStyle
from versemark.domain.annotations.entities.bookmark import Bookmark
from versemark.domain.annotations.entities.label import Label
from versemark.domain.common.value_objects import OrdinalRange
from versemark.infrastructure.annotations.repositories import (
    BookmarkLabelRepository,
    BookmarkRepository,
    LabelRepository,
)
from versemark.infrastructure.versification import OrdinalConverter

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def bookmark_repository(db_session: Session) -> BookmarkRepository:
    return BookmarkRepository(db_session)


@pytest.fixture
def label_repository(db_session: Session) -> LabelRepository:
    return LabelRepository(db_session)


@pytest.fixture
def bookmark_label_repository(db_session: Session) -> BookmarkLabelRepository:
    return BookmarkLabelRepository(db_session)


@pytest.fixture
def ordinal_converter() -> OrdinalConverter:
    return OrdinalConverter()


@pytest.fixture
def query_service(
    bookmark_repository: BookmarkRepository,
    label_repository: LabelRepository,
    bookmark_label_repository: BookmarkLabelRepository,
    ordinal_converter: OrdinalConverter,
) -> BookmarkQueryService:
    return BookmarkQueryService(
        bookmark_repository=bookmark_repository,
        label_repository=label_repository,
        bookmark_label_repository=bookmark_label_repository,
        ordinal_converter=ordinal_converter,
    )


def create_test_bookmark(
    db_session: Session,
    start: int,
    end: int,
    versification: str = "KJV",
    notes: str | None = None,
    created_at: datetime | None = None,
) -> Bookmark:
    """Insert a bookmark over canonical ordinals [start, end] and return it with its id."""
    bookmark = Bookmark.create(
        ordinal_range=OrdinalRange(start=start, end=end),
        versification=versification,
        notes=notes,
    )
    if created_at is not None:
        bookmark = replace(bookmark, created_at=created_at)
    return bookmark.with_id(BookmarkRepository(db_session).insert(bookmark))


def create_test_label(
    db_session: Session,
    name: str = "Promises",
    bookmark_style: BookmarkStyle = BookmarkStyle.YELLOW_STARS,
) -> Label:
    """Insert a user label and return it with its id."""
    label = Label.create(name=name, bookmark_style=bookmark_style)
    return label.with_id(LabelRepository(db_session).insert(label))
