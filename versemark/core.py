import threading
from typing import TypeVar

from dependency_injector import containers, providers
from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from versemark.application.annotations.services.bookmark_query_service import (
    BookmarkQueryService,
)
from versemark.config import Settings, configure_logging, get_settings
from versemark.database import create_schema, dispose_engine, initialize_database
from versemark.infrastructure.annotations.repositories import (
    BookmarkLabelRepository,
    BookmarkRepository,
    LabelRepository,
)
from versemark.infrastructure.versification import OrdinalConverter

T = TypeVar("T")

# container.db is process-global; overrides must not interleave
_resolve_lock = threading.Lock()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Versification tables are immutable, one converter serves every session
    ordinal_converter = providers.Singleton(OrdinalConverter)

    # Repositories
    bookmark_repository = providers.Factory(BookmarkRepository, db=db)
    label_repository = providers.Factory(LabelRepository, db=db)
    bookmark_label_repository = providers.Factory(BookmarkLabelRepository, db=db)

    # Application services
    bookmark_query_service = providers.Factory(
        BookmarkQueryService,
        bookmark_repository=bookmark_repository,
        label_repository=label_repository,
        bookmark_label_repository=bookmark_label_repository,
        ordinal_converter=ordinal_converter,
        default_scheme=settings.provided.DEFAULT_VERSIFICATION,
    )


# Initialize container
container = Container()


def resolve(provider: Provider[T], db: Session) -> T:
    """
    Build an object from a container provider against a session.

    Safe to call from several threads; each call is wired to its own session.

    Example:
        with session_scope() as db:
            service = resolve(container.bookmark_query_service, db)
    """
    with _resolve_lock:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()


def startup(settings: Settings | None = None, create_tables: bool = False) -> None:
    """
    Configure logging and the database engine once per process.

    Args:
        settings: Settings to use instead of the environment's
        create_tables: Create missing tables directly instead of through Alembic
            (development and tests)
    """
    settings = settings or container.settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    if create_tables:
        create_schema()


def shutdown() -> None:
    dispose_engine()
