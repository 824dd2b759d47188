"""SQLAlchemy implementation of the Unit of Work."""

from types import TracebackType

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from versemark.application.common.unit_of_work import UnitOfWork
from versemark.exceptions import StorageError

logger = structlog.get_logger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Transaction scope over a Session.

    Engine errors raised inside the scope, or by commit, are rolled back and
    re-raised as StorageError with the engine exception as the cause. Domain
    errors are rolled back and propagate unchanged.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("transaction_commit_failed", error=str(e))
            raise StorageError.wrap(e) from e

    def rollback(self) -> None:
        self.db.rollback()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is None:
            return
        self.rollback()
        logger.warning("transaction_rolled_back", error_type=exc_type.__name__)
        if isinstance(exc_val, SQLAlchemyError):
            raise StorageError.wrap(exc_val) from exc_val
