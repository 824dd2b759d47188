"""Shared plumbing for SQLAlchemy repositories."""

from typing import Any

from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import Executable

from versemark.exceptions import StorageError

from .unit_of_work import SQLAlchemyUnitOfWork


class SQLAlchemyRepository:
    """Base class giving repositories a session, error translation and transactions."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _execute(self, stmt: Executable) -> Result[Any]:
        """Run a statement, surfacing engine failures as StorageError."""
        try:
            return self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError.wrap(e) from e

    def _unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self.db)
