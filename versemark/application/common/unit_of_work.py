"""
Unit of Work interface.

The Unit of Work pattern groups the writes of one operation so they are
committed together or not at all.

Example:
    def delete(self, bookmark: Bookmark) -> None:
        with self._unit_of_work() as uow:
            self.associations.delete_for_bookmark(bookmark.id)
            self.db.delete(orm_model)
            uow.commit()
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    The Unit of Work:
    - Manages database transactions
    - Ensures atomicity of operations
    - Can be used as a context manager

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        This persists all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
