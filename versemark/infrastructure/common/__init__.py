from .repository import SQLAlchemyRepository
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = ["SQLAlchemyRepository", "SQLAlchemyUnitOfWork"]
