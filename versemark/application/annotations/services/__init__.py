"""Application services for the annotations domain."""

from .bookmark_query_service import BookmarkQueryService

__all__ = ["BookmarkQueryService"]
