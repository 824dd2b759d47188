"""Exception hierarchy for versemark."""


class VersemarkError(Exception):
    """Base exception for all versemark errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        """Initialize exception with message and optional structured details."""
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class NotFoundError(VersemarkError):
    """Entity not found error."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        """Initialize with the entity type and the missing id."""
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class BookmarkNotFoundError(NotFoundError):
    """Bookmark not found error."""

    def __init__(self, bookmark_id: int) -> None:
        super().__init__("Bookmark", bookmark_id)


class LabelNotFoundError(NotFoundError):
    """Label not found error."""

    def __init__(self, label_id: int) -> None:
        super().__init__("Label", label_id)


class ConstraintError(VersemarkError):
    """
    Raised when a data constraint would be violated.

    Example: a range whose start comes after its end, an association
    referencing a bookmark that does not exist.
    """


class UnsupportedSchemeError(VersemarkError):
    """Versification scheme is not registered with the converter."""

    def __init__(self, scheme: str, supported: list[str] | None = None) -> None:
        """Initialize with the unknown scheme name and the known ones."""
        self.scheme = scheme
        self.supported = supported or []
        super().__init__(
            f"Unsupported versification scheme '{scheme}'",
            {"supported": self.supported} if self.supported else None,
        )


class StorageError(VersemarkError):
    """Failure reported by the underlying storage engine."""

    def __init__(self, message: str, original: BaseException | None = None) -> None:
        """Initialize with message and the engine exception that caused it."""
        self.original = original
        super().__init__(message)

    @classmethod
    def wrap(cls, exc: BaseException) -> "StorageError":
        """Build a StorageError around an engine exception."""
        return cls(f"Storage operation failed: {exc}", original=exc)
