"""Errors raised at the diagram load/save boundary."""


class DiagramError(Exception):
    """Base class for all diagram errors."""

    pass


class DeserializationError(DiagramError):
    """Raised when diagram JSON is malformed or does not match the schema."""

    pass


class StructureTooComplexError(DeserializationError):
    """Raised when diagram JSON is nested too deeply to parse."""

    pass


class DiagramLimitError(DiagramError):
    """Raised when a parsed diagram exceeds a sanity limit."""

    def __init__(self, message: str, count: int, limit: int):
        super().__init__(message)
        self.count = count
        self.limit = limit


class EntityLimitError(DiagramLimitError):
    """Raised when a diagram has more entities than MAX_ENTITIES."""

    pass


class RelationLimitError(DiagramLimitError):
    """Raised when a diagram has more relations than MAX_RELATIONS."""

    pass


class DiagramFileError(DiagramError, ValueError):
    """Raised when a file is rejected, unreadable or cannot be written."""

    pass
