class DocumentManagerError(Exception):
    """Base error for the document manager."""


class InvalidArgumentError(DocumentManagerError, ValueError):
    """Raised when a caller passes a missing document or id."""


class IdGenerationError(DocumentManagerError):
    """Raised when a bounded id generation runs out of attempts."""
