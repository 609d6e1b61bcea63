
class DomainError(Exception):
    """Base exception for all domain errors.
    This is the root exception for all domain layer errors. Services raise it
    (or a subclass) and the API layer converts it to an ``{"error": ...}`` response.
    """
    def __init__(self, message: str | None = None):
        """Initialize domain error with message.
        Args:
            message: Error message describing what went wrong.
        """
        super().__init__(message or "Domain error")


class NotFoundError(DomainError):
    """Exception raised when a requested entity is not found in the store."""
    pass


class ValidationError(DomainError):
    """Exception raised when request data fails validation rules."""
    pass
