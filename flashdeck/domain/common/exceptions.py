"""
Domain layer exceptions.

These exceptions are raised when a domain invariant is broken. The
infrastructure layer translates them into 400 responses.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when a field of an entity fails validation.

    Example: a blank flashcard question.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field
