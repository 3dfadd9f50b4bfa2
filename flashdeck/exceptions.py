"""Custom exception hierarchy for the Flashdeck application."""


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class BadRequestError(FlashdeckError):
    """Invalid request error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ConflictError(FlashdeckError):
    """Resource conflicts with existing state."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, status_code=409)


class CategoryNotFoundError(NotFoundError):
    """Category not found error."""

    def __init__(self, category_id: str | None = None, *, name: str | None = None) -> None:
        """Initialize with category ID or name."""
        self.category_id = category_id
        self.name = name
        if name is not None:
            super().__init__(f"Category with name '{name}' not found")
        else:
            super().__init__(f"Category with id '{category_id}' not found")


class CategoryNameConflictError(ConflictError):
    """A category with the same name already exists."""

    def __init__(self, name: str) -> None:
        """Initialize with the duplicated name."""
        self.name = name
        super().__init__(f"Category with name '{name}' already exists")


class StudySessionNotFoundError(NotFoundError):
    """Study session not found error."""

    def __init__(self, session_id: str | None = None, *, name: str | None = None) -> None:
        """Initialize with study session ID or name."""
        self.session_id = session_id
        self.name = name
        if name is not None:
            super().__init__(f"Study session with name '{name}' not found")
        else:
            super().__init__(f"Study session with ID '{session_id}' not found")


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: str) -> None:
        """Initialize with flashcard ID."""
        self.flashcard_id = flashcard_id
        super().__init__(f"Flashcard with ID '{flashcard_id}' not found")
