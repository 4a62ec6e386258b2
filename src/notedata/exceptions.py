class NoteDataError(Exception):
    """Base class for exceptions in this module."""


class MissingRequiredField(NoteDataError, TypeError):
    """Raised when a required field is given None."""

    def __init__(self, field: str):
        super().__init__(f"{field} is required and cannot be None")
        self.field = field


class InvalidIdentifier(NoteDataError, ValueError):
    """Raised when an id is not in UUID format."""

    def __init__(self, value: object, message: str):
        super().__init__(message)
        self.value = value
