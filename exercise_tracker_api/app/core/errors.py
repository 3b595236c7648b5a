"""
Domain errors raised by the service layer.

Route handlers translate these into HTTP responses: ``ValidationError``
becomes 400, ``NotFoundError`` 404 and ``StoreError`` 500.
"""


class ExerciseTrackerError(Exception):
    """Base class for all application errors."""


class ValidationError(ExerciseTrackerError):
    """A required field is missing or cannot be parsed."""


class InvalidIdError(ValidationError):
    """An identifier is not a well-formed opaque id."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid id: {value!r}")


class NotFoundError(ExerciseTrackerError):
    """The referenced record does not exist."""


class StoreError(ExerciseTrackerError):
    """The underlying database call failed."""
