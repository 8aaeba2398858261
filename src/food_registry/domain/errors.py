"""Errors raised by the food registry."""


class FoodRegistryError(Exception):
    """Base error for registry operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FoodRegistryError):
    """Caller input is missing or malformed."""


class NotFoundError(FoodRegistryError):
    """The referenced item is not among the active records."""


class DuplicateIdError(FoodRegistryError):
    """A freshly generated id collided with a stored item."""
