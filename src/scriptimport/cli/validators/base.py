"""Validation primitives for command line arguments."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ValidationError(Exception):
    """A command line value was rejected.

    ``field`` names the offending option when there is one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class Validator(ABC, Generic[T]):
    """Checks one raw argument and returns it in its usable form."""

    @abstractmethod
    def validate(self, value: Any) -> T:
        """Return the checked value or raise ValidationError."""
