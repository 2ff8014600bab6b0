from __future__ import annotations

from typing import Any, Optional


class DurationError(ValueError):
    """Base exception for everything the duration codec rejects."""


class DecodeError(DurationError):
    """Raised when text cannot be decoded into a duration.

    Keeps the rejected text and, when the failure is tied to a single
    character, its zero-based position.
    """

    def __init__(self, message: str, *, text: str = "", position: Optional[int] = None) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


class EmptyInputError(DecodeError):
    """Raised for an empty string."""


class TooShortError(DecodeError):
    """Raised when the text is too short to hold a prefix, a number and a unit."""


class MissingPrefixError(DecodeError):
    """Raised when the text does not start with 'P'."""


class UnexpectedUnitError(DecodeError):
    """Raised when a character is not the next unit the grammar allows."""


class MalformedFractionError(DecodeError):
    """Raised when a decimal point is not followed by a digit."""


class TrailingGarbageError(DecodeError):
    """Raised when characters remain after the last possible unit."""


class UnitlessPayloadError(DecodeError):
    """Raised when a number is not followed by any unit letter."""


class MissingMagnitudeError(DecodeError):
    """Raised when a unit letter has no number in front of it."""


class MagnitudeOverflowError(DecodeError):
    """Raised when a number is too large to be represented as a float."""


class WrongTypeError(DurationError, TypeError):
    """Raised when encode receives something that is not a Duration."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid duration - value:{value!r} type:{type(value).__name__}")
        self.value = value

    def __reduce__(self) -> Any:
        return (type(self), (self.value,))
