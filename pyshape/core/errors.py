"""Error types shared by every part of the validation engine.

A failed check is always represented the same way: a `ValidationError`
record holding the location of the failing value (`path`) and an `Invalid`
exception describing what went wrong. Records found during one validation
pass are raised together as a single `MultipleInvalid`.
"""
import json
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List, Optional, Tuple

Path = Tuple[Hashable, ...]


class PyshapeError(Exception):
    """Base class for all errors raised by pyshape."""


class SchemaError(PyshapeError):
    """Raised at definition time when a schema description is unusable."""


class Invalid(PyshapeError):
    """A single failed check.

    Steps raise this to signal a failure at the location of the value they
    receive. The enclosing validator turns it into a `ValidationError`.

    Attributes:
        message (str): Human-readable explanation of the failure.
        cause (Optional[BaseException]): The exception that triggered the
            failure, if the failure wraps one.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Invalid):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __repr__(self) -> str:
        return f"Invalid({self.message!r})"


@dataclass(frozen=True)
class ValidationError:
    """One failed check at one location.

    Attributes:
        path (Path): Field names and list indices leading from the schema
            root to the failing value. Empty for the root itself.
        error (Invalid): The failure itself.
    """

    path: Path
    error: Invalid

    @property
    def message(self) -> str:
        return self.error.message

    def prefixed(self, *segments: Hashable) -> "ValidationError":
        """Returns a copy located below the given path segments."""
        return ValidationError(tuple(segments) + self.path, self.error)

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{format_path(self.path)}: {self.message}"


class MultipleInvalid(PyshapeError):
    """Every failure found while validating one input.

    This is what a compiled validator raises in throwing mode, and what it
    returns in the error slot in destructuring mode.

    Attributes:
        errors (List[ValidationError]): Failures in discovery order.
    """

    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self.errors: List[ValidationError] = list(errors)
        super().__init__(self._summary())

    def _summary(self) -> str:
        if not self.errors:
            return "Validation failed"
        first = str(self.errors[0])
        if len(self.errors) == 1:
            return first
        return f"{first} (and {len(self.errors) - 1} more error(s))"

    def __iter__(self):
        return iter(self.errors)


def format_path(path: Path) -> str:
    """Renders a path as `items[0].amount`.

    Args:
        path (Path): The path segments.

    Returns:
        str: Dotted field names with bracketed integer indices.
    """
    rendered = ""
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered


def display_value(value: Any) -> str:
    """Formats a literal for use inside an error message.

    Strings, numbers, booleans and None are rendered the JSON way, so the
    literal "suspended" becomes `"suspended"` and True becomes `true`.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)
