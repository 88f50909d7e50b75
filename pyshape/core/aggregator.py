"""Collects path-qualified failures found while validating nested values.

Every object or array check owns one `ErrorCollector` for the duration of a
single call. Child results are merged into it with their paths prefixed by the
field name or index under which the child was checked, so sibling checks never
see each other's errors and nothing survives the call.
"""
from typing import Any, Hashable, Iterable, List, Optional

from .errors import Invalid, MultipleInvalid, ValidationError


class ValidationResult:
    """The outcome of validating one value.

    Exactly one of `value` and `errors` is meaningful: a successful result
    has no errors, a failed one has at least one.

    Attributes:
        value (Any): The validated, possibly transformed, value. None on
            failure.
        errors (List[ValidationError]): Failures in discovery order.
    """

    __slots__ = ("value", "errors")

    def __init__(self, value: Any = None, errors: Optional[Iterable[ValidationError]] = None) -> None:
        self.errors: List[ValidationError] = list(errors or ())
        self.value = None if self.errors else value

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, errors: Iterable[ValidationError]) -> "ValidationResult":
        result = cls(errors=errors)
        if not result.errors:
            raise ValueError("A failed result needs at least one error")
        return result

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> Any:
        """Returns the value, or raises every collected error at once.

        Raises:
            MultipleInvalid: If the result is a failure.
        """
        if self.errors:
            raise MultipleInvalid(self.errors)
        return self.value

    def __repr__(self) -> str:
        if self.ok:
            return f"ValidationResult(value={self.value!r})"
        return f"ValidationResult(errors={self.errors!r})"


class ErrorCollector:
    """An ordered, growable list of failures for one validation pass."""

    def __init__(self) -> None:
        self.errors: List[ValidationError] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def add(self, error: Invalid, *path: Hashable) -> None:
        """Records a failure located at `path` relative to the collector."""
        self.errors.append(ValidationError(tuple(path), error))

    def collect(self, segment: Hashable, result: ValidationResult) -> Any:
        """Merges a child result checked under `segment`.

        Args:
            segment (Hashable): The field name or index of the child.
            result (ValidationResult): The child's outcome.

        Returns:
            Any: The child's value, or None if the child failed.
        """
        if result.ok:
            return result.value
        self.errors.extend(error.prefixed(segment) for error in result.errors)
        return None

    def raise_if_any(self) -> None:
        """Raises the collected failures as one `MultipleInvalid`, if any."""
        if self.errors:
            raise MultipleInvalid(self.errors)
