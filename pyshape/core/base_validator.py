"""
Base validator class that every leaf kind and compiled schema builds on.
"""

import copy
import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, Type, TypeVar

from .aggregator import ValidationResult
from .errors import Invalid, MultipleInvalid, ValidationError, display_value
from .missing import MISSING
from .modes import DestructuringValidator

logger = logging.getLogger(__name__)

Step = Callable[[Any], Any]
V = TypeVar("V", bound="Validator")


def strict_equals(value: Any, expected: Any) -> bool:
    """Equality that never confuses booleans with numbers or None with falsy values."""
    if expected is None or value is None:
        return value is expected
    if isinstance(value, bool) != isinstance(expected, bool):
        return False
    if isinstance(value, (str, bytes)) or isinstance(expected, (str, bytes)):
        return type(value) is type(expected) and value == expected
    return value == expected


class Validator:
    """An immutable pipeline of steps that checks and transforms one value.

    A step is any callable taking the current value and returning the next
    one. A step signals a failure by raising `Invalid` (one failure at the
    current location) or `MultipleInvalid` (failures below it, with paths
    relative to the current location). The first failing step stops the
    pipeline.

    Every chain method returns a new validator holding the previous steps
    plus one more, so a validator can be shared by any number of schemas.

    Attributes:
        kind (str): The primitive kind checked by a bare validator, used in
            default messages (e.g. "string").
        name (str): A display name, defaults to the kind.
    """

    kind: str = "unknown"

    def __init__(self, steps: Optional[Sequence[Step]] = None, name: Optional[str] = None) -> None:
        self._steps: Tuple[Step, ...] = tuple(self.initial_steps() if steps is None else steps)
        self.name = name or self.kind
        self._optional = False
        self._message: Optional[str] = None

    def initial_steps(self) -> Tuple[Step, ...]:
        """Returns the steps a bare validator of this kind starts with."""
        return ()

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    @property
    def is_optional(self) -> bool:
        return self._optional

    def _evolve(self: V, **attrs: Any) -> V:
        clone = copy.copy(self)
        clone.__dict__.update(attrs)
        return clone

    def _become(self, cls: Type[V], step: Step) -> V:
        """Continues this chain as a validator of another kind."""
        successor = cls(steps=self._steps + (step,))
        successor._optional = self._optional
        successor._message = self._message
        return successor

    # Chain builder

    def pipe(self: V, *steps: Step) -> V:
        """Appends arbitrary steps, returning a new validator."""
        return self._evolve(_steps=self._steps + tuple(steps))

    def transform(self: V, fn: Callable[[Any], Any]) -> V:
        """Appends a step replacing the value with `fn(value)`."""
        return self.pipe(fn)

    def test(self: V, predicate: Callable[[Any], bool], message: str) -> V:
        """Appends a step that fails with `message` unless `predicate(value)` holds."""

        def check(value: Any) -> Any:
            if not predicate(value):
                raise Invalid(message)
            return value

        return self.pipe(check)

    def equals(self: V, expected: Any) -> V:
        """Appends a strict equality check against a literal."""
        return self.test(
            lambda value: strict_equals(value, expected),
            f"Expect value to equal {display_value(expected)}",
        )

    def optional(self: V) -> V:
        """Accepts MISSING and None, returning None without running any step."""
        return self._evolve(_optional=True)

    def error(self: V, message: str) -> V:
        """Replaces every failure of this validator with a single `message`."""
        return self._evolve(_message=message)

    # Invocation

    def validate(self, value: Any = MISSING) -> ValidationResult:
        """Runs the pipeline and returns the outcome without raising.

        Args:
            value (Any): The input. MISSING when omitted.

        Returns:
            ValidationResult: The final value, or every failure found.
        """
        if self._optional and (value is MISSING or value is None):
            return ValidationResult.success(None)
        if value is MISSING:
            return self._fail([ValidationError((), Invalid("Expect value to be defined"))])

        current = value
        for step in self._steps:
            try:
                current = step(current)
            except MultipleInvalid as e:
                if not e.errors:
                    return self._fail([ValidationError((), Invalid(f"Validator {self.name} failed without errors"))])
                return self._fail(e.errors)
            except Invalid as e:
                return self._fail([ValidationError((), e)])
            except Exception as e:
                logger.debug(f"Step {step!r} of {self.name} validator raised {e!r}")
                return self._fail([ValidationError((), Invalid(f"Validator {self.name} failed: {e}", cause=e))])
        return ValidationResult.success(current)

    def _fail(self, errors: List[ValidationError]) -> ValidationResult:
        if self._message is not None:
            errors = [ValidationError((), Invalid(self._message, cause=errors[0].error))]
        return ValidationResult.failure(errors)

    def __call__(self, value: Any = MISSING) -> Any:
        """Validates `value` and returns the result.

        Raises:
            MultipleInvalid: If any check fails.
        """
        return self.validate(value).unwrap()

    def destruct(self) -> DestructuringValidator:
        """Returns a callable giving `(error, value)` instead of raising."""
        return DestructuringValidator(self)

    def __repr__(self) -> str:
        flags = " optional" if self._optional else ""
        return f"<{type(self).__name__} {self.name} steps={len(self._steps)}{flags}>"
