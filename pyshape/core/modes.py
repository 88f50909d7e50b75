"""The error-as-value calling convention.

A compiled validator raises `MultipleInvalid` when called directly. Wrapping it
with `destruct()` gives a callable that returns `(error, value)` instead:

    error, user = Schema(UserSchema).destruct()(payload)
    if error:
        for item in error.errors:
            print(item.path, item.error.message)
"""
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from .errors import MultipleInvalid
from .missing import MISSING

if TYPE_CHECKING:
    from .base_validator import Validator


class Destructured(NamedTuple):
    """Outcome of a destructuring call.

    `error` is None exactly when validation succeeded; `value` is only
    meaningful in that case.
    """

    error: Optional[MultipleInvalid]
    value: Any


class DestructuringValidator:
    """Calls a validator and returns failures instead of raising them."""

    def __init__(self, validator: "Validator") -> None:
        self.validator = validator

    def __call__(self, value: Any = MISSING) -> Destructured:
        result = self.validator.validate(value)
        if result.ok:
            return Destructured(None, result.value)
        return Destructured(MultipleInvalid(result.errors), None)

    def __repr__(self) -> str:
        return f"DestructuringValidator({self.validator!r})"
