"""String validator and its shape constraints.

Besides the type check, a string chain can normalize its value (`trim`,
`normalize`, `lower`, `upper`) and constrain it (`min`, `max`, `between`,
`length`, `matches`). Transforms and checks run in the order they are
chained, so `string.trim().min(3)` measures the trimmed value.
"""
import re
import unicodedata
from typing import Any, Tuple, Union

from ..core.base_validator import Step, Validator
from ..core.errors import Invalid, SchemaError


def check_string(value: Any) -> str:
    if not isinstance(value, str):
        raise Invalid("Expect value to be string")
    return value


def to_string(value: Any) -> str:
    """Coerces numbers to their string form; strings pass unchanged."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise Invalid("Expect value to be string")


class StringValidator(Validator):
    """Checks that the value is a `str`."""

    kind = "string"

    def initial_steps(self) -> Tuple[Step, ...]:
        return (check_string,)

    def trim(self) -> "StringValidator":
        return self.transform(str.strip)

    def normalize(self, form: str = "NFC") -> "StringValidator":
        """Applies Unicode normalization (NFC, NFD, NFKC or NFKD)."""
        if form not in ("NFC", "NFD", "NFKC", "NFKD"):
            raise SchemaError(f"Unknown normalization form: {form}")
        return self.transform(lambda value: unicodedata.normalize(form, value))

    def lower(self) -> "StringValidator":
        return self.transform(str.lower)

    def upper(self) -> "StringValidator":
        return self.transform(str.upper)

    def min(self, length: int) -> "StringValidator":
        return self.test(
            lambda value: len(value) >= length,
            f"Expect length to be at least {length} characters",
        )

    def max(self, length: int) -> "StringValidator":
        return self.test(
            lambda value: len(value) <= length,
            f"Expect length to be at most {length} characters",
        )

    def between(self, min_length: int, max_length: int) -> "StringValidator":
        if min_length > max_length:
            raise SchemaError(f"Invalid length range: {min_length} > {max_length}")
        return self.test(
            lambda value: min_length <= len(value) <= max_length,
            f"Expect length to be between {min_length} and {max_length} characters",
        )

    def length(self, length: int) -> "StringValidator":
        return self.test(
            lambda value: len(value) == length,
            f"Expect length to be exactly {length} characters",
        )

    def matches(self, pattern: Union[str, re.Pattern]) -> "StringValidator":
        """Requires the whole value to match `pattern`."""
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.test(
            lambda value: compiled.fullmatch(value) is not None,
            f"Expect value to match pattern /{compiled.pattern}/",
        )


string = StringValidator()
