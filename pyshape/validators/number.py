"""Number validator, range constraints and decimal formatting."""
import math
from numbers import Real
from typing import Any, Tuple, Union

from ..core.base_validator import Step, Validator
from ..core.errors import Invalid, SchemaError

Number = Union[int, float]


def check_number(value: Any) -> Number:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise Invalid("Expect value to be number")
    if isinstance(value, float) and not math.isfinite(value):
        raise Invalid("Expect value to be number")
    return value


def to_number(value: Any) -> Number:
    """Parses numeric strings; numbers pass unchanged.

    Integral text becomes an int, other decimal text becomes a float.
    Digit separators (`1_000`), booleans and non-finite results are rejected.
    """
    if isinstance(value, str):
        text = value.strip()
        if "_" in text:
            raise Invalid("Expect value to be number")
        try:
            value = int(text)
        except ValueError:
            try:
                value = float(text)
            except ValueError:
                raise Invalid("Expect value to be number") from None
    return check_number(value)


class NumberValidator(Validator):
    """Checks that the value is a finite real number other than a bool."""

    kind = "number"

    def initial_steps(self) -> Tuple[Step, ...]:
        return (check_number,)

    def gt(self, bound: Number) -> "NumberValidator":
        return self.test(lambda value: value > bound, f"Expect value to be greater than {bound}")

    def gte(self, bound: Number) -> "NumberValidator":
        return self.test(lambda value: value >= bound, f"Expect value to be greater than or equal to {bound}")

    def lt(self, bound: Number) -> "NumberValidator":
        return self.test(lambda value: value < bound, f"Expect value to be less than {bound}")

    def lte(self, bound: Number) -> "NumberValidator":
        return self.test(lambda value: value <= bound, f"Expect value to be less than or equal to {bound}")

    def between(self, low: Number, high: Number) -> "NumberValidator":
        """Inclusive range check."""
        if low > high:
            raise SchemaError(f"Invalid range: {low} > {high}")
        return self.test(lambda value: low <= value <= high, f"Expect value to be between {low} and {high}")

    def integer(self) -> "NumberValidator":
        return self.test(
            lambda value: isinstance(value, int) or float(value).is_integer(),
            "Expect value to be integer",
        )

    def to_fixed(self, digits: int = 0) -> "NumberValidator":
        """Renders the number as a string with `digits` decimals.

        The result is a `str`, so this belongs at the end of a chain.
        """
        if digits < 0:
            raise SchemaError(f"Invalid number of digits: {digits}")
        return self.transform(lambda value: f"{value:.{digits}f}")


number = NumberValidator()
