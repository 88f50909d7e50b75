"""The validator for values of unknown type.

`unknown` accepts any present value. Its conversion methods continue the
chain as a typed validator, so the full vocabulary of that kind becomes
available after the conversion step:

    unknown.number().gt(0).to_fixed(2)("123.4567")  # "123.46"
"""
from ..core.base_validator import Validator
from .boolean import BooleanValidator, to_boolean
from .number import NumberValidator, to_number
from .string import StringValidator, to_string


class UnknownValidator(Validator):
    """Accepts anything except an absent value."""

    kind = "unknown"

    def number(self) -> NumberValidator:
        """Converts numeric strings to numbers, then behaves like `number`."""
        return self._become(NumberValidator, to_number)

    def string(self) -> StringValidator:
        """Converts numbers to strings, then behaves like `string`."""
        return self._become(StringValidator, to_string)

    def boolean(self) -> BooleanValidator:
        """Converts "true"/"false", "yes"/"no", "on"/"off" and 1/0 to booleans."""
        return self._become(BooleanValidator, to_boolean)


unknown = UnknownValidator()
