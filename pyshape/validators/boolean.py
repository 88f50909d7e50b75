"""Boolean validator."""
from typing import Any, Tuple

from ..core.base_validator import Step, Validator
from ..core.errors import Invalid

TRUE_STRINGS = ("true", "1", "yes", "on")
FALSE_STRINGS = ("false", "0", "no", "off")


def check_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise Invalid("Expect value to be boolean")
    return value


def to_boolean(value: Any) -> bool:
    """Coerces common textual and 0/1 spellings of a boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    elif isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise Invalid("Expect value to be boolean")


class BooleanValidator(Validator):
    kind = "boolean"

    def initial_steps(self) -> Tuple[Step, ...]:
        return (check_boolean,)


boolean = BooleanValidator()
