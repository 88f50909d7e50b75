"""Validators for exact values: literals, patterns and enum members."""
import re
from enum import Enum
from typing import Any, Type, Union

from ..core.base_validator import Validator, strict_equals
from ..core.errors import Invalid, SchemaError, display_value
from .string import StringValidator
from .unknown import UnknownValidator


def literal(value: Any) -> Validator:
    """Accepts only values strictly equal to `value`."""
    return UnknownValidator(name="literal").equals(value)


def pattern(regex: Union[str, re.Pattern]) -> StringValidator:
    """Accepts only strings fully matching `regex`."""
    return StringValidator(name="pattern").matches(regex)


def enum_of(enum_cls: Type[Enum]) -> Validator:
    """Accepts members of `enum_cls` or their values, returning the member.

    Args:
        enum_cls (Type[Enum]): The enumeration to accept.

    Raises:
        SchemaError: If `enum_cls` is not an Enum subclass or has no members.
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise SchemaError(f"Expected an Enum subclass, got {enum_cls!r}")
    members = list(enum_cls)
    if not members:
        raise SchemaError(f"Enum {enum_cls.__name__} has no members")
    message = "Expect value to be one of " + ", ".join(display_value(member.value) for member in members)

    def to_member(value: Any) -> Enum:
        if isinstance(value, enum_cls):
            return value
        for member in members:
            if strict_equals(value, member.value):
                return member
        raise Invalid(message)

    return Validator(steps=(to_member,), name=enum_cls.__name__)
