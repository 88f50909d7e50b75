"""Compiles schema descriptions into validators.

A schema description is one of:

1.  A `Validator`, used as is.
2.  A compiled regular expression, which the whole string must match.
3.  A literal scalar (str, bytes, int, float, bool or None), which the value
    must strictly equal.
4.  A mapping of field names to descriptions, describing an object.
5.  An array descriptor: `array.of(description)`, or the shorthand
    one-element list `[description]`.

Compilation recurses through mappings and lists, so the whole description is
turned into validators once, when the schema is defined.
"""
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import singledispatch
from typing import Any, Dict, Hashable, List, Tuple, Type

from .base_validator import Validator
from .errors import MultipleInvalid, SchemaError
from ..validators.array import array
from ..validators.literal import enum_of, literal, pattern
from ..validators.obj import ObjectValidator, obj

logger = logging.getLogger(__name__)


@singledispatch
def compile_schema(description: Any) -> Validator:
    """Turns a schema description into a single validator.

    Args:
        description (Any): The description to compile.

    Returns:
        Validator: A validator implementing the description.

    Raises:
        SchemaError: If the description is not one of the supported shapes.
    """
    raise SchemaError(f"Unsupported schema description: {description!r} ({type(description).__name__})")


@compile_schema.register(Validator)
def _compile_validator(description: Validator) -> Validator:
    return description


@compile_schema.register(re.Pattern)
def _compile_pattern(description: re.Pattern) -> Validator:
    return pattern(description)


@compile_schema.register(str)
@compile_schema.register(bytes)
@compile_schema.register(bool)
@compile_schema.register(int)
@compile_schema.register(float)
@compile_schema.register(type(None))
def _compile_literal(description: Any) -> Validator:
    return literal(description)


@compile_schema.register(Mapping)
def _compile_shape(description: Mapping) -> Validator:
    return obj.of(description)


@compile_schema.register(list)
def _compile_array(description: List[Any]) -> Validator:
    if len(description) != 1:
        raise SchemaError(
            f"A list description must hold exactly one element description, got {len(description)}"
        )
    return array.of(description[0])


@dataclass(frozen=True, eq=False)
class EitherCheck:
    """Accepts the value of the first alternative that validates it.

    When every alternative fails, the failure of the last one tried is
    reported, so an enumeration of literals yields a single equality error
    naming its last candidate.
    """

    alternatives: Tuple[Validator, ...]

    def __call__(self, value: Any) -> Any:
        errors = []
        for alternative in self.alternatives:
            result = alternative.validate(value)
            if result.ok:
                return result.value
            errors = result.errors
        raise MultipleInvalid(errors)


def either(*candidates: Any) -> Validator:
    """Builds an enumeration: the value must satisfy one of `candidates`.

    Candidates are usually literals, but any description is accepted.

    Raises:
        SchemaError: If no candidate is given.
    """
    if not candidates:
        raise SchemaError("either() needs at least one candidate")
    alternatives = tuple(compile_schema(candidate) for candidate in candidates)
    logger.debug(f"Compiled enumeration of {len(alternatives)} candidate(s)")
    return Validator(steps=(EitherCheck(alternatives),), name="either")


def merge(*shapes: Any) -> ObjectValidator:
    """Combines object descriptions into one; later fields override earlier ones.

    Args:
        *shapes: Mappings or object validators built with `obj.of()`.

    Raises:
        SchemaError: If a shape is neither a mapping nor an object validator.
    """
    fields: Dict[Hashable, Any] = {}
    for shape in shapes:
        if isinstance(shape, ObjectValidator):
            fields.update(shape.fields)
        elif isinstance(shape, Mapping):
            fields.update(shape)
        else:
            raise SchemaError(f"Cannot merge {shape!r}: expected a mapping or an object validator")
    return obj.of(fields)


class Schema:
    """Entry point for compiling descriptions.

    `Schema(description)` returns the compiled validator, not a Schema
    instance:

        validator = Schema({"username": re.compile(r"[a-z0-9]{3,10}")})
        validator({"username": "john1"})
    """

    def __new__(cls, description: Any) -> Validator:  # type: ignore[misc]
        return compile_schema(description)

    @staticmethod
    def either(*candidates: Any) -> Validator:
        return either(*candidates)

    @staticmethod
    def merge(*shapes: Any) -> ObjectValidator:
        return merge(*shapes)

    @staticmethod
    def enum(enum_cls: Type[Enum]) -> Validator:
        return enum_of(enum_cls)
