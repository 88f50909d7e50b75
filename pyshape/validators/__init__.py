"""The leaf validators that schema descriptions are built from.

Each module defines one validator kind together with its chain vocabulary
and a ready-made bare instance (`string`, `number`, ...). Every chain method
is built on `Validator.pipe`, so new steps can be added without touching the
compiler.
"""
from .array import ArrayValidator, array
from .boolean import BooleanValidator, boolean
from .literal import enum_of, literal, pattern
from .number import NumberValidator, number
from .obj import ObjectValidator, obj
from .string import StringValidator, string
from .unknown import UnknownValidator, unknown

__all__ = [
    "ArrayValidator",
    "BooleanValidator",
    "NumberValidator",
    "ObjectValidator",
    "StringValidator",
    "UnknownValidator",
    "array",
    "boolean",
    "enum_of",
    "literal",
    "number",
    "obj",
    "pattern",
    "string",
    "unknown",
]
