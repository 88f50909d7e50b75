"""pyshape: composable schema validation.

Validators for strings, numbers, booleans, literals, patterns, enumerations,
object shapes and arrays combine into one callable that either returns the
normalized value or reports every problem found, each with its exact path:

    UserSchema = {
        "name": string.trim().normalize().between(3, 40).optional(),
        "username": re.compile(r"^[a-z0-9]{3,10}$"),
        "status": Schema.either("active", "suspended"),
        "items": array.of({"id": string, "amount": number.gte(1).integer()}).min(1),
    }
    error, user = Schema(UserSchema).destruct()(payload)
"""

from .core.aggregator import ErrorCollector, ValidationResult
from .core.base_validator import Validator
from .core.errors import (
    Invalid,
    MultipleInvalid,
    PyshapeError,
    SchemaError,
    ValidationError,
    format_path,
)
from .core.missing import MISSING
from .core.modes import Destructured, DestructuringValidator
from .core.schema import Schema, compile_schema, either, merge
from .validators import (
    array,
    boolean,
    enum_of,
    literal,
    number,
    obj,
    pattern,
    string,
    unknown,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "MISSING",
    "Destructured",
    "DestructuringValidator",
    "ErrorCollector",
    "Invalid",
    "MultipleInvalid",
    "PyshapeError",
    "Schema",
    "SchemaError",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "__version__",
    "array",
    "boolean",
    "compile_schema",
    "either",
    "enum_of",
    "format_path",
    "literal",
    "merge",
    "number",
    "obj",
    "pattern",
    "string",
    "unknown",
]
