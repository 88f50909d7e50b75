"""Object validator: a fixed set of named fields.

Every declared field is checked, whatever happened to the fields before it,
and each failure is reported under the field name. Absent keys are passed to
the field validator as MISSING, so only fields marked `optional()` may be
left out. The output is a new dict holding exactly the declared fields.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Dict, Hashable, Optional, Tuple

from ..core.aggregator import ErrorCollector
from ..core.base_validator import Step, Validator
from ..core.errors import Invalid, SchemaError
from ..core.missing import MISSING

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ShapeCheck:
    """The structural step of an object validator."""

    fields: Optional[Mapping[Hashable, Validator]] = None
    strict: bool = False

    def __call__(self, value: Any) -> Dict[Hashable, Any]:
        if not isinstance(value, Mapping):
            raise Invalid("Expect value to be object")
        if self.fields is None:
            return dict(value)

        collector = ErrorCollector()
        output: Dict[Hashable, Any] = {}
        for key, validator in self.fields.items():
            output[key] = collector.collect(key, validator.validate(value.get(key, MISSING)))
        if self.strict:
            for key in value:
                if key not in self.fields:
                    collector.add(Invalid("Unexpected field"), key)
        collector.raise_if_any()
        return output


class ObjectValidator(Validator):
    """Checks that the value is a mapping and, once `of()` is given, its fields."""

    kind = "object"

    def initial_steps(self) -> Tuple[Step, ...]:
        return (ShapeCheck(),)

    @property
    def fields(self) -> Mapping[Hashable, Validator]:
        """The compiled field validators, empty until `of()` is applied."""
        check = self._shape_check()
        if check is None or check.fields is None:
            return MappingProxyType({})
        return check.fields

    def _shape_check(self) -> Optional[ShapeCheck]:
        for step in self._steps:
            if isinstance(step, ShapeCheck):
                return step
        return None

    def _with_check(self, **changes: Any) -> "ObjectValidator":
        if self._shape_check() is None:
            raise SchemaError(f"{self.name} validator has no shape check to constrain")
        steps = tuple(replace(step, **changes) if isinstance(step, ShapeCheck) else step for step in self._steps)
        return self._evolve(_steps=steps)

    def of(self, shape: Mapping[Hashable, Any]) -> "ObjectValidator":
        """Compiles every field description of `shape`, once."""
        from ..core.schema import compile_schema

        fields = {key: compile_schema(description) for key, description in shape.items()}
        logger.debug(f"Compiled object shape with fields: {', '.join(map(str, fields))}")
        return self._with_check(fields=MappingProxyType(fields))

    def strict(self) -> "ObjectValidator":
        """Also reports keys that the shape does not declare."""
        return self._with_check(strict=True)


obj = ObjectValidator()
