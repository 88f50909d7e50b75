"""Array validator: element schema and cardinality.

`array.of(description)` compiles the element description once. Validation
rejects anything that is not a list or tuple, reports a violated cardinality
constraint at the array's own location, and then checks every element,
reporting each failure under its index. The output is always a new list.
"""
from dataclasses import dataclass, replace
from typing import Any, List, Optional, Tuple

from ..core.aggregator import ErrorCollector
from ..core.base_validator import Step, Validator
from ..core.errors import Invalid, SchemaError


@dataclass(frozen=True, eq=False)
class ArrayCheck:
    """The structural step of an array validator."""

    element: Optional[Validator] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None

    def __call__(self, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            raise Invalid("Expect value to be array")

        collector = ErrorCollector()
        if self.min_items is not None and len(value) < self.min_items:
            collector.add(Invalid(f"Expect array length to be at least {self.min_items}"))
        if self.max_items is not None and len(value) > self.max_items:
            collector.add(Invalid(f"Expect array length to be at most {self.max_items}"))

        if self.element is None:
            items = list(value)
        else:
            items = [collector.collect(index, self.element.validate(item)) for index, item in enumerate(value)]
        collector.raise_if_any()
        return items


class ArrayValidator(Validator):
    """Checks that the value is a list (or tuple) and, once `of()` is given, its elements."""

    kind = "array"

    def initial_steps(self) -> Tuple[Step, ...]:
        return (ArrayCheck(),)

    @property
    def element(self) -> Optional[Validator]:
        check = self._array_check()
        return check.element if check else None

    def _array_check(self) -> Optional[ArrayCheck]:
        for step in self._steps:
            if isinstance(step, ArrayCheck):
                return step
        return None

    def _with_check(self, **changes: Any) -> "ArrayValidator":
        if self._array_check() is None:
            raise SchemaError(f"{self.name} validator has no array check to constrain")
        steps = tuple(replace(step, **changes) if isinstance(step, ArrayCheck) else step for step in self._steps)
        return self._evolve(_steps=steps)

    def of(self, description: Any) -> "ArrayValidator":
        """Validates every element against `description`."""
        from ..core.schema import compile_schema

        return self._with_check(element=compile_schema(description))

    def min(self, count: int) -> "ArrayValidator":
        return self._with_check(min_items=count)

    def max(self, count: int) -> "ArrayValidator":
        return self._with_check(max_items=count)

    def between(self, min_count: int, max_count: int) -> "ArrayValidator":
        if min_count > max_count:
            raise SchemaError(f"Invalid length range: {min_count} > {max_count}")
        return self._with_check(min_items=min_count, max_items=max_count)

    def length(self, count: int) -> "ArrayValidator":
        return self._with_check(min_items=count, max_items=count)


array = ArrayValidator()
