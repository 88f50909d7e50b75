"""The marker for a value that is not there at all."""
from typing import Any


class _Missing:
    """Singleton standing for an absent value.

    Object checks pass it for keys the input does not have, and a validator
    called without an argument receives it. It is distinct from None, which
    is a present value.
    """

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: Any) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING = _Missing()
