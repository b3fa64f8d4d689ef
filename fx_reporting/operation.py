"""Trade direction."""
from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError

_CODES = {"B": "BUY", "S": "SELL"}


class Operation(Enum):
    BUY = "outgoing"
    SELL = "incoming"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "Operation | str") -> "Operation":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            key = _CODES.get(key, key)
            if key in cls.__members__:
                return cls[key]
        raise InvalidArgumentError("operation", value, f"Unknown operation: {value!r}")
