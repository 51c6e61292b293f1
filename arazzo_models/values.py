"""
Dynamic values: arbitrary scalar/array/object data of unknown shape.

Extension payloads and literal parameter values are carried as one of the
variants below. The variants keep the numeric distinction seen in the
source document (signed vs unsigned integers vs floats), which plain
Python numbers cannot express.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


class AnyValue:
    """Base class of every dynamic value variant."""

    __slots__ = ()

    kind: str = "Unknown"

    def to_plain(self) -> Any:
        """Project the value onto plain Python data for a document writer."""
        raise NotImplementedError


@dataclass(frozen=True)
class NullValue(AnyValue):
    kind = "Null"

    def to_plain(self) -> Any:
        return None


@dataclass(frozen=True)
class BooleanValue(AnyValue):
    value: bool
    kind = "Boolean"

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class IntegerValue(AnyValue):
    """64-bit signed integer."""

    value: int
    kind = "Integer"

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class UIntegerValue(AnyValue):
    """64-bit unsigned integer."""

    value: int
    kind = "UInteger"

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class FloatValue(AnyValue):
    value: float
    kind = "Float"

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class StringValue(AnyValue):
    value: str
    kind = "String"

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ArrayValue(AnyValue):
    items: Tuple[AnyValue, ...] = ()
    kind = "Array"

    def __post_init__(self) -> None:
        # Lists passed by callers are frozen so the value stays immutable.
        object.__setattr__(self, "items", tuple(self.items))

    def to_plain(self) -> Any:
        return [item.to_plain() for item in self.items]


@dataclass(frozen=True)
class ObjectValue(AnyValue):
    entries: Dict[str, AnyValue] = field(default_factory=dict)
    kind = "Object"

    def to_plain(self) -> Any:
        return {key: self.entries[key].to_plain() for key in sorted(self.entries)}


def integer(value: int) -> AnyValue:
    """Classify a Python int the way a JSON number is classified."""
    if 0 <= value <= U64_MAX:
        return UIntegerValue(value)
    if I64_MIN <= value < 0:
        return IntegerValue(value)
    return FloatValue(float(value))


__all__ = [
    "AnyValue",
    "ArrayValue",
    "BooleanValue",
    "FloatValue",
    "I64_MAX",
    "I64_MIN",
    "IntegerValue",
    "NullValue",
    "ObjectValue",
    "StringValue",
    "U64_MAX",
    "UIntegerValue",
    "integer",
]
