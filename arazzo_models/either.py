"""
Two-shape values: a field that holds exactly one of two legal encodings.

Parameter and replacement values are either literal data (`First`) or a
runtime expression string (`Second`). Criterion types are either a short
name (`First`) or a full expression-type record (`Second`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from arazzo_models.values import AnyValue, StringValue

A = TypeVar("A")
B = TypeVar("B")

EXPRESSION_SIGIL = "$"


class Either(Generic[A, B]):
    """Base class of `First` and `Second`. Never instantiated directly."""

    __slots__ = ()

    def is_first(self) -> bool:
        return isinstance(self, First)

    def is_second(self) -> bool:
        return isinstance(self, Second)

    def first(self) -> Optional[A]:
        if isinstance(self, First):
            return self.value
        return None

    def second(self) -> Optional[B]:
        if isinstance(self, Second):
            return self.value
        return None


@dataclass(frozen=True)
class First(Either[A, B]):
    value: A


@dataclass(frozen=True)
class Second(Either[A, B]):
    value: B


ValueOrExpression = Either[AnyValue, str]


def classify_string(text: str) -> Either[AnyValue, str]:
    """
    Strings starting with `$` are runtime expressions; anything else is a
    literal string value.
    """

    if text.startswith(EXPRESSION_SIGIL):
        return Second(text)
    return First(StringValue(text))


__all__ = [
    "EXPRESSION_SIGIL",
    "Either",
    "First",
    "Second",
    "ValueOrExpression",
    "classify_string",
]
