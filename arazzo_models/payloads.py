"""
Request-body payloads.

A payload arrives either absent/null, as a raw string, or as structured
data. `JsonPayload` records that the *source* of the payload was a
structured node; it says nothing about the content type of the request.
"""

from __future__ import annotations

import copy
import json
from abc import ABC, abstractmethod
from typing import Any, Optional


def canonical_json(value: Any) -> str:
    """Compact JSON text with sorted keys."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class Payload(ABC):
    """Body payload of a request."""

    __slots__ = ()

    def as_bytes(self) -> bytes:
        return self.as_string().encode("utf-8")

    @abstractmethod
    def as_string(self) -> str:
        raise NotImplementedError

    def as_json(self) -> Optional[Any]:
        """Structured form of the payload, or None when it has none."""
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Payload):
            return NotImplemented
        return self.as_bytes() == other.as_bytes()

    def __hash__(self) -> int:
        return hash(self.as_bytes())


class EmptyPayload(Payload):
    __slots__ = ()

    def as_string(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "EmptyPayload()"


class StringPayload(Payload):
    """Payload taken verbatim as text, even when the text looks like JSON."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def as_string(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StringPayload({self.text!r})"


class JsonPayload(Payload):
    __slots__ = ("document",)

    def __init__(self, document: Any) -> None:
        self.document = document

    def as_string(self) -> str:
        return canonical_json(self.document)

    def as_json(self) -> Optional[Any]:
        return copy.deepcopy(self.document)

    def __repr__(self) -> str:
        return f"JsonPayload({self.document!r})"


__all__ = [
    "EmptyPayload",
    "JsonPayload",
    "Payload",
    "StringPayload",
    "canonical_json",
]
