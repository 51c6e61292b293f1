"""
Source-format adapters.

The entity decoders in `arazzo_models.loader.decode` are written once
against `DocumentFormat`; each adapter answers the primitive questions
("is this an object?", "what string is under this key?") for one kind of
parsed tree:

- `JsonFormat` reads the plain Python tree produced by `json.loads`.
- `YamlFormat` reads a PyYAML node graph (`yaml.compose` / `compose_yaml`).
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

from arazzo_models.errors import NumericParseFailure, UnsupportedKey, UnsupportedValueKind
from arazzo_models.loader.yaml_tree import (
    BOOL_TAG,
    CORE_BOOL,
    CORE_FLOAT,
    CORE_INT,
    FLOAT_TAG,
    INT_TAG,
    MAP_TAG,
    NULL_TAG,
    SEQ_TAG,
    TEXT_TAGS,
    node_kind,
)
from arazzo_models.values import (
    I64_MAX,
    I64_MIN,
    AnyValue,
    ArrayValue,
    BooleanValue,
    FloatValue,
    IntegerValue,
    NullValue,
    ObjectValue,
    StringValue,
    integer,
)


class DocumentFormat(ABC):
    """Primitive accessors over one kind of parsed document tree."""

    name: str = "document"

    @abstractmethod
    def type_name(self, node: Any) -> str:
        """Human readable kind of a node, used in error messages."""

    @abstractmethod
    def as_mapping(self, node: Any) -> Optional[Dict[str, Any]]:
        """String-keyed entries of an object node, or None if not an object."""

    @abstractmethod
    def as_list(self, node: Any) -> Optional[List[Any]]:
        """Entries of an array node, or None if not an array."""

    @abstractmethod
    def as_str(self, node: Any) -> Optional[str]:
        """The text of a string node, or None for every other kind."""

    @abstractmethod
    def scalar_text(self, node: Any) -> Optional[str]:
        """Strings as-is; numbers and booleans stringified; otherwise None."""

    @abstractmethod
    def as_number(self, node: Any) -> Optional[float]:
        """Any numeric node as a float, otherwise None."""

    @abstractmethod
    def as_integer(self, node: Any) -> Optional[int]:
        """Any numeric node as an int (reals truncated), otherwise None."""

    @abstractmethod
    def is_null(self, node: Any) -> bool:
        ...

    @abstractmethod
    def to_any_value(self, node: Any) -> AnyValue:
        """Convert a node into a dynamic value."""

    @abstractmethod
    def to_json(self, node: Any) -> Any:
        """Convert a node into a plain JSON-compatible tree."""


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _truncate(value: float) -> Optional[int]:
    if math.isnan(value) or math.isinf(value):
        return None
    return int(value)


class JsonFormat(DocumentFormat):
    name = "JSON"

    def type_name(self, node: Any) -> str:
        if node is None:
            return "Null"
        if isinstance(node, bool):
            return "Boolean"
        if isinstance(node, (int, float)):
            return "Number"
        if isinstance(node, str):
            return "String"
        if isinstance(node, (list, tuple)):
            return "Array"
        if isinstance(node, Mapping):
            return "Object"
        return type(node).__name__

    def as_mapping(self, node: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(node, Mapping):
            return None
        return {key: value for key, value in node.items() if isinstance(key, str)}

    def as_list(self, node: Any) -> Optional[List[Any]]:
        if isinstance(node, (list, tuple)):
            return list(node)
        return None

    def as_str(self, node: Any) -> Optional[str]:
        return node if isinstance(node, str) else None

    def scalar_text(self, node: Any) -> Optional[str]:
        if isinstance(node, str):
            return node
        if isinstance(node, bool):
            return _bool_text(node)
        if isinstance(node, (int, float)):
            return str(node)
        return None

    def as_number(self, node: Any) -> Optional[float]:
        if isinstance(node, bool):
            return None
        if isinstance(node, (int, float)):
            return float(node)
        return None

    def as_integer(self, node: Any) -> Optional[int]:
        if isinstance(node, bool):
            return None
        if isinstance(node, int):
            return node
        if isinstance(node, float):
            return _truncate(node)
        return None

    def is_null(self, node: Any) -> bool:
        return node is None

    def to_any_value(self, node: Any) -> AnyValue:
        if node is None:
            return NullValue()
        if isinstance(node, bool):
            return BooleanValue(node)
        if isinstance(node, int):
            return integer(node)
        if isinstance(node, float):
            return FloatValue(node)
        if isinstance(node, str):
            return StringValue(node)
        if isinstance(node, (list, tuple)):
            return ArrayValue(tuple(self.to_any_value(item) for item in node))
        if isinstance(node, Mapping):
            entries: Dict[str, AnyValue] = {}
            for key, value in node.items():
                if not isinstance(key, str):
                    raise UnsupportedKey(self.type_name(key))
                entries[key] = self.to_any_value(value)
            return ObjectValue(entries)
        raise UnsupportedValueKind(self.type_name(node))

    def to_json(self, node: Any) -> Any:
        if node is None or isinstance(node, (bool, int, float, str)):
            return node
        if isinstance(node, (list, tuple)):
            return [self.to_json(item) for item in node]
        if isinstance(node, Mapping):
            result: Dict[str, Any] = {}
            for key, value in node.items():
                if not isinstance(key, str):
                    raise UnsupportedKey(self.type_name(key))
                result[key] = self.to_json(value)
            return result
        raise UnsupportedValueKind(self.type_name(node))


class YamlFormat(DocumentFormat):
    name = "YAML"

    def type_name(self, node: Any) -> str:
        if node is None:
            return "Null"
        if isinstance(node, Node):
            return node_kind(node)
        return type(node).__name__

    def as_mapping(self, node: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(node, MappingNode):
            return None
        # Later duplicates win, as with any hash insert.
        return {
            key.value: value
            for key, value in node.value
            if isinstance(key, ScalarNode) and key.tag in TEXT_TAGS
        }

    def as_list(self, node: Any) -> Optional[List[Any]]:
        if isinstance(node, SequenceNode):
            return list(node.value)
        return None

    def as_str(self, node: Any) -> Optional[str]:
        if isinstance(node, ScalarNode) and node.tag in TEXT_TAGS:
            return node.value
        return None

    def scalar_text(self, node: Any) -> Optional[str]:
        if not isinstance(node, ScalarNode):
            return None
        if node.tag in TEXT_TAGS or node.tag == FLOAT_TAG:
            return node.value
        if node.tag == INT_TAG:
            parsed = self._parse_int(node, strict=False)
            return str(parsed) if parsed is not None else None
        if node.tag == BOOL_TAG:
            parsed_bool = self._parse_bool(node)
            return _bool_text(parsed_bool) if parsed_bool is not None else None
        return None

    def as_number(self, node: Any) -> Optional[float]:
        if not isinstance(node, ScalarNode):
            return None
        if node.tag == FLOAT_TAG:
            return self._parse_float(node, strict=False)
        if node.tag == INT_TAG:
            parsed = self._parse_int(node, strict=False)
            return float(parsed) if parsed is not None else None
        return None

    def as_integer(self, node: Any) -> Optional[int]:
        if not isinstance(node, ScalarNode):
            return None
        if node.tag == INT_TAG:
            return self._parse_int(node, strict=False)
        if node.tag == FLOAT_TAG:
            parsed = self._parse_float(node, strict=False)
            return _truncate(parsed) if parsed is not None else None
        return None

    def is_null(self, node: Any) -> bool:
        return isinstance(node, ScalarNode) and node.tag == NULL_TAG

    def to_any_value(self, node: Any) -> AnyValue:
        if isinstance(node, ScalarNode):
            if node.tag in TEXT_TAGS:
                return StringValue(node.value)
            if node.tag == INT_TAG:
                return IntegerValue(self._parse_int(node, strict=True))
            if node.tag == FLOAT_TAG:
                return FloatValue(self._parse_float(node, strict=True))
            if node.tag == BOOL_TAG:
                parsed = self._parse_bool(node)
                if parsed is None:
                    raise UnsupportedValueKind(f"Boolean '{node.value}'")
                return BooleanValue(parsed)
            if node.tag == NULL_TAG:
                return NullValue()
        elif isinstance(node, SequenceNode) and node.tag == SEQ_TAG:
            return ArrayValue(tuple(self.to_any_value(item) for item in node.value))
        elif isinstance(node, MappingNode) and node.tag == MAP_TAG:
            entries: Dict[str, AnyValue] = {}
            for key, value in node.value:
                entries[self._require_key(key)] = self.to_any_value(value)
            return ObjectValue(entries)
        raise UnsupportedValueKind(self.type_name(node))

    def to_json(self, node: Any) -> Any:
        if isinstance(node, ScalarNode):
            if node.tag in TEXT_TAGS:
                return node.value
            if node.tag == INT_TAG:
                return self._parse_int(node, strict=True)
            if node.tag == FLOAT_TAG:
                return self._parse_float(node, strict=True)
            if node.tag == BOOL_TAG:
                parsed = self._parse_bool(node)
                if parsed is None:
                    raise UnsupportedValueKind(f"Boolean '{node.value}'")
                return parsed
            if node.tag == NULL_TAG:
                return None
        elif isinstance(node, SequenceNode) and node.tag == SEQ_TAG:
            return [self.to_json(item) for item in node.value]
        elif isinstance(node, MappingNode) and node.tag == MAP_TAG:
            result: Dict[str, Any] = {}
            for key, value in node.value:
                result[self._require_key(key)] = self.to_json(value)
            return result
        raise UnsupportedValueKind(self.type_name(node))

    def _require_key(self, key: Node) -> str:
        if isinstance(key, ScalarNode) and key.tag in TEXT_TAGS:
            return key.value
        raise UnsupportedKey(self.type_name(key))

    def _parse_int(self, node: ScalarNode, *, strict: bool) -> Optional[int]:
        text = node.value
        parsed: Optional[int] = None
        if CORE_INT.match(text):
            if text.startswith("0o"):
                parsed = int(text[2:], 8)
            elif text.startswith("0x"):
                parsed = int(text[2:], 16)
            else:
                parsed = int(text, 10)
        if parsed is None or not I64_MIN <= parsed <= I64_MAX:
            if strict:
                raise NumericParseFailure(text)
            return None
        return parsed

    def _parse_float(self, node: ScalarNode, *, strict: bool) -> Optional[float]:
        text = node.value
        if not CORE_FLOAT.match(text):
            if strict:
                raise NumericParseFailure(text)
            return None
        lowered = text.lower()
        if lowered == ".nan":
            return math.nan
        if lowered.endswith(".inf"):
            return -math.inf if lowered.startswith("-") else math.inf
        return float(text)

    def _parse_bool(self, node: ScalarNode) -> Optional[bool]:
        if not CORE_BOOL.match(node.value):
            return None
        return node.value.lower() == "true"


JSON_FORMAT = JsonFormat()
YAML_FORMAT = YamlFormat()


__all__ = [
    "DocumentFormat",
    "JSON_FORMAT",
    "JsonFormat",
    "YAML_FORMAT",
    "YamlFormat",
]
