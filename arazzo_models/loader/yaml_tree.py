"""
YAML node-graph helpers.

`yaml.compose` silently replaces aliases with the anchored node. Arazzo
documents may not rely on aliases, so `compose_yaml` keeps each alias as an
`AliasNode` and the loader rejects it.

Plain scalars are resolved with the YAML 1.2 core schema rather than
PyYAML's YAML 1.1 defaults: `yes`, `off` or `NO` stay strings, `010` is
decimal ten and `1:30` is not a base-60 number.
"""

from __future__ import annotations

import copy
import re

import yaml
from yaml.events import AliasEvent
from yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

STR_TAG = "tag:yaml.org,2002:str"
INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"
BOOL_TAG = "tag:yaml.org,2002:bool"
NULL_TAG = "tag:yaml.org,2002:null"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
SEQ_TAG = "tag:yaml.org,2002:seq"
MAP_TAG = "tag:yaml.org,2002:map"
MERGE_TAG = "tag:yaml.org,2002:merge"
VALUE_TAG = "tag:yaml.org,2002:value"

CORE_BOOL = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
CORE_INT = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
CORE_FLOAT = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
)

# Int is listed before float so that "10" resolves to an integer.
CORE_RESOLVERS = (
    (BOOL_TAG, CORE_BOOL, list("tTfF")),
    (INT_TAG, CORE_INT, list("-+0123456789")),
    (FLOAT_TAG, CORE_FLOAT, list("-+0123456789.")),
)

# YAML 1.1 implicit resolvers removed from the loader. Bool, int and float return
# with the core patterns above.
_LEGACY_TAGS = frozenset({BOOL_TAG, INT_TAG, FLOAT_TAG, TIMESTAMP_TAG, MERGE_TAG, VALUE_TAG})

# Timestamps are not a YAML 1.2 core type; nodes tagged as such (explicitly,
# or by a YAML 1.1 composer) are read as plain text.
TEXT_TAGS = frozenset({STR_TAG, TIMESTAMP_TAG})


class AliasNode(Node):
    id = "alias"

    def __init__(self, anchor, start_mark=None, end_mark=None):
        super().__init__("alias", anchor, start_mark, end_mark)

    @property
    def anchor(self) -> str:
        return self.value


class AliasPreservingLoader(yaml.SafeLoader):
    def compose_node(self, parent, index):
        if self.check_event(AliasEvent):
            event = self.get_event()
            return AliasNode(event.anchor, event.start_mark, event.end_mark)
        return super().compose_node(parent, index)


# yaml_implicit_resolvers is a class-level dict: deepcopy it so SafeLoader itself
# keeps the YAML 1.1 rules.
AliasPreservingLoader.yaml_implicit_resolvers = copy.deepcopy(yaml.SafeLoader.yaml_implicit_resolvers)
for _first, _resolvers in list(AliasPreservingLoader.yaml_implicit_resolvers.items()):
    AliasPreservingLoader.yaml_implicit_resolvers[_first] = [
        resolver for resolver in _resolvers if resolver[0] not in _LEGACY_TAGS
    ]
for _tag, _pattern, _first_chars in CORE_RESOLVERS:
    AliasPreservingLoader.add_implicit_resolver(_tag, _pattern, _first_chars)


class CoreSchemaDumper(yaml.SafeDumper):
    """
    Safe dumper that quotes any string a YAML 1.1 or a YAML 1.2 core reader
    would resolve to another type, so `"NO"` or `"0o17"` survive either reader.
    """


for _tag, _pattern, _first_chars in CORE_RESOLVERS:
    CoreSchemaDumper.add_implicit_resolver(_tag, _pattern, _first_chars)


def compose_yaml(text: str) -> Node | None:
    """
    Compose a single YAML document into a node graph, keeping aliases as
    `AliasNode` instances. Returns None for an empty stream.
    """

    loader = AliasPreservingLoader(text)
    try:
        return loader.get_single_node()
    finally:
        loader.dispose()


def node_kind(node: Node) -> str:
    if isinstance(node, AliasNode):
        return "Alias"
    if isinstance(node, ScalarNode):
        if node.tag in TEXT_TAGS:
            return "String"
        if node.tag == INT_TAG:
            return "Integer"
        if node.tag == FLOAT_TAG:
            return "Real"
        if node.tag == BOOL_TAG:
            return "Boolean"
        if node.tag == NULL_TAG:
            return "Null"
        return node.tag
    if isinstance(node, SequenceNode):
        return "Array" if node.tag == SEQ_TAG else node.tag
    if isinstance(node, MappingNode):
        return "Object" if node.tag == MAP_TAG else node.tag
    return type(node).__name__


__all__ = [
    "AliasNode",
    "AliasPreservingLoader",
    "CORE_BOOL",
    "CORE_FLOAT",
    "CORE_INT",
    "CoreSchemaDumper",
    "BOOL_TAG",
    "FLOAT_TAG",
    "INT_TAG",
    "MAP_TAG",
    "NULL_TAG",
    "SEQ_TAG",
    "STR_TAG",
    "TEXT_TAGS",
    "TIMESTAMP_TAG",
    "compose_yaml",
    "node_kind",
]
