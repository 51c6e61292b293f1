"""
Document loader: parsed JSON/YAML trees -> typed Arazzo model.
"""

from arazzo_models.loader.context import LoaderContext
from arazzo_models.loader.decode import DocumentLoader
from arazzo_models.loader.formats import JSON_FORMAT, YAML_FORMAT, DocumentFormat, JsonFormat, YamlFormat
from arazzo_models.loader.parse import (
    load_json_description,
    load_yaml_description,
    parse_arazzo_json,
    parse_arazzo_yaml,
)
from arazzo_models.loader.yaml_tree import AliasNode, compose_yaml

__all__ = [
    "AliasNode",
    "DocumentFormat",
    "DocumentLoader",
    "JSON_FORMAT",
    "JsonFormat",
    "LoaderContext",
    "YAML_FORMAT",
    "YamlFormat",
    "compose_yaml",
    "load_json_description",
    "load_yaml_description",
    "parse_arazzo_json",
    "parse_arazzo_yaml",
]
