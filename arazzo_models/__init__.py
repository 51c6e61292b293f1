"""
Public entrypoints for mapping Arazzo documents to and from typed models.
"""

from __future__ import annotations

from arazzo_models.either import Either, First, Second
from arazzo_models.errors import (
    ArazzoError,
    DocumentSyntaxError,
    EmptyRequiredList,
    LoadError,
    MissingRequiredField,
    NumericParseFailure,
    UnsupportedKey,
    UnsupportedValueKind,
    WrongType,
)
from arazzo_models.loader import (
    LoaderContext,
    load_json_description,
    load_yaml_description,
    parse_arazzo_json,
    parse_arazzo_yaml,
)
from arazzo_models.schema.models import ArazzoDescription
from arazzo_models.serializer import serialize_description
from arazzo_models.writers import dump_json, dump_yaml


__all__ = [
    "ArazzoDescription",
    "ArazzoError",
    "DocumentSyntaxError",
    "Either",
    "EmptyRequiredList",
    "First",
    "LoadError",
    "LoaderContext",
    "MissingRequiredField",
    "NumericParseFailure",
    "Second",
    "UnsupportedKey",
    "UnsupportedValueKind",
    "WrongType",
    "dump_json",
    "dump_yaml",
    "load_json_description",
    "load_yaml_description",
    "parse_arazzo_json",
    "parse_arazzo_yaml",
    "serialize_description",
]
