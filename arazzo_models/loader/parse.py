"""
Parse JSON or YAML payloads into a strongly typed ArazzoDescription.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

import yaml
from yaml.nodes import Node

from arazzo_models.errors import DocumentSyntaxError
from arazzo_models.loader.context import LoaderContext
from arazzo_models.loader.decode import DocumentLoader
from arazzo_models.loader.formats import JSON_FORMAT, YAML_FORMAT
from arazzo_models.loader.yaml_tree import compose_yaml
from arazzo_models.schema.models import ArazzoDescription


def load_json_description(
    tree: Any, context: LoaderContext | None = None
) -> ArazzoDescription:
    """Map an already-parsed JSON tree onto the model."""
    return DocumentLoader(JSON_FORMAT, context or LoaderContext.from_settings()).description(tree)


def load_yaml_description(
    node: Node | None, context: LoaderContext | None = None
) -> ArazzoDescription:
    """Map a composed YAML node graph onto the model."""
    return DocumentLoader(YAML_FORMAT, context or LoaderContext.from_settings()).description(node)


def parse_arazzo_json(
    payload: Any, context: LoaderContext | None = None
) -> ArazzoDescription:
    """
    Accepts either a JSON string or an already-parsed mapping and returns a
    validated ArazzoDescription.
    """

    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DocumentSyntaxError(f"Invalid Arazzo JSON payload: {exc}") from exc
    elif isinstance(payload, Mapping):
        data = payload
    else:
        raise DocumentSyntaxError(
            f"Unsupported payload type {type(payload).__name__}; expected str or Mapping"
        )

    return load_json_description(data, context)


def parse_arazzo_yaml(
    payload: Any, context: LoaderContext | None = None
) -> ArazzoDescription:
    """
    Accepts either YAML text or a composed `yaml.Node` and returns a
    validated ArazzoDescription. Aliases in the text are rejected.
    """

    if isinstance(payload, (str, bytes)):
        try:
            text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
            node = compose_yaml(text)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise DocumentSyntaxError(f"Invalid Arazzo YAML payload: {exc}") from exc
    elif isinstance(payload, Node):
        node = payload
    else:
        raise DocumentSyntaxError(
            f"Unsupported payload type {type(payload).__name__}; expected str or yaml.Node"
        )

    return load_yaml_description(node, context)
