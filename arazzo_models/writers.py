"""
Render a serialized Arazzo description as JSON or YAML text.
"""

from __future__ import annotations

import json
from typing import Optional

import yaml

from arazzo_models.config import config
from arazzo_models.loader.yaml_tree import CoreSchemaDumper
from arazzo_models.schema.models import ArazzoDescription
from arazzo_models.serializer import serialize_description


def dump_json(description: ArazzoDescription, *, indent: Optional[int] = None) -> str:
    """
    JSON text of the description. JSON has no infinity or NaN, so a
    non-finite float (e.g. a YAML `.inf` extension value) raises ValueError.
    """
    tree = serialize_description(description)
    return json.dumps(
        tree,
        indent=config.json_indent if indent is None else indent,
        ensure_ascii=False,
        allow_nan=False,
    )


def dump_yaml(description: ArazzoDescription) -> str:
    tree = serialize_description(description)
    return yaml.dump(
        tree,
        Dumper=CoreSchemaDumper,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
