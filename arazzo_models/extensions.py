"""
Specification extensions: vendor fields prefixed with `x-`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator, Mapping, Tuple

from arazzo_models.values import AnyValue

if TYPE_CHECKING:
    from arazzo_models.loader.formats import DocumentFormat

EXTENSION_PREFIX = "x-"


def extract_extensions(fmt: "DocumentFormat", fields: Mapping[str, Any]) -> Dict[str, AnyValue]:
    """
    Collect every `x-` field of an object, keyed by the name without the
    prefix. The match is exact and case-sensitive (`X-foo` is not an
    extension).
    """

    extensions: Dict[str, AnyValue] = {}
    for key, value in fields.items():
        if key.startswith(EXTENSION_PREFIX):
            extensions[key[len(EXTENSION_PREFIX):]] = fmt.to_any_value(value)
    return extensions


def iter_extension_fields(extensions: Mapping[str, AnyValue]) -> Iterator[Tuple[str, Any]]:
    """Yield `(x-name, plain value)` pairs sorted by extension name."""
    for name in sorted(extensions):
        yield f"{EXTENSION_PREFIX}{name}", extensions[name].to_plain()
