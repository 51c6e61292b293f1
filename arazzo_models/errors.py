"""
Shared exception hierarchy for loading Arazzo documents.
"""


class ArazzoError(Exception):
    """Base class for all arazzo_models errors."""


class DocumentSyntaxError(ArazzoError):
    """Raised when raw JSON or YAML text cannot be parsed into a tree."""


class LoadError(ArazzoError):
    """Raised when a parsed tree cannot be mapped onto the typed model."""


class MissingRequiredField(LoadError):
    """A required field was not present in the source object."""

    def __init__(self, field: str, spec_ref: str) -> None:
        self.field = field
        self.spec_ref = spec_ref
        super().__init__(f"'{field}' is required [{spec_ref}]")


class WrongType(LoadError):
    """A field was present but held the wrong kind of value."""

    def __init__(self, field: str, expected_kind: str, actual_kind: str) -> None:
        self.field = field
        self.expected_kind = expected_kind
        self.actual_kind = actual_kind
        super().__init__(
            f"Value for '{field}' must be {expected_kind}, got {actual_kind}"
        )


class EmptyRequiredList(LoadError):
    """A list that must hold at least one entry was absent or empty."""

    def __init__(self, list_name: str, spec_ref: str) -> None:
        self.list_name = list_name
        self.spec_ref = spec_ref
        super().__init__(f"'{list_name}' must have at least one entry [{spec_ref}]")


class UnsupportedKey(LoadError):
    """An object key was not a string."""

    def __init__(self, key_kind: str) -> None:
        self.key_kind = key_kind
        super().__init__(f"Only String values can be used for object keys. Got '{key_kind}'")


class UnsupportedValueKind(LoadError):
    """A node has no Dynamic Value equivalent (aliases, unknown tags)."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Values of '{kind}' can not be used as a document value")


class NumericParseFailure(LoadError):
    """A numeric scalar could not be parsed."""

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__(f"'{raw_text}' is not a valid number")
