"""
Pydantic models describing an Arazzo 1.0.x description.

The models are plain records: they are populated by the document loader
(`arazzo_models.loader`) and projected back into a document tree by the
serializer (`arazzo_models.serializer`). Field names are snake_case; the
wire names live in the loader and serializer.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from arazzo_models.either import Either, ValueOrExpression
from arazzo_models.payloads import Payload
from arazzo_models.values import AnyValue

# -----------------------------
# JSON-ish values
# -----------------------------
# NOTE: Pydantic struggles with recursive type aliases when generating schemas,
# so we approximate JSONValue using non-recursive containers.
JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = Union[JSONPrimitive, Dict[str, Any], List[Any]]
JsonSchema = JSONValue

Extensions = Dict[str, AnyValue]


class ArazzoModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )


class ExtensibleModel(ArazzoModel):
    """Objects that accept `x-` specification extensions."""

    extensions: Extensions = Field(default_factory=dict)


# -----------------------------
# Reusable objects and criteria
# -----------------------------
class ReusableObject(ArazzoModel):
    """
    Reference to a component, e.g. `$components.parameters.page`.
    """

    reference: str
    value: Optional[str] = None


class CriterionExpressionType(ExtensibleModel):
    type: str
    version: str


class Criterion(ExtensibleModel):
    context: Optional[str] = None
    condition: str
    # Either a short name ("simple", "regex", "jsonpath", "xpath") or a full
    # expression type record.
    type: Optional[Either[str, CriterionExpressionType]] = None


# -----------------------------
# Parameters and request bodies
# -----------------------------
class ParameterObject(ExtensibleModel):
    name: str
    in_: Optional[str] = Field(default=None, alias="in")
    value: ValueOrExpression


class PayloadReplacement(ExtensibleModel):
    target: str
    value: ValueOrExpression


class RequestBody(ExtensibleModel):
    content_type: Optional[str] = None
    payload: Optional[Payload] = None
    replacements: List[PayloadReplacement] = Field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        # Payloads compare by their rendered bytes, so a string payload and a
        # structured payload are equal when they render identically.
        if not isinstance(other, RequestBody):
            return NotImplemented
        return (
            self.content_type == other.content_type
            and self.extensions == other.extensions
            and self.replacements == other.replacements
            and _payload_bytes(self.payload) == _payload_bytes(other.payload)
        )


def _payload_bytes(payload: Optional[Payload]) -> Optional[bytes]:
    if payload is None:
        return None
    return payload.as_bytes()


# -----------------------------
# Actions
# -----------------------------
class SuccessObject(ExtensibleModel):
    name: str
    type: str
    workflow_id: Optional[str] = None
    step_id: Optional[str] = None
    criteria: List[Criterion] = Field(default_factory=list)


class FailureObject(ExtensibleModel):
    name: str
    type: str
    workflow_id: Optional[str] = None
    step_id: Optional[str] = None
    retry_after: Optional[float] = None
    retry_limit: Optional[int] = None
    criteria: List[Criterion] = Field(default_factory=list)


ParameterOrReusable = Either[ParameterObject, ReusableObject]
SuccessOrReusable = Either[SuccessObject, ReusableObject]
FailureOrReusable = Either[FailureObject, ReusableObject]


# -----------------------------
# Steps and workflows
# -----------------------------
class Step(ExtensibleModel):
    step_id: str
    operation_id: Optional[str] = None
    operation_path: Optional[str] = None
    workflow_id: Optional[str] = None
    description: Optional[str] = None
    parameters: List[ParameterOrReusable] = Field(default_factory=list)
    request_body: Optional[RequestBody] = None
    success_criteria: List[Criterion] = Field(default_factory=list)
    on_success: List[SuccessOrReusable] = Field(default_factory=list)
    on_failure: List[FailureOrReusable] = Field(default_factory=list)
    outputs: Dict[str, str] = Field(default_factory=dict)


class Workflow(ExtensibleModel):
    workflow_id: str
    summary: Optional[str] = None
    description: Optional[str] = None
    # Free-form JSON schema; None when the workflow declares no inputs.
    inputs: Optional[JSONValue] = None
    depends_on: List[str] = Field(default_factory=list)
    steps: List[Step] = Field(default_factory=list)
    success_actions: List[SuccessOrReusable] = Field(default_factory=list)
    failure_actions: List[FailureOrReusable] = Field(default_factory=list)
    outputs: Dict[str, str] = Field(default_factory=dict)
    parameters: List[ParameterOrReusable] = Field(default_factory=list)


# -----------------------------
# Root
# -----------------------------
class Info(ExtensibleModel):
    title: str
    summary: Optional[str] = None
    description: Optional[str] = None
    version: str


class SourceDescription(ExtensibleModel):
    name: str
    url: str
    type: Optional[str] = None


class Components(ExtensibleModel):
    inputs: Dict[str, JsonSchema] = Field(default_factory=dict)
    parameters: Dict[str, ParameterObject] = Field(default_factory=dict)
    success_actions: Dict[str, SuccessObject] = Field(default_factory=dict)
    failure_actions: Dict[str, FailureObject] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (
            self.inputs
            or self.parameters
            or self.success_actions
            or self.failure_actions
            or self.extensions
        )


class ArazzoDescription(ExtensibleModel):
    arazzo: str
    info: Info
    source_descriptions: List[SourceDescription] = Field(default_factory=list)
    workflows: List[Workflow] = Field(default_factory=list)
    components: Components = Field(default_factory=Components)
