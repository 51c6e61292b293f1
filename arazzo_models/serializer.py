"""
Canonical serializer: typed Arazzo model -> ordered document tree.

The result is plain `dict`/`list`/scalar data whose key order is fixed:
each object lists its fields in a hardcoded order (alphabetical by wire
name), skips absent optionals and empty lists/mappings, and ends with its
`x-` extensions sorted by name. Rendering the tree as JSON or YAML text is
left to a writer that keeps insertion order (see `arazzo_models.writers`).
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from arazzo_models.either import Either, First
from arazzo_models.extensions import iter_extension_fields
from arazzo_models.payloads import EmptyPayload, JsonPayload, Payload, StringPayload
from arazzo_models.schema.models import (
    ArazzoDescription,
    Components,
    Criterion,
    CriterionExpressionType,
    FailureObject,
    Info,
    ParameterObject,
    PayloadReplacement,
    RequestBody,
    ReusableObject,
    SourceDescription,
    Step,
    SuccessObject,
    Workflow,
)
from arazzo_models.values import AnyValue

Document = Dict[str, Any]

T = TypeVar("T")


def serialize_description(description: ArazzoDescription) -> Document:
    document: Document = {"arazzo": description.arazzo}
    if not description.components.is_empty():
        document["components"] = serialize_components(description.components)
    document["info"] = serialize_info(description.info)
    _put_list(document, "sourceDescriptions", description.source_descriptions, serialize_source_description)
    _put_list(document, "workflows", description.workflows, serialize_workflow)
    return _with_extensions(document, description.extensions)


def serialize_info(info: Info) -> Document:
    document: Document = {}
    _put(document, "description", info.description)
    _put(document, "summary", info.summary)
    document["title"] = info.title
    document["version"] = info.version
    return _with_extensions(document, info.extensions)


def serialize_source_description(source: SourceDescription) -> Document:
    document: Document = {"name": source.name}
    _put(document, "type", source.type)
    document["url"] = source.url
    return _with_extensions(document, source.extensions)


def serialize_workflow(workflow: Workflow) -> Document:
    document: Document = {}
    if workflow.depends_on:
        document["dependsOn"] = list(workflow.depends_on)
    _put(document, "description", workflow.description)
    _put_list(document, "failureActions", workflow.failure_actions, _failure_or_reusable)
    if workflow.inputs is not None:
        document["inputs"] = canonical_tree(workflow.inputs)
    _put_outputs(document, workflow.outputs)
    _put_list(document, "parameters", workflow.parameters, _parameter_or_reusable)
    _put_list(document, "steps", workflow.steps, serialize_step)
    _put_list(document, "successActions", workflow.success_actions, _success_or_reusable)
    _put(document, "summary", workflow.summary)
    document["workflowId"] = workflow.workflow_id
    return _with_extensions(document, workflow.extensions)


def serialize_step(step: Step) -> Document:
    document: Document = {}
    _put(document, "description", step.description)
    _put_list(document, "onFailure", step.on_failure, _failure_or_reusable)
    _put_list(document, "onSuccess", step.on_success, _success_or_reusable)
    _put(document, "operationId", step.operation_id)
    _put(document, "operationPath", step.operation_path)
    _put_outputs(document, step.outputs)
    _put_list(document, "parameters", step.parameters, _parameter_or_reusable)
    if step.request_body is not None:
        document["requestBody"] = serialize_request_body(step.request_body)
    document["stepId"] = step.step_id
    _put_list(document, "successCriteria", step.success_criteria, serialize_criterion)
    _put(document, "workflowId", step.workflow_id)
    return _with_extensions(document, step.extensions)


def serialize_parameter(parameter: ParameterObject) -> Document:
    document: Document = {}
    _put(document, "in", parameter.in_)
    document["name"] = parameter.name
    document["value"] = serialize_value_or_expression(parameter.value)
    return _with_extensions(document, parameter.extensions)


def serialize_success_action(action: SuccessObject) -> Document:
    document: Document = {}
    _put_list(document, "criteria", action.criteria, serialize_criterion)
    document["name"] = action.name
    _put(document, "stepId", action.step_id)
    document["type"] = action.type
    _put(document, "workflowId", action.workflow_id)
    return _with_extensions(document, action.extensions)


def serialize_failure_action(action: FailureObject) -> Document:
    document: Document = {}
    _put_list(document, "criteria", action.criteria, serialize_criterion)
    document["name"] = action.name
    _put(document, "retryAfter", action.retry_after)
    _put(document, "retryLimit", action.retry_limit)
    _put(document, "stepId", action.step_id)
    document["type"] = action.type
    _put(document, "workflowId", action.workflow_id)
    return _with_extensions(document, action.extensions)


def serialize_reusable(reusable: ReusableObject) -> Document:
    document: Document = {"reference": reusable.reference}
    _put(document, "value", reusable.value)
    return document


def serialize_criterion(criterion: Criterion) -> Document:
    document: Document = {"condition": criterion.condition}
    _put(document, "context", criterion.context)
    if criterion.type is not None:
        if isinstance(criterion.type, First):
            document["type"] = criterion.type.value
        else:
            document["type"] = serialize_criterion_expression_type(criterion.type.value)
    return _with_extensions(document, criterion.extensions)


def serialize_criterion_expression_type(expression_type: CriterionExpressionType) -> Document:
    document: Document = {
        "type": expression_type.type,
        "version": expression_type.version,
    }
    return _with_extensions(document, expression_type.extensions)


def serialize_request_body(body: RequestBody) -> Document:
    document: Document = {}
    _put(document, "contentType", body.content_type)
    if body.payload is not None:
        document["payload"] = serialize_payload(body.payload)
    _put_list(document, "replacements", body.replacements, serialize_payload_replacement)
    return _with_extensions(document, body.extensions)


def serialize_payload_replacement(replacement: PayloadReplacement) -> Document:
    document: Document = {
        "target": replacement.target,
        "value": serialize_value_or_expression(replacement.value),
    }
    return _with_extensions(document, replacement.extensions)


def serialize_components(components: Components) -> Document:
    document: Document = {}
    _put_mapping(document, "failureActions", components.failure_actions, serialize_failure_action)
    _put_mapping(document, "inputs", components.inputs, canonical_tree)
    _put_mapping(document, "parameters", components.parameters, serialize_parameter)
    _put_mapping(document, "successActions", components.success_actions, serialize_success_action)
    return _with_extensions(document, components.extensions)


def serialize_payload(payload: Payload) -> Any:
    if isinstance(payload, EmptyPayload):
        return None
    if isinstance(payload, StringPayload):
        return payload.text
    if isinstance(payload, JsonPayload):
        return canonical_tree(payload.document)
    return payload.as_string()


def serialize_value_or_expression(value: Either[AnyValue, str]) -> Any:
    if isinstance(value, First):
        return value.value.to_plain()
    return value.value


def canonical_tree(value: Any) -> Any:
    """Deep copy of a JSON-compatible tree with object keys sorted."""
    if isinstance(value, Mapping):
        return {key: canonical_tree(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [canonical_tree(item) for item in value]
    return value


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _parameter_or_reusable(entry: Either[ParameterObject, ReusableObject]) -> Document:
    if isinstance(entry, First):
        return serialize_parameter(entry.value)
    return serialize_reusable(entry.value)


def _success_or_reusable(entry: Either[SuccessObject, ReusableObject]) -> Document:
    if isinstance(entry, First):
        return serialize_success_action(entry.value)
    return serialize_reusable(entry.value)


def _failure_or_reusable(entry: Either[FailureObject, ReusableObject]) -> Document:
    if isinstance(entry, First):
        return serialize_failure_action(entry.value)
    return serialize_reusable(entry.value)


def _put(document: Document, key: str, value: Optional[Any]) -> None:
    if value is not None:
        document[key] = value


def _put_list(
    document: Document, key: str, items: Sequence[T], serialize: Callable[[T], Any]
) -> None:
    if items:
        document[key] = [serialize(item) for item in items]


def _put_mapping(
    document: Document, key: str, entries: Mapping[str, T], serialize: Callable[[T], Any]
) -> None:
    if entries:
        document[key] = {name: serialize(entries[name]) for name in sorted(entries)}


def _put_outputs(document: Document, outputs: Mapping[str, str]) -> None:
    if outputs:
        document["outputs"] = {name: outputs[name] for name in sorted(outputs)}


def _with_extensions(document: Document, extensions: Mapping[str, AnyValue]) -> Document:
    for key, value in iter_extension_fields(extensions):
        document[key] = value
    return document


__all__ = [
    "Document",
    "canonical_tree",
    "serialize_components",
    "serialize_criterion",
    "serialize_criterion_expression_type",
    "serialize_description",
    "serialize_failure_action",
    "serialize_info",
    "serialize_parameter",
    "serialize_payload",
    "serialize_payload_replacement",
    "serialize_request_body",
    "serialize_reusable",
    "serialize_source_description",
    "serialize_step",
    "serialize_success_action",
    "serialize_value_or_expression",
    "serialize_workflow",
]
