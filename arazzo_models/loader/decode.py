"""
Entity decoders: raw parsed tree -> typed Arazzo model.

`DocumentLoader` holds one decoding method per entity. The methods only
talk to the tree through a `DocumentFormat`, so JSON and YAML sources go
through exactly the same rules.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, TypeVar

from arazzo_models.either import Either, First, Second, classify_string
from arazzo_models.errors import EmptyRequiredList, MissingRequiredField, WrongType
from arazzo_models.extensions import extract_extensions
from arazzo_models.loader.context import LoaderContext
from arazzo_models.loader.formats import DocumentFormat
from arazzo_models.logger import get_logger
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

logger = get_logger(__name__)

T = TypeVar("T")

# Fixed-fields sections of the Arazzo 1.0.1 specification.
DESCRIPTION_REF = "4.6.1.1 Fixed Fields"
INFO_REF = "4.6.2.1 Fixed Fields"
SOURCE_DESCRIPTION_REF = "4.6.3.1 Fixed Fields"
WORKFLOW_REF = "4.6.4.1 Fixed Fields"
STEP_REF = "4.6.5.1 Fixed Fields"
PARAMETER_REF = "4.6.6.1 Fixed Fields"
SUCCESS_ACTION_REF = "4.6.7.1 Fixed Fields"
FAILURE_ACTION_REF = "4.6.8.1 Fixed Fields"
COMPONENTS_REF = "4.6.9.1 Fixed Fields"
REUSABLE_REF = "4.6.10.1 Fixed Fields"
CRITERION_REF = "4.6.11.1 Fixed Fields"
CRITERION_TYPE_REF = "4.6.12.1 Fixed Fields"
REQUEST_BODY_REF = "4.6.13.1 Fixed Fields"
PAYLOAD_REPLACEMENT_REF = "4.6.14.1 Fixed Fields"

REFERENCE_KEY = "reference"


class DocumentLoader:
    """
    Decodes Arazzo entities from one source format.

    Every method accepts a raw node and returns the typed entity, or raises
    a `LoadError` subclass. `where` names the node in error messages.
    """

    def __init__(self, fmt: DocumentFormat, context: LoaderContext | None = None) -> None:
        self.fmt = fmt
        self.context = context or LoaderContext()

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------
    def description(self, node: Any) -> ArazzoDescription:
        fields = self._object(node, "document")
        arazzo = self._require_string(fields, "arazzo", DESCRIPTION_REF)
        info = self.info(self._require_field(fields, "info", DESCRIPTION_REF))
        source_descriptions = [
            self.source_description(item, where=f"sourceDescriptions[{index}]")
            for index, item in enumerate(
                self._require_list(fields, "sourceDescriptions", DESCRIPTION_REF)
            )
        ]
        workflows = [
            self.workflow(item, where=f"workflows[{index}]")
            for index, item in enumerate(self._require_list(fields, "workflows", DESCRIPTION_REF))
        ]
        components_node = fields.get("components")
        if components_node is None or self.fmt.is_null(components_node):
            components = Components()
        else:
            components = self.components(components_node)

        description = ArazzoDescription(
            arazzo=arazzo,
            info=info,
            source_descriptions=source_descriptions,
            workflows=workflows,
            components=components,
            extensions=extract_extensions(self.fmt, fields),
        )
        logger.debug(
            "Loaded Arazzo %s description '%s' from %s tree (%d workflows)",
            arazzo,
            info.title,
            self.fmt.name,
            len(workflows),
        )
        return description

    def info(self, node: Any, where: str = "info") -> Info:
        fields = self._object(node, where)
        return Info(
            title=self._require_string(fields, "title", INFO_REF),
            summary=self._lookup_string(fields, "summary"),
            description=self._lookup_string(fields, "description"),
            version=self._require_string(fields, "version", INFO_REF),
            extensions=extract_extensions(self.fmt, fields),
        )

    def source_description(self, node: Any, where: str = "sourceDescription") -> SourceDescription:
        fields = self._object(node, where)
        return SourceDescription(
            name=self._require_string(fields, "name", SOURCE_DESCRIPTION_REF),
            url=self._require_string(fields, "url", SOURCE_DESCRIPTION_REF),
            type=self._lookup_string(fields, "type"),
            extensions=extract_extensions(self.fmt, fields),
        )

    # ------------------------------------------------------------------
    # Workflows and steps
    # ------------------------------------------------------------------
    def workflow(self, node: Any, where: str = "workflow") -> Workflow:
        fields = self._object(node, where)
        workflow_id = self._require_string(fields, "workflowId", WORKFLOW_REF)
        inputs_node = fields.get("inputs")
        return Workflow(
            workflow_id=workflow_id,
            summary=self._lookup_string(fields, "summary"),
            description=self._lookup_string(fields, "description"),
            inputs=None if inputs_node is None else self.fmt.to_json(inputs_node),
            depends_on=self._string_list(fields, "dependsOn"),
            steps=[
                self.step(item, where=f"{workflow_id}.steps[{index}]")
                for index, item in enumerate(self._require_list(fields, "steps", WORKFLOW_REF))
            ],
            success_actions=self._reference_list(fields, "successActions", self.success_action),
            failure_actions=self._reference_list(fields, "failureActions", self.failure_action),
            outputs=self._outputs(fields),
            parameters=self._reference_list(fields, "parameters", self.parameter),
            extensions=extract_extensions(self.fmt, fields),
        )

    def step(self, node: Any, where: str = "step") -> Step:
        fields = self._object(node, where)
        request_body_node = fields.get("requestBody")
        if request_body_node is None or self.fmt.is_null(request_body_node):
            request_body = None
        else:
            request_body = self.request_body(request_body_node)
        return Step(
            step_id=self._require_string(fields, "stepId", STEP_REF),
            operation_id=self._lookup_string(fields, "operationId"),
            operation_path=self._lookup_string(fields, "operationPath"),
            workflow_id=self._lookup_string(fields, "workflowId"),
            description=self._lookup_string(fields, "description"),
            parameters=self._reference_list(fields, "parameters", self.parameter),
            request_body=request_body,
            success_criteria=self._criteria(fields, "successCriteria"),
            on_success=self._reference_list(fields, "onSuccess", self.success_action),
            on_failure=self._reference_list(fields, "onFailure", self.failure_action),
            outputs=self._outputs(fields),
            extensions=extract_extensions(self.fmt, fields),
        )

    # ------------------------------------------------------------------
    # Parameters, actions, criteria
    # ------------------------------------------------------------------
    def parameter(self, node: Any, where: str = "parameter") -> ParameterObject:
        fields = self._object(node, where)
        return ParameterObject(
            name=self._require_string(fields, "name", PARAMETER_REF),
            in_=self._lookup_string(fields, "in"),
            value=self._value_or_expression(fields, "value", PARAMETER_REF),
            extensions=extract_extensions(self.fmt, fields),
        )

    def success_action(self, node: Any, where: str = "successAction") -> SuccessObject:
        fields = self._object(node, where)
        return SuccessObject(
            name=self._require_string(fields, "name", SUCCESS_ACTION_REF),
            type=self._require_string(fields, "type", SUCCESS_ACTION_REF),
            workflow_id=self._lookup_string(fields, "workflowId"),
            step_id=self._lookup_string(fields, "stepId"),
            criteria=self._criteria(fields, "criteria"),
            extensions=extract_extensions(self.fmt, fields),
        )

    def failure_action(self, node: Any, where: str = "failureAction") -> FailureObject:
        fields = self._object(node, where)
        retry_after = fields.get("retryAfter")
        retry_limit = fields.get("retryLimit")
        return FailureObject(
            name=self._require_string(fields, "name", FAILURE_ACTION_REF),
            type=self._require_string(fields, "type", FAILURE_ACTION_REF),
            workflow_id=self._lookup_string(fields, "workflowId"),
            step_id=self._lookup_string(fields, "stepId"),
            retry_after=None if retry_after is None else self.fmt.as_number(retry_after),
            retry_limit=None if retry_limit is None else self.fmt.as_integer(retry_limit),
            criteria=self._criteria(fields, "criteria"),
            extensions=extract_extensions(self.fmt, fields),
        )

    def reusable(self, node: Any, where: str = "reusable") -> ReusableObject:
        fields = self._object(node, where)
        return ReusableObject(
            reference=self._require_string(fields, REFERENCE_KEY, REUSABLE_REF),
            value=self._lookup_string(fields, "value"),
        )

    def criterion(self, node: Any, where: str = "criterion") -> Criterion:
        fields = self._object(node, where)
        return Criterion(
            context=self._lookup_string(fields, "context"),
            condition=self._require_string(fields, "condition", CRITERION_REF),
            type=self._criterion_type(fields),
            extensions=extract_extensions(self.fmt, fields),
        )

    def criterion_expression_type(
        self, node: Any, where: str = "type"
    ) -> CriterionExpressionType:
        fields = self._object(node, where)
        return CriterionExpressionType(
            type=self._require_string(fields, "type", CRITERION_TYPE_REF),
            version=self._require_string(fields, "version", CRITERION_TYPE_REF),
            extensions=extract_extensions(self.fmt, fields),
        )

    # ------------------------------------------------------------------
    # Request bodies
    # ------------------------------------------------------------------
    def request_body(self, node: Any, where: str = "requestBody") -> RequestBody:
        fields = self._object(node, where)
        return RequestBody(
            content_type=self._lookup_string(fields, "contentType"),
            payload=self._payload(fields),
            replacements=[
                self.payload_replacement(item, where=f"replacements[{index}]")
                for index, item in enumerate(self._lookup_list(fields, "replacements"))
            ],
            extensions=extract_extensions(self.fmt, fields),
        )

    def payload_replacement(self, node: Any, where: str = "replacement") -> PayloadReplacement:
        fields = self._object(node, where)
        return PayloadReplacement(
            target=self._require_string(fields, "target", PAYLOAD_REPLACEMENT_REF),
            value=self._value_or_expression(fields, "value", PAYLOAD_REPLACEMENT_REF),
            extensions=extract_extensions(self.fmt, fields),
        )

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------
    def components(self, node: Any, where: str = "components") -> Components:
        fields = self._object(node, where)
        return Components(
            inputs={
                name: self.fmt.to_json(value)
                for name, value in self._lookup_mapping(fields, "inputs").items()
            },
            parameters={
                name: self.parameter(value, where=f"components.parameters.{name}")
                for name, value in self._lookup_mapping(fields, "parameters").items()
            },
            success_actions={
                name: self.success_action(value, where=f"components.successActions.{name}")
                for name, value in self._lookup_mapping(fields, "successActions").items()
            },
            failure_actions={
                name: self.failure_action(value, where=f"components.failureActions.{name}")
                for name, value in self._lookup_mapping(fields, "failureActions").items()
            },
            extensions=extract_extensions(self.fmt, fields),
        )

    # ------------------------------------------------------------------
    # Field helpers
    # ------------------------------------------------------------------
    def _object(self, node: Any, where: str) -> Dict[str, Any]:
        fields = self.fmt.as_mapping(node)
        if fields is None:
            raise WrongType(where, "Object", self.fmt.type_name(node))
        return fields

    def _require_field(self, fields: Dict[str, Any], key: str, spec_ref: str) -> Any:
        if key not in fields:
            raise MissingRequiredField(key, spec_ref)
        return fields[key]

    def _require_string(self, fields: Dict[str, Any], key: str, spec_ref: str) -> str:
        node = self._require_field(fields, key, spec_ref)
        value = self.fmt.as_str(node)
        if value is None:
            raise WrongType(key, "String", self.fmt.type_name(node))
        return value

    def _lookup_string(self, fields: Dict[str, Any], key: str) -> Optional[str]:
        if key not in fields:
            return None
        return self.fmt.scalar_text(fields[key])

    def _require_list(self, fields: Dict[str, Any], key: str, spec_ref: str) -> List[Any]:
        node = fields.get(key)
        if node is None or self.fmt.is_null(node):
            raise EmptyRequiredList(key, spec_ref)
        items = self.fmt.as_list(node)
        if items is None:
            raise WrongType(key, "Array", self.fmt.type_name(node))
        if not items:
            raise EmptyRequiredList(key, spec_ref)
        return items

    def _lookup_list(self, fields: Dict[str, Any], key: str) -> List[Any]:
        if key not in fields:
            return []
        return self.fmt.as_list(fields[key]) or []

    def _lookup_mapping(self, fields: Dict[str, Any], key: str) -> Dict[str, Any]:
        if key not in fields:
            return {}
        return self.fmt.as_mapping(fields[key]) or {}

    def _string_list(self, fields: Dict[str, Any], key: str) -> List[str]:
        values: List[str] = []
        for item in self._lookup_list(fields, key):
            text = self.fmt.scalar_text(item)
            if text is not None:
                values.append(text)
        return values

    def _outputs(self, fields: Dict[str, Any]) -> Dict[str, str]:
        outputs: Dict[str, str] = {}
        for name, node in self._lookup_mapping(fields, "outputs").items():
            value = self.fmt.as_str(node)
            if value is None:
                logger.debug(
                    "Dropping output '%s': expected String, got %s",
                    name,
                    self.fmt.type_name(node),
                )
                continue
            outputs[name] = value
        return outputs

    def _criteria(self, fields: Dict[str, Any], key: str) -> List[Criterion]:
        return [
            self.criterion(item, where=f"{key}[{index}]")
            for index, item in enumerate(self._lookup_list(fields, key))
        ]

    def _criterion_type(
        self, fields: Dict[str, Any]
    ) -> Optional[Either[str, CriterionExpressionType]]:
        node = fields.get("type")
        if node is None or self.fmt.is_null(node):
            return None
        name = self.fmt.as_str(node)
        if name is not None:
            return First(name)
        return Second(self.criterion_expression_type(node))

    def _value_or_expression(
        self, fields: Dict[str, Any], key: str, spec_ref: str
    ) -> Either[AnyValue, str]:
        node = self._require_field(fields, key, spec_ref)
        text = self.fmt.as_str(node)
        if text is not None:
            return classify_string(text)
        return First(self.fmt.to_any_value(node))

    def _payload(self, fields: Dict[str, Any]) -> Optional[Payload]:
        if "payload" not in fields:
            return None
        node = fields["payload"]
        if self.fmt.is_null(node):
            return EmptyPayload()
        text = self.fmt.as_str(node)
        if text is not None:
            return StringPayload(text)
        return JsonPayload(self.fmt.to_json(node))

    def _reference_list(
        self,
        fields: Dict[str, Any],
        key: str,
        decode: Callable[..., T],
    ) -> List[Either[T, ReusableObject]]:
        """
        Entries holding a `reference` key are reusable references, other
        objects are decoded with `decode`. Entries that are not objects are
        dropped unless the loader runs in strict mode.
        """

        entries: List[Either[T, ReusableObject]] = []
        for index, item in enumerate(self._lookup_list(fields, key)):
            where = f"{key}[{index}]"
            entry = self.fmt.as_mapping(item)
            if entry is None:
                if self.context.strict_list_entries:
                    raise WrongType(where, "Object", self.fmt.type_name(item))
                logger.debug(
                    "Dropping %s entry: expected Object, got %s",
                    where,
                    self.fmt.type_name(item),
                )
                continue
            if REFERENCE_KEY in entry:
                entries.append(Second(self.reusable(item, where=where)))
            else:
                entries.append(First(decode(item, where=where)))
        return entries


__all__ = [
    "DocumentLoader",
    "REFERENCE_KEY",
]
