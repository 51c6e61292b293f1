"""
Typed Arazzo 1.0.x model.
"""

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

__all__ = [
    "ArazzoDescription",
    "Components",
    "Criterion",
    "CriterionExpressionType",
    "FailureObject",
    "Info",
    "ParameterObject",
    "PayloadReplacement",
    "RequestBody",
    "ReusableObject",
    "SourceDescription",
    "Step",
    "SuccessObject",
    "Workflow",
]
