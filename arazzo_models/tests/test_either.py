from __future__ import annotations

from arazzo_models.either import First, Second, classify_string
from arazzo_models.loader.decode import DocumentLoader
from arazzo_models.loader.formats import JSON_FORMAT, YAML_FORMAT
from arazzo_models.loader.yaml_tree import compose_yaml
from arazzo_models.values import IntegerValue, ObjectValue, StringValue, UIntegerValue


def _json_parameter_value(value):
    return DocumentLoader(JSON_FORMAT).parameter({"name": "p", "value": value}).value


def test_dollar_prefixed_strings_are_expressions() -> None:
    assert classify_string("$inputs.username") == Second("$inputs.username")
    assert classify_string("$") == Second("$")


def test_other_strings_are_literals() -> None:
    assert classify_string("available") == First(StringValue("available"))
    assert classify_string("") == First(StringValue(""))
    assert classify_string(" $not-leading") == First(StringValue(" $not-leading"))


def test_accessors_return_the_populated_branch() -> None:
    literal = First(StringValue("x"))
    expression = Second("$steps.a.outputs.b")

    assert literal.is_first() and not literal.is_second()
    assert literal.first() == StringValue("x")
    assert literal.second() is None

    assert expression.is_second() and not expression.is_first()
    assert expression.second() == "$steps.a.outputs.b"
    assert expression.first() is None


def test_branches_never_compare_equal() -> None:
    assert First("$x") != Second("$x")


def test_parameter_value_disambiguation_json() -> None:
    assert _json_parameter_value("$inputs.username") == Second("$inputs.username")
    assert _json_parameter_value("available") == First(StringValue("available"))
    assert _json_parameter_value(5) == First(UIntegerValue(5))
    assert _json_parameter_value({"page": 1}) == First(ObjectValue({"page": UIntegerValue(1)}))


def test_parameter_value_disambiguation_yaml() -> None:
    node = compose_yaml("name: p\nin: query\nvalue: 5\n")
    parameter = DocumentLoader(YAML_FORMAT).parameter(node)

    assert parameter.in_ == "query"
    assert parameter.value == First(IntegerValue(5))

    node = compose_yaml("name: p\nvalue: $response.body\n")
    assert DocumentLoader(YAML_FORMAT).parameter(node).value == Second("$response.body")
