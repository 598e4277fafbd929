"""Unit tests for clause type inference."""

import pytest

from dmn_converter.models import ClauseType, InputClause, LiteralExpression, OutputClause
from dmn_converter.services.rule_correlator import correlate_rule
from dmn_converter.services.node_accessor import EditorNode
from dmn_converter.services.type_inference import (
    classify_literal,
    infer_clause_types,
    infer_type,
    strip_operator,
)


@pytest.mark.parametrize(
    "samples, expected",
    [
        (['"TEST"', '!= "TEST"'], "string"),
        (["100", "!= 100"], "number"),
        (["true", "false"], "boolean"),
        (["fn_date('2017-06-01')", "!= fn_date('2017-06-01')"], "date"),
        (["-1.5", ">= 2"], "number"),
        (["100", '"100"'], "string"),
        (["a + b"], "string"),
        (["-", ""], "string"),
        ([], "string"),
    ],
)
def test_infer_type_from_input_column(samples, expected):
    assert infer_type(strip_operator(s) for s in samples) == expected


def test_wildcards_do_not_force_fallback():
    assert infer_type(["-", "42", "", "7"]) == "number"


def test_strip_operator():
    assert strip_operator("<= 10") == "10"
    assert strip_operator("!=fn_date('2017-06-01')") == "fn_date('2017-06-01')"
    assert strip_operator("  42 ") == "42"
    assert strip_operator("-") == "-"


def test_classify_literal():
    assert classify_literal("date:toDate('2020-01-31')") == ClauseType.DATE
    assert classify_literal('fn_date("2020-01-31")') == ClauseType.DATE
    assert classify_literal("fn_date('tomorrow')") is None
    assert classify_literal("True") is None
    assert classify_literal("1.") is None
    assert classify_literal('"x"') == ClauseType.STRING


def test_infer_clause_types_fills_only_missing():
    inputs = [
        InputClause(
            id="inputClause_a",
            source_id="a",
            input_expression=LiteralExpression(id="inputExpression_a", text="a"),
        ),
        InputClause(
            id="inputClause_b",
            source_id="b",
            input_expression=LiteralExpression(id="inputExpression_b", text="b", type_ref="string"),
        ),
    ]
    outputs = [OutputClause(id="outputExpression_c", source_id="c", name="c")]
    rules = [
        correlate_rule(EditorNode({"a": "< 3", "b": "5", "c": "true"}), 1, inputs, outputs),
        correlate_rule(EditorNode({"a": "> 1", "c": "false"}), 2, inputs, outputs),
    ]

    typed_inputs, typed_outputs = infer_clause_types(inputs, outputs, rules)

    assert [c.type_ref for c in typed_inputs] == ["number", "string"]
    assert typed_outputs[0].type_ref == "boolean"
    assert typed_inputs[1] is inputs[1]
    # originals untouched
    assert inputs[0].type_ref is None


def test_infer_clause_types_disabled():
    outputs = [OutputClause(id="outputExpression_c", source_id="c")]
    rules = [correlate_rule(EditorNode({"c": "1"}), 1, [], outputs)]
    _, typed_outputs = infer_clause_types([], outputs, rules, enabled=False)
    assert typed_outputs[0].type_ref == "string"
