"""Tests for the canonical decision table models."""

import pytest
from pydantic import ValidationError

from dmn_converter.models import (
    DecisionRule,
    DecisionTable,
    LiteralExpression,
    OutputClause,
    RuleOutputEntry,
    get_definition_json_schema,
)


def _outputs():
    return [
        OutputClause(id="outputExpression_a", source_id="a"),
        OutputClause(id="outputExpression_b", source_id="b"),
    ]


def _entry(index: int, clause_id: str) -> RuleOutputEntry:
    return RuleOutputEntry(
        output_clause=index,
        clause_id=clause_id,
        output_entry=LiteralExpression(id=f"outputEntry_{index}", text="1"),
    )


def test_aligned_rule_accepted():
    rule = DecisionRule(id="rule_1", output_entries=[_entry(0, "outputExpression_a"), _entry(1, "outputExpression_b")])
    table = DecisionTable(id="decisionTable_1", outputs=_outputs(), rules=[rule])
    assert table.output_clause_of(rule.output_entries[1]) is table.outputs[1]


def test_missing_entry_rejected():
    rule = DecisionRule(id="rule_1", output_entries=[_entry(0, "outputExpression_a")])
    with pytest.raises(ValidationError):
        DecisionTable(id="decisionTable_1", outputs=_outputs(), rules=[rule])


def test_misordered_entries_rejected():
    rule = DecisionRule(id="rule_1", output_entries=[_entry(1, "outputExpression_b"), _entry(0, "outputExpression_a")])
    with pytest.raises(ValidationError):
        DecisionTable(id="decisionTable_1", outputs=_outputs(), rules=[rule])


def test_json_schema():
    schema = get_definition_json_schema()
    assert schema["title"] == "Decision Table Definition"
    assert "decisions" in schema["properties"]
    assert "DecisionTable" in schema["$defs"]


def test_sequences_cannot_be_changed_in_place():
    rule = DecisionRule(id="rule_1", output_entries=[_entry(0, "outputExpression_a"), _entry(1, "outputExpression_b")])
    table = DecisionTable(id="decisionTable_1", outputs=_outputs(), rules=[rule])
    assert isinstance(table.rules, tuple)
    with pytest.raises(AttributeError):
        table.rules.append(rule)
    with pytest.raises(TypeError):
        table.outputs[0] = table.outputs[1]
    assert len(table.rules) == 1
