"""
Rule entry correlator: editor rule objects -> DecisionRules aligned to the declared clauses.

Rule values are keyed by clause id and may come in any key order or be missing.
Entries are produced by walking the declared clauses and looking each one up
by id, never by the position of keys in the rule object.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from dmn_converter.config import WILDCARD, UnknownKeyPolicy
from dmn_converter.errors import UnknownClauseReferenceError
from dmn_converter.models.dmn import (
    DecisionRule,
    InputClause,
    LiteralExpression,
    OutputClause,
    RuleInputEntry,
    RuleOutputEntry,
    UnaryTests,
)
from dmn_converter.services.node_accessor import EditorNode

logger = logging.getLogger(__name__)

OPERATOR_SUFFIX = "_operator"
EXPRESSION_SUFFIX = "_expression"


class ConversionIssue(BaseModel):
    """A recoverable problem found while converting (reported, not raised)."""

    code: str = Field(..., description="Issue code (e.g. unknown_clause_key, invalid_rule)")
    message: str = Field(..., description="Human-readable message")
    rule_index: Optional[int] = Field(None, description="1-based rule position if applicable")
    key: Optional[str] = Field(None, description="Offending JSON key if applicable")


def _input_text(rule: EditorNode, source_id: str) -> str:
    text = rule.optional_text(source_id)
    if text is not None:
        return text
    # Split cell: "<id>_operator" + "<id>_expression"
    operator = (rule.optional_text(source_id + OPERATOR_SUFFIX) or "").strip()
    expression = rule.optional_text(source_id + EXPRESSION_SUFFIX)
    if expression is None or expression == WILDCARD:
        return WILDCARD
    if not operator or operator == "==":
        return expression
    return f"{operator} {expression}"


def _output_text(rule: EditorNode, source_id: str) -> str:
    text = rule.optional_text(source_id)
    return WILDCARD if text is None else text


def _known_keys(inputs: list[InputClause], outputs: list[OutputClause]) -> set[str]:
    keys: set[str] = set()
    for clause in inputs:
        keys.update((clause.source_id, clause.source_id + OPERATOR_SUFFIX, clause.source_id + EXPRESSION_SUFFIX))
    keys.update(clause.source_id for clause in outputs)
    return keys


def _report_unknown_keys(
    rule: EditorNode,
    rule_index: int,
    known: set[str],
    policy: UnknownKeyPolicy,
    issues: list[ConversionIssue],
) -> None:
    for key in rule.keys():
        if key in known:
            continue
        if policy == UnknownKeyPolicy.ERROR:
            raise UnknownClauseReferenceError(key, rule_index)
        if policy == UnknownKeyPolicy.IGNORE:
            logger.debug("Rule %s: dropping value for unknown clause '%s'", rule_index, key)
            continue
        message = f"Rule {rule_index} references unknown clause '{key}'; value dropped"
        logger.warning(message)
        issues.append(ConversionIssue(code="unknown_clause_key", message=message, rule_index=rule_index, key=key))


def correlate_rule(
    rule: EditorNode,
    rule_index: int,
    inputs: list[InputClause],
    outputs: list[OutputClause],
) -> DecisionRule:
    """Build one DecisionRule with exactly one entry per declared clause, in clause order."""
    input_entries = [
        RuleInputEntry(
            input_clause=i,
            clause_id=clause.id,
            input_entry=UnaryTests(
                id=f"inputEntry_{clause.source_id}_{rule_index}",
                text=_input_text(rule, clause.source_id),
                input_values=clause.input_values,
            ),
        )
        for i, clause in enumerate(inputs)
    ]
    output_entries = [
        RuleOutputEntry(
            output_clause=i,
            clause_id=clause.id,
            output_entry=LiteralExpression(
                id=f"outputEntry_{clause.source_id}_{rule_index}",
                text=_output_text(rule, clause.source_id),
            ),
        )
        for i, clause in enumerate(outputs)
    ]
    return DecisionRule(id=f"rule_{rule_index}", input_entries=input_entries, output_entries=output_entries)


def correlate_rules(
    rule_nodes: list[EditorNode],
    inputs: list[InputClause],
    outputs: list[OutputClause],
    policy: UnknownKeyPolicy = UnknownKeyPolicy.WARN,
) -> tuple[list[DecisionRule], list[ConversionIssue]]:
    """
    Correlate all rules against the declared clauses.

    Returns the rules (in source order) and the issues found. Rule items that
    are not JSON objects are skipped and reported.
    """
    known = _known_keys(inputs, outputs)
    rules: list[DecisionRule] = []
    issues: list[ConversionIssue] = []
    for rule_index, rule in enumerate(rule_nodes, start=1):
        if not rule.is_object():
            message = f"Rule {rule_index} is not an object; skipped"
            logger.warning(message)
            issues.append(ConversionIssue(code="invalid_rule", message=message, rule_index=rule_index))
            continue
        _report_unknown_keys(rule, rule_index, known, policy, issues)
        rules.append(correlate_rule(rule, rule_index, inputs, outputs))
    return rules, issues
