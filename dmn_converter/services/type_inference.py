"""
Type inference for clauses the editor left untyped.

A column's type is guessed from the shape of its rule values: date-construction
calls, true/false, numbers and quoted strings. Columns with no usable samples,
unrecognized values or disagreeing values fall back to string.
"""

import logging
import re
from typing import Iterable, Optional

from dmn_converter.config import DEFAULTS, WILDCARD
from dmn_converter.models.dmn import ClauseType, DecisionRule, InputClause, OutputClause

logger = logging.getLogger(__name__)

# Longest first so "<=" is not read as "<"
RELATIONAL_OPERATORS = ("!=", "<=", ">=", "==", "<", ">")

DATE_CALL_RE = re.compile(r"^[A-Za-z_][\w.:]*\(\s*(['\"])\d{4}-\d{2}-\d{2}\1\s*\)$")
NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")
BOOLEAN_LITERALS = ("true", "false")


def strip_operator(text: str) -> str:
    """Remove one leading relational operator and the whitespace after it."""
    text = text.strip()
    for op in RELATIONAL_OPERATORS:
        if text.startswith(op):
            return text[len(op):].strip()
    return text


def classify_literal(text: str) -> Optional[ClauseType]:
    """Type suggested by a single literal, or None if it gives no clear answer."""
    text = text.strip()
    if DATE_CALL_RE.match(text):
        return ClauseType.DATE
    if text in BOOLEAN_LITERALS:
        return ClauseType.BOOLEAN
    if NUMBER_RE.match(text):
        return ClauseType.NUMBER
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return ClauseType.STRING
    return None


def infer_type(samples: Iterable[str]) -> str:
    """Agreed type of all non-empty, non-wildcard samples; string otherwise."""
    default = DEFAULTS["type_ref"]
    found: set[Optional[ClauseType]] = set()
    for sample in samples:
        sample = sample.strip()
        if not sample or sample == WILDCARD:
            continue
        found.add(classify_literal(sample))
    if len(found) != 1:
        return default
    (kind,) = found
    return kind.value if kind is not None else default


def infer_clause_types(
    inputs: list[InputClause],
    outputs: list[OutputClause],
    rules: list[DecisionRule],
    enabled: bool = True,
) -> tuple[list[InputClause], list[OutputClause]]:
    """
    Fill in missing type references. Clauses with a declared type are returned unchanged.

    Rules must already be correlated: entry i of every rule belongs to clause i.
    """
    default = DEFAULTS["type_ref"]
    typed_inputs: list[InputClause] = []
    for i, clause in enumerate(inputs):
        if clause.type_ref:
            typed_inputs.append(clause)
            continue
        if enabled:
            type_ref = infer_type(strip_operator(rule.input_entries[i].input_entry.text) for rule in rules)
        else:
            type_ref = default
        logger.debug("Input clause %s: type %s", clause.id, type_ref)
        typed_inputs.append(clause.with_type(type_ref))

    typed_outputs: list[OutputClause] = []
    for i, clause in enumerate(outputs):
        if clause.type_ref:
            typed_outputs.append(clause)
            continue
        if enabled:
            type_ref = infer_type(rule.output_entries[i].output_entry.text for rule in rules)
        else:
            type_ref = default
        logger.debug("Output clause %s: type %s", clause.id, type_ref)
        typed_outputs.append(clause.with_type(type_ref))

    return typed_inputs, typed_outputs
