"""
Clause builder: editor condition/conclusion definitions -> ordered input and output clauses.

Declaration order in the JSON is the canonical column order for everything downstream.
Source ids are shared by both kinds of clause, since rules key their cells by them.
"""

import logging
from typing import Optional

from dmn_converter.errors import InvalidModelError
from dmn_converter.models.dmn import InputClause, LiteralExpression, OutputClause, ValueList
from dmn_converter.services.node_accessor import EditorNode
from dmn_converter.services.value_lists import parse_value_list, value_list_from_entries

logger = logging.getLogger(__name__)

INPUT_EXPRESSIONS = "inputExpressions"
OUTPUT_EXPRESSIONS = "outputExpressions"


def _declared_ids(root: EditorNode) -> set[str]:
    """Ids the editor declared explicitly, on inputs and outputs alike."""
    ids: set[str] = set()
    for field in (INPUT_EXPRESSIONS, OUTPUT_EXPRESSIONS):
        for node in root.iter_array(field):
            source_id = node.text("id").strip()
            if source_id:
                ids.add(source_id)
    return ids


def _source_ids(root: EditorNode, field: str, kind: str) -> list[str]:
    """
    Source id per clause in declaration order.

    Missing ids become '<kind>_<position>', suffixed with '_2', '_3', ... while
    that name is already declared or synthesized.
    """
    taken = _declared_ids(root)
    ids: list[str] = []
    for position, node in enumerate(root.iter_array(field), start=1):
        source_id = node.text("id").strip()
        if not source_id:
            base = f"{kind}_{position}"
            source_id, suffix = base, 2
            while source_id in taken:
                source_id = f"{base}_{suffix}"
                suffix += 1
            taken.add(source_id)
            logger.debug("Clause %s has no id, using %s", position, source_id)
        ids.append(source_id)
    return ids
def _declared_type(node: EditorNode) -> Optional[str]:
    type_ref = node.text("type").strip()
    return type_ref or None


def _value_list(node: EditorNode) -> Optional[ValueList]:
    items = node.array("entries")
    if items is not None:
        return value_list_from_entries(item.as_text() for item in items)
    return parse_value_list(node.optional_text("entries"))


def _check_unique(source_ids: list[str], kind: str) -> None:
    seen: set[str] = set()
    for sid in source_ids:
        if sid in seen:
            raise InvalidModelError(f"Duplicate {kind} clause id '{sid}'")
        seen.add(sid)


def build_input_clauses(root: EditorNode) -> list[InputClause]:
    """Input clauses in declaration order."""
    clauses: list[InputClause] = []
    source_ids = _source_ids(root, INPUT_EXPRESSIONS, "input")
    for node, source_id in zip(root.iter_array(INPUT_EXPRESSIONS), source_ids):
        label = node.text("label")
        clauses.append(
            InputClause(
                id=f"inputClause_{source_id}",
                source_id=source_id,
                label=label,
                input_expression=LiteralExpression(
                    id=f"inputExpression_{source_id}",
                    label=label,
                    text=node.text("variableId"),
                    type_ref=_declared_type(node),
                ),
                input_values=_value_list(node),
            )
        )
    _check_unique([c.source_id for c in clauses], "input")
    return clauses


def build_output_clauses(root: EditorNode) -> list[OutputClause]:
    """Output clauses in declaration order."""
    clauses: list[OutputClause] = []
    source_ids = _source_ids(root, OUTPUT_EXPRESSIONS, "output")
    for node, source_id in zip(root.iter_array(OUTPUT_EXPRESSIONS), source_ids):
        clauses.append(
            OutputClause(
                id=f"outputExpression_{source_id}",
                source_id=source_id,
                label=node.text("label"),
                name=node.text("variableId"),
                type_ref=_declared_type(node),
                output_values=_value_list(node),
                complex_expression=node.boolean("complexExpression"),
            )
        )
    _check_unique([c.source_id for c in clauses], "output")
    return clauses


def build_clauses(root: EditorNode) -> tuple[list[InputClause], list[OutputClause]]:
    """Input and output clauses; a source id may belong to only one clause of either kind."""
    inputs = build_input_clauses(root)
    outputs = build_output_clauses(root)
    input_ids = {c.source_id for c in inputs}
    for clause in outputs:
        if clause.source_id in input_ids:
            raise InvalidModelError(f"Clause id '{clause.source_id}' is declared by both an input and an output")
    return inputs, outputs
