"""
Core converter service: editor decision table JSON -> Definition.

Assembles the Definition from the clause builder, rule correlator and type
inference, applying the DEFAULTS table for anything the editor left out.
The conversion is a pure function of its arguments.
"""

import logging
import time
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, Field

from dmn_converter.config import DEFAULTS, ConverterOptions
from dmn_converter.errors import UnsupportedModelError
from dmn_converter.models.dmn import (
    BuiltinAggregator,
    Decision,
    DecisionTable,
    DecisionTableOrientation,
    Definition,
    HitPolicy,
)
from dmn_converter.services.clause_builder import (
    INPUT_EXPRESSIONS,
    OUTPUT_EXPRESSIONS,
    build_clauses,
)
from dmn_converter.services.node_accessor import EditorNode
from dmn_converter.services.rule_correlator import ConversionIssue, correlate_rules
from dmn_converter.services.type_inference import infer_clause_types
from dmn_converter.utils.logging import log_conversion_result, log_conversion_step

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# -----------------------------------------------------------------------------
# ConversionResult
# -----------------------------------------------------------------------------


class ConversionResult(BaseModel):
    """Converted definition plus the recoverable issues met on the way."""

    definition: Definition
    issues: tuple[ConversionIssue, ...] = ()

    model_config = {"frozen": True}


# -----------------------------------------------------------------------------
# Enumerated metadata
# -----------------------------------------------------------------------------


def _normalize(value: str) -> str:
    return "".join(ch for ch in value.upper() if ch.isalnum())


def _lookup_enum(enum_type: Type[E], raw: Optional[str]) -> Optional[E]:
    """Match raw text against enum values, ignoring case, spaces, '-' and '_'."""
    if raw is None or not raw.strip():
        return None
    wanted = _normalize(raw)
    for member in enum_type:
        if _normalize(member.value) == wanted or _normalize(member.name) == wanted:
            return member
    return None


def _read_enum(
    root: EditorNode,
    field: str,
    enum_type: Type[E],
    default: Optional[E],
    issues: list[ConversionIssue],
) -> Optional[E]:
    raw = root.optional_text(field)
    member = _lookup_enum(enum_type, raw)
    if member is not None:
        return member
    if raw is not None and raw.strip():
        message = f"Unrecognized {field} '{raw}', using {default.value if default else 'none'}"
        logger.warning(message)
        issues.append(ConversionIssue(code=f"unknown_{field}", message=message, key=field))
    return default


# -----------------------------------------------------------------------------
# Structure checks
# -----------------------------------------------------------------------------


def _check_structure(root: EditorNode) -> None:
    if not root.is_object():
        raise UnsupportedModelError("Editor model must be a JSON object")
    if root.array(INPUT_EXPRESSIONS) is None and root.array(OUTPUT_EXPRESSIONS) is None:
        raise UnsupportedModelError(
            f"No condition or conclusion definitions found ('{INPUT_EXPRESSIONS}'/'{OUTPUT_EXPRESSIONS}')"
        )
    if not root.has("id") and not root.has("key"):
        raise UnsupportedModelError("No decision table metadata found ('id'/'key')")


# -----------------------------------------------------------------------------
# Core convert
# -----------------------------------------------------------------------------


def convert_to_dmn_with_issues(
    model_node: Union[EditorNode, Mapping[str, Any]],
    model_key: str,
    model_version: int = 1,
    last_updated: Optional[datetime] = None,
    options: Optional[ConverterOptions] = None,
) -> ConversionResult:
    """
    Full workflow:
    1. Check the JSON is a decision table model
    2. Build input/output clauses in declaration order
    3. Correlate every rule to the declared clauses
    4. Infer missing clause types from the correlated columns
    5. Assemble table, decision and definition
    """
    options = options or ConverterOptions()
    root = model_node if isinstance(model_node, EditorNode) else EditorNode(model_node)
    started = time.perf_counter()

    try:
        _check_structure(root)
    except UnsupportedModelError as e:
        log_conversion_step(logger, "check_structure", model_key, success=False, error=str(e))
        raise

    t0 = time.perf_counter()
    inputs, outputs = build_clauses(root)
    log_conversion_step(
        logger,
        "build_clauses",
        model_key,
        duration_sec=time.perf_counter() - t0,
        extra={"inputs": len(inputs), "outputs": len(outputs)},
    )

    t0 = time.perf_counter()
    rule_nodes = root.array("rules") or []
    rules, issues = correlate_rules(rule_nodes, inputs, outputs, policy=options.unknown_key_policy)
    log_conversion_step(
        logger,
        "correlate_rules",
        model_key,
        duration_sec=time.perf_counter() - t0,
        extra={"rules": len(rules), "issues": len(issues)},
    )

    t0 = time.perf_counter()
    inputs, outputs = infer_clause_types(inputs, outputs, rules, enabled=options.infer_types)
    log_conversion_step(logger, "infer_types", model_key, duration_sec=time.perf_counter() - t0)

    hit_policy = _read_enum(root, "hitIndicator", HitPolicy, DEFAULTS["hit_policy"], issues)
    aggregation = _read_enum(root, "collectOperator", BuiltinAggregator, DEFAULTS["aggregation"], issues)
    orientation = _read_enum(
        root, "preferredOrientation", DecisionTableOrientation, DEFAULTS["preferred_orientation"], issues
    )

    decision_id = root.text("key").strip() or f"decision_{model_key}"
    table_id = root.text("id").strip() or decision_id
    decision_table = DecisionTable(
        id=f"decisionTable_{table_id}",
        hit_policy=hit_policy,
        aggregation=aggregation,
        preferred_orientation=orientation,
        inputs=inputs,
        outputs=outputs,
        rules=rules,
    )
    name = root.text("name")
    decision = Decision(
        id=decision_id,
        name=name,
        description=root.optional_text("description"),
        expression=decision_table,
    )
    definition = Definition(
        id=f"{DEFAULTS['definition_id_prefix']}{model_key}",
        name=name,
        namespace=options.namespace,
        type_language=options.type_language,
        version=model_version,
        last_updated=last_updated,
        decisions=[decision],
    )

    log_conversion_result(
        logger,
        definition.id,
        inputs=len(inputs),
        outputs=len(outputs),
        rules=len(rules),
        issues=len(issues),
        duration_sec=time.perf_counter() - started,
    )
    return ConversionResult(definition=definition, issues=issues)


def convert_to_dmn(
    model_node: Union[EditorNode, Mapping[str, Any]],
    model_key: str,
    model_version: int = 1,
    last_updated: Optional[datetime] = None,
    options: Optional[ConverterOptions] = None,
) -> Definition:
    """Convert editor JSON to a Definition; recoverable issues are only logged."""
    return convert_to_dmn_with_issues(model_node, model_key, model_version, last_updated, options).definition
