"""Conversion pipeline services (clauses, value lists, rules, type inference, assembly)."""

from dmn_converter.services.node_accessor import EditorNode
from dmn_converter.services.value_lists import (
    parse_value_list,
    split_value_list,
    value_list_from_entries,
)
from dmn_converter.services.clause_builder import (
    build_clauses,
    build_input_clauses,
    build_output_clauses,
)
from dmn_converter.services.rule_correlator import (
    ConversionIssue,
    correlate_rule,
    correlate_rules,
)
from dmn_converter.services.type_inference import (
    classify_literal,
    infer_clause_types,
    infer_type,
    strip_operator,
)
from dmn_converter.services.converter_service import (
    ConversionResult,
    convert_to_dmn,
    convert_to_dmn_with_issues,
)

__all__ = [
    "EditorNode",
    "parse_value_list",
    "split_value_list",
    "value_list_from_entries",
    "build_clauses",
    "build_input_clauses",
    "build_output_clauses",
    "ConversionIssue",
    "correlate_rule",
    "correlate_rules",
    "classify_literal",
    "infer_clause_types",
    "infer_type",
    "strip_operator",
    "ConversionResult",
    "convert_to_dmn",
    "convert_to_dmn_with_issues",
]
