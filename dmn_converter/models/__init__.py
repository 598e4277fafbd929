"""
Canonical decision table models (DMN-style) produced by the converter.
"""

from dmn_converter.models.dmn import (
    BuiltinAggregator,
    ClauseType,
    Decision,
    DecisionRule,
    DecisionTable,
    DecisionTableOrientation,
    Definition,
    HitPolicy,
    InputClause,
    LiteralExpression,
    OutputClause,
    RuleInputEntry,
    RuleOutputEntry,
    UnaryTests,
    ValueList,
    get_definition_json_schema,
)

__all__ = [
    "BuiltinAggregator",
    "ClauseType",
    "Decision",
    "DecisionRule",
    "DecisionTable",
    "DecisionTableOrientation",
    "Definition",
    "HitPolicy",
    "InputClause",
    "LiteralExpression",
    "OutputClause",
    "RuleInputEntry",
    "RuleOutputEntry",
    "UnaryTests",
    "ValueList",
    "get_definition_json_schema",
]
