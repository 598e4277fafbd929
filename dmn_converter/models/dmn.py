"""
Canonical decision table model produced by the converter.

Definition -> Decision -> DecisionTable -> clauses and rules. Rule entries point
at their clause by index into the table's clause lists, so a clause can be
replaced (e.g. when its type is inferred) without breaking any entry.
All models are Pydantic v2, frozen once built, and support JSON schema generation.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class HitPolicy(str, Enum):
    """Rule selection semantics when several rules match."""

    UNIQUE = "UNIQUE"
    FIRST = "FIRST"
    PRIORITY = "PRIORITY"
    ANY = "ANY"
    COLLECT = "COLLECT"
    RULE_ORDER = "RULE ORDER"
    OUTPUT_ORDER = "OUTPUT ORDER"


class BuiltinAggregator(str, Enum):
    """Aggregation applied to COLLECT results."""

    SUM = "SUM"
    COUNT = "COUNT"
    MIN = "MIN"
    MAX = "MAX"


class DecisionTableOrientation(str, Enum):
    """How rules are laid out in the authoring surface."""

    RULE_AS_ROW = "Rule-as-Row"
    RULE_AS_COLUMN = "Rule-as-Column"


class ClauseType(str, Enum):
    """Primitive types the converter can infer for a clause."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


# -----------------------------------------------------------------------------
# Expressions
# -----------------------------------------------------------------------------


class ValueList(BaseModel):
    """Enumerated allowed values: parsed items plus the original delimited text."""

    text: str = Field(..., description="Original text, e.g. '\"AAA\",\"BBB\"'")
    values: tuple[str, ...] = Field((), description="Unquoted items in textual order")

    model_config = {"frozen": True}


class LiteralExpression(BaseModel):
    """Free-text expression with an optional type reference."""

    id: str = Field(..., description="Expression identifier")
    label: str = Field("", description="Display label")
    text: str = Field("", description="Expression text, kept verbatim")
    type_ref: Optional[str] = Field(None, description="string, number, boolean, date, ... (None until inferred)")

    model_config = {"frozen": True}


class UnaryTests(BaseModel):
    """Unary test text for one input cell, e.g. '< 10', '-' or '"AAA"'."""

    id: str = Field(..., description="Entry identifier")
    text: str = Field("", description="Unary test text, kept verbatim")
    input_values: Optional[ValueList] = Field(None, description="Allowed values of the owning input clause")

    model_config = {"frozen": True}


# -----------------------------------------------------------------------------
# Clauses
# -----------------------------------------------------------------------------


class InputClause(BaseModel):
    """Input column: the tested expression and its optional allowed values."""

    id: str = Field(..., description="Clause identifier")
    source_id: str = Field(..., description="Identifier used by rules in the editor JSON")
    label: str = Field("", description="Column label")
    input_expression: LiteralExpression = Field(..., description="Expression being tested")
    input_values: Optional[ValueList] = Field(None, description="Allowed input values, if enumerated")

    model_config = {"frozen": True}

    @property
    def type_ref(self) -> Optional[str]:
        return self.input_expression.type_ref

    def with_type(self, type_ref: str) -> "InputClause":
        expression = self.input_expression.model_copy(update={"type_ref": type_ref})
        return self.model_copy(update={"input_expression": expression})


class OutputClause(BaseModel):
    """Output column: the variable a matching rule binds its result to."""

    id: str = Field(..., description="Clause identifier")
    source_id: str = Field(..., description="Identifier used by rules in the editor JSON")
    label: str = Field("", description="Column label")
    name: str = Field("", description="Variable name the result is bound to")
    type_ref: Optional[str] = Field(None, description="Result type (None until inferred)")
    output_values: Optional[ValueList] = Field(None, description="Allowed output values, if enumerated")
    complex_expression: bool = Field(False, description="Output cells hold expressions rather than literals")

    model_config = {"frozen": True}

    def with_type(self, type_ref: str) -> "OutputClause":
        return self.model_copy(update={"type_ref": type_ref})


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------


class RuleInputEntry(BaseModel):
    """One input cell of a rule."""

    input_clause: int = Field(..., ge=0, description="Index of the owning clause in DecisionTable.inputs")
    clause_id: str = Field(..., description="Id of the owning clause")
    input_entry: UnaryTests

    model_config = {"frozen": True}


class RuleOutputEntry(BaseModel):
    """One output cell of a rule."""

    output_clause: int = Field(..., ge=0, description="Index of the owning clause in DecisionTable.outputs")
    clause_id: str = Field(..., description="Id of the owning clause")
    output_entry: LiteralExpression

    model_config = {"frozen": True}


class DecisionRule(BaseModel):
    """A row of the table: one entry per declared input and output clause, in clause order."""

    id: str = Field(..., description="Rule identifier")
    input_entries: tuple[RuleInputEntry, ...] = ()
    output_entries: tuple[RuleOutputEntry, ...] = ()

    model_config = {"frozen": True}


# -----------------------------------------------------------------------------
# Table, decision, definition
# -----------------------------------------------------------------------------


class DecisionTable(BaseModel):
    """
    Decision table with ordered clauses and rules.

    Every rule carries exactly one input entry per input clause and one output
    entry per output clause, and entry i refers to clause i.
    """

    id: str = Field(..., description="Table identifier")
    hit_policy: HitPolicy = Field(HitPolicy.ANY, description="Hit policy")
    aggregation: Optional[BuiltinAggregator] = Field(None, description="Aggregator for COLLECT")
    preferred_orientation: DecisionTableOrientation = Field(
        DecisionTableOrientation.RULE_AS_ROW,
        description="Authoring layout",
    )
    inputs: tuple[InputClause, ...] = ()
    outputs: tuple[OutputClause, ...] = ()
    rules: tuple[DecisionRule, ...] = ()

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_entry_alignment(self) -> "DecisionTable":
        for rule in self.rules:
            if len(rule.input_entries) != len(self.inputs):
                raise ValueError(
                    f"Rule '{rule.id}' has {len(rule.input_entries)} input entries for {len(self.inputs)} input clauses"
                )
            if len(rule.output_entries) != len(self.outputs):
                raise ValueError(
                    f"Rule '{rule.id}' has {len(rule.output_entries)} output entries for {len(self.outputs)} output clauses"
                )
            for i, entry in enumerate(rule.input_entries):
                if entry.input_clause != i or entry.clause_id != self.inputs[i].id:
                    raise ValueError(f"Rule '{rule.id}' input entry {i} does not refer to input clause {i}")
            for i, entry in enumerate(rule.output_entries):
                if entry.output_clause != i or entry.clause_id != self.outputs[i].id:
                    raise ValueError(f"Rule '{rule.id}' output entry {i} does not refer to output clause {i}")
        return self

    def input_clause_of(self, entry: RuleInputEntry) -> InputClause:
        return self.inputs[entry.input_clause]

    def output_clause_of(self, entry: RuleOutputEntry) -> OutputClause:
        return self.outputs[entry.output_clause]


class Decision(BaseModel):
    """A decision wrapping exactly one decision table."""

    id: str = Field(..., description="Decision identifier (editor model key)")
    name: str = Field("", description="Human-readable name")
    description: Optional[str] = Field(None, description="Optional description")
    expression: DecisionTable

    model_config = {"frozen": True}


class Definition(BaseModel):
    """Root container of a converted model."""

    id: str = Field(..., description="Definition identifier, derived from the model key")
    name: str = Field("", description="Model name from the editor JSON")
    namespace: str = Field(..., description="Model namespace")
    type_language: str = Field(..., description="Expression type language URI")
    version: int = Field(1, description="Editor model version supplied by the caller")
    last_updated: Optional[datetime] = Field(None, description="Editor model last-updated timestamp")
    decisions: tuple[Decision, ...] = ()

    model_config = {"frozen": True}


# -----------------------------------------------------------------------------
# JSON Schema
# -----------------------------------------------------------------------------

SCHEMA_VERSION = "1.0.0"


def get_definition_json_schema() -> dict[str, Any]:
    """
    Return the JSON schema of a converted Definition, with nested types under $defs.
    """
    schema = Definition.model_json_schema()
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "$id": "https://dmn-converter.example/schemas/definition.json",
        "title": "Decision Table Definition",
        "description": "Canonical decision table model converted from editor JSON",
        "version": SCHEMA_VERSION,
        **{k: v for k, v in schema.items() if k not in ("$schema", "$id", "title", "description")},
    }
