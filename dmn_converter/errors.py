"""
Error types raised by the editor JSON -> DMN converter.

Recoverable problems (stale rule keys, unknown hit policies) are reported as
ConversionIssue records instead; only structural problems raise.
"""

from typing import Optional


class ModelConversionError(ValueError):
    """Base class for conversion failures caused by the input JSON."""


class UnsupportedModelError(ModelConversionError):
    """The JSON does not look like a decision table editor model at all."""


class InvalidModelError(ModelConversionError):
    """The JSON is a decision table model but cannot be assembled consistently."""


class UnknownClauseReferenceError(ModelConversionError):
    """A rule references a clause id that is not declared (strict policy only)."""

    def __init__(self, key: str, rule_index: int, message: Optional[str] = None):
        self.key = key
        self.rule_index = rule_index
        super().__init__(message or f"Rule {rule_index} references unknown clause '{key}'")
