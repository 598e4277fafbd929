"""
Editor decision table JSON -> DMN model converter (public entry point).

Accepts the editor JSON as a parsed mapping, a JSON string, or an EditorNode.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from dmn_converter.config import MODEL_NAMESPACE, URI_JSON, ConverterOptions
from dmn_converter.models.dmn import Definition
from dmn_converter.services.converter_service import ConversionResult, convert_to_dmn_with_issues
from dmn_converter.services.node_accessor import EditorNode

__all__ = ["MODEL_NAMESPACE", "URI_JSON", "DmnJsonConverter", "convert_json_to_dmn"]


def _to_node(model: Union[str, bytes, Mapping[str, Any], EditorNode]) -> EditorNode:
    if isinstance(model, EditorNode):
        return model
    if isinstance(model, (str, bytes)):
        return EditorNode.from_json(model)
    return EditorNode(model)


class DmnJsonConverter:
    """Stateless converter bound to a set of options; safe to share between threads."""

    def __init__(self, options: Optional[ConverterOptions] = None):
        self.options = options or ConverterOptions()

    def convert(
        self,
        model: Union[str, bytes, Mapping[str, Any], EditorNode],
        model_key: str,
        model_version: int = 1,
        last_updated: Optional[datetime] = None,
    ) -> ConversionResult:
        return convert_to_dmn_with_issues(_to_node(model), model_key, model_version, last_updated, self.options)

    def convert_to_dmn(
        self,
        model: Union[str, bytes, Mapping[str, Any], EditorNode],
        model_key: str,
        model_version: int = 1,
        last_updated: Optional[datetime] = None,
    ) -> Definition:
        return self.convert(model, model_key, model_version, last_updated).definition


def convert_json_to_dmn(
    model: Union[str, bytes, Mapping[str, Any], EditorNode],
    model_key: str,
    model_version: int = 1,
    last_updated: Optional[datetime] = None,
    options: Optional[ConverterOptions] = None,
) -> Definition:
    """Convert editor JSON (string or parsed) to a Definition."""
    return DmnJsonConverter(options).convert_to_dmn(model, model_key, model_version, last_updated)
