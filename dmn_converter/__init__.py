"""Decision table editor JSON -> DMN decision model converter."""

from dmn_converter.converter import DmnJsonConverter, convert_json_to_dmn

__all__ = ["DmnJsonConverter", "convert_json_to_dmn"]
