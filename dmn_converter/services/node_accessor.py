"""
Read-only accessor over the editor's parsed JSON.

The rest of the pipeline reads the editor model only through EditorNode, so
changes to the JSON shape stay in this module.
"""

import json
from typing import Any, Iterator, Optional, Union


def _as_text(value: Any) -> Optional[str]:
    """Scalar -> text; None for null and containers."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EditorNode:
    """A node of the editor JSON tree (object, array or scalar)."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "EditorNode":
        return cls(json.loads(raw))

    def __repr__(self) -> str:
        return f"EditorNode({type(self._value).__name__})"

    def is_object(self) -> bool:
        return isinstance(self._value, dict)

    def is_array(self) -> bool:
        return isinstance(self._value, list)

    def has(self, field: str) -> bool:
        """True if the field is present and not null."""
        return self.is_object() and self._value.get(field) is not None

    def keys(self) -> list[str]:
        return list(self._value.keys()) if self.is_object() else []

    def child(self, field: str) -> Optional["EditorNode"]:
        if not self.has(field):
            return None
        return EditorNode(self._value[field])

    def as_text(self, default: str = "") -> str:
        text = _as_text(self._value)
        return default if text is None else text

    def optional_text(self, field: str) -> Optional[str]:
        """Field as text, or None when absent, null or not a scalar."""
        if not self.is_object():
            return None
        return _as_text(self._value.get(field))

    def text(self, field: str, default: str = "") -> str:
        value = self.optional_text(field)
        return default if value is None else value

    def boolean(self, field: str, default: bool = False) -> bool:
        if not self.has(field):
            return default
        value = self._value[field]
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ("true", "1", "yes")

    def array(self, field: str) -> Optional[list["EditorNode"]]:
        """Array items, or None when the field is absent or not an array."""
        node = self.child(field)
        if node is None or not node.is_array():
            return None
        return [EditorNode(item) for item in node._value]

    def iter_array(self, field: str) -> Iterator["EditorNode"]:
        yield from self.array(field) or []
