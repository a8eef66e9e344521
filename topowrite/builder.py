"""Conversion of a parsed configuration tree into the item graph."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .logging import get_logger
from .models import BuildResult, DocumentMetadata, Item

HEADER_KEY = "header"
METADATA_KEYS = ("introduction", "conclusion")
DEPENDS_KEY = "depends"
INPUT_KEY = "input"

_logger = get_logger("builder")


class SchemaError(ValueError):
    """Raised when the configuration does not match the expected shape."""

    def __init__(
        self,
        key: Any,
        value: Any,
        expected: str,
        *,
        item: Optional[str] = None,
        message: Optional[str] = None,
    ) -> None:
        self.key = key
        self.value = value
        self.expected = expected
        self.item = item
        super().__init__(message or self._describe())

    def _describe(self) -> str:
        where = "configuration root" if self.key is None else f"key '{self.key}'"
        if self.item is not None:
            where = f"{where} of item '{self.item}'"
        return f"Invalid {where}: expected {self.expected}, got {_type_name(self.value)}"


def build_items(data: Any) -> BuildResult:
    """Split ``data`` into document metadata and a name-keyed item mapping.

    Items keep the order in which they appear in ``data``.
    """
    if not isinstance(data, Mapping):
        raise SchemaError(None, data, "an object")

    metadata = DocumentMetadata()
    items: Dict[str, Item] = {}

    for key, value in data.items():
        _logger.debug("%s %r", key, value)
        if not isinstance(key, str):
            raise SchemaError(
                key,
                key,
                "a string item name",
                message=f"Invalid item name {key!r}: expected a string, got {_type_name(key)}",
            )
        if key == HEADER_KEY:
            metadata.header = _require_str(key, value)
        elif key in METADATA_KEYS:
            setattr(metadata, key, _require_str(key, value))
        else:
            items[key] = build_item(key, value)

    if not metadata.header:
        raise SchemaError(
            HEADER_KEY,
            data.get(HEADER_KEY),
            "a non-empty string",
            message="You must specify a header: the 'header' key is required",
        )

    return BuildResult(metadata=metadata, items=items)


def build_item(name: str, data: Any) -> Item:
    """Build a single :class:`Item` from its configuration object."""
    if not isinstance(data, Mapping):
        raise SchemaError(name, data, "an object describing an item")

    item = Item(name=name)
    for key, value in data.items():
        _logger.debug("%s.%s %r", name, key, value)
        if key == DEPENDS_KEY:
            item.dependencies.extend(_require_str_list(name, key, value))
        elif key == INPUT_KEY:
            item.input_path = _require_str(key, value, item=name)
        else:
            raise SchemaError(
                key,
                value,
                f"one of '{DEPENDS_KEY}', '{INPUT_KEY}'",
                item=name,
                message=f"Invalid key '{key}' in item '{name}'",
            )
    return item


def _require_str(key: str, value: Any, *, item: Optional[str] = None) -> str:
    if not isinstance(value, str):
        raise SchemaError(key, value, "a string", item=item)
    return value


def _require_str_list(name: str, key: str, value: Any) -> List[str]:
    if not isinstance(value, list):
        raise SchemaError(key, value, "an array of strings", item=name)
    for element in value:
        if not isinstance(element, str):
            raise SchemaError(key, element, "an array of strings", item=name)
    return list(value)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


__all__ = ["SchemaError", "build_item", "build_items"]
