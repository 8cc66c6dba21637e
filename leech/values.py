"""JSON value model built on native Python types.

JSON values are represented as ``None``, ``True``, ``False``, ``str``,
numbers (``int`` or ``float``), ``list`` and ``dict``.  This module
classifies such values and provides checked access to object members and
array elements.
"""

from __future__ import annotations

import enum
from typing import Any, Optional


class JsonType(enum.IntEnum):
    """The seven kinds of JSON value."""

    NULL = 0
    TRUE = 1
    FALSE = 2
    STRING = 3
    NUMBER = 4
    ARRAY = 5
    OBJECT = 6

    @property
    def label(self) -> str:
        """Lower-case name used in messages and output."""
        return self.name.lower()


class JsonError(ValueError):
    """Raised when a JSON value is missing or of an unexpected type."""


def json_type(value: Any) -> JsonType:
    """Return the JSON type of a native Python value."""
    if value is None:
        return JsonType.NULL
    if value is True:
        return JsonType.TRUE
    if value is False:
        return JsonType.FALSE
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, (int, float)):
        return JsonType.NUMBER
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise JsonError(f"Value of Python type {type(value).__name__} is not a JSON value")


def type_name(value: Any) -> str:
    """Return the JSON type of a value as one of "null", "true", "false",
    "string", "number", "array" or "object"."""
    return json_type(value).label


def _require(value: Any, kind: JsonType, what: str) -> None:
    actual = json_type(value)
    if actual is not kind:
        raise JsonError(
            f"Expected {what} of type {kind.label}, but found type {actual.label}"
        )


def _check_kind(child: Any, kind: Optional[JsonType], context: str) -> None:
    if kind is None:
        return
    actual = json_type(child)
    if actual is not JsonType(kind):
        raise JsonError(
            f"{context}: Expected type {JsonType(kind).label}, "
            f"but found type {actual.label}"
        )


def _check_index(array: list, index: int, context: str) -> None:
    length = len(array)
    if index < 0 or index >= length:
        raise JsonError(
            f"{context}: Index {index} is out of bounds ({index} >= {length})"
        )


def member(obj: dict, key: str, kind: Optional[JsonType] = None) -> Any:
    """Return the member of a JSON object under ``key``.

    If ``kind`` is given, the member must be of that JSON type.
    """
    _require(obj, JsonType.OBJECT, "container")
    if key not in obj:
        raise JsonError(
            "Failed to get value from JSON object: "
            f'Entry with key "{key}" does not exist.'
        )
    child = obj[key]
    _check_kind(
        child, kind, f'Failed to get value from JSON object with key "{key}"'
    )
    return child


def element(array: list, index: int, kind: Optional[JsonType] = None) -> Any:
    """Return the element of a JSON array at ``index``.

    If ``kind`` is given, the element must be of that JSON type.
    """
    _require(array, JsonType.ARRAY, "container")
    _check_index(array, index, "Failed to get value from JSON array")
    child = array[index]
    _check_kind(
        child, kind, f"Failed to get value from JSON array at index {index}"
    )
    return child


def pop_member(obj: dict, key: str, kind: Optional[JsonType] = None) -> Any:
    """Remove and return the member of a JSON object under ``key``.

    If ``kind`` is given and the member is of another type, the object is
    left untouched and ``JsonError`` is raised.
    """
    _require(obj, JsonType.OBJECT, "container")
    if key not in obj:
        raise JsonError(
            "Failed to remove value from JSON object: "
            f'Entry with key "{key}" does not exist.'
        )
    _check_kind(
        obj[key], kind, f'Failed to remove value from object with key "{key}"'
    )
    return obj.pop(key)


def pop_element(array: list, index: int, kind: Optional[JsonType] = None) -> Any:
    """Remove and return the element of a JSON array at ``index``.

    If ``kind`` is given and the element is of another type, the array is
    left untouched and ``JsonError`` is raised.
    """
    _require(array, JsonType.ARRAY, "container")
    _check_index(array, index, "Failed to remove value from JSON array")
    _check_kind(
        array[index],
        kind,
        f"Failed to remove element at index {index} from array",
    )
    return array.pop(index)