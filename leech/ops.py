"""Structural operations on JSON values: equality, deep copy and key-wise
set differences between objects."""

from __future__ import annotations

from typing import Any

from .values import JsonError, JsonType, json_type


def _require_object(value: Any, role: str) -> dict:
    actual = json_type(value)
    if actual is not JsonType.OBJECT:
        raise JsonError(
            f"Expected {role} operand of type object, but found type {actual.label}"
        )
    return value


def equal(left: Any, right: Any) -> bool:
    """Return True if two JSON values are structurally equal.

    Values of different JSON types are never equal, so ``true`` differs
    from the number ``1`` and ``false`` from ``0``.
    """
    kind = json_type(left)
    if kind is not json_type(right):
        return False

    if kind in (JsonType.NULL, JsonType.TRUE, JsonType.FALSE):
        return True
    if kind in (JsonType.STRING, JsonType.NUMBER):
        return left == right
    if kind is JsonType.ARRAY:
        return len(left) == len(right) and all(
            equal(a, b) for a, b in zip(left, right)
        )
    # Objects
    if len(left) != len(right):
        return False
    return all(key in right and equal(value, right[key]) for key, value in left.items())


def deep_copy(value: Any) -> Any:
    """Return a deep copy of a JSON value."""
    kind = json_type(value)
    if kind is JsonType.ARRAY:
        return [deep_copy(item) for item in value]
    if kind is JsonType.OBJECT:
        return {key: deep_copy(child) for key, child in value.items()}
    # Scalars (None, booleans, strings, numbers) are immutable.
    return value


def keys_set_minus(left: dict, right: dict) -> dict:
    """Return copies of the entries of ``left`` whose keys are absent from
    ``right``."""
    _require_object(left, "left")
    _require_object(right, "right")
    return {
        key: deep_copy(value) for key, value in left.items() if key not in right
    }


def keys_intersect_values_minus(left: dict, right: dict) -> dict:
    """Return copies of the entries of ``left`` whose keys are also in
    ``right`` but whose values differ from those in ``right``."""
    _require_object(left, "left")
    _require_object(right, "right")
    return {
        key: deep_copy(value)
        for key, value in left.items()
        if key in right and not equal(value, right[key])
    }