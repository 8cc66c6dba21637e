"""Serialisation of native Python JSON values into JSON text.

Only the double quote and the backslash are escaped inside strings, so any
other characters (control characters and undecodable bytes kept as
surrogate escapes included) pass through unchanged.  Numbers are written
in fixed-point notation with six decimals, after which trailing zeros and
a trailing dot are dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, Union

from .values import JsonError, JsonType, json_type

INDENT_SIZE = 2
"""Number of spaces added per nesting level in pretty output."""

_ESCAPES = str.maketrans({'"': '\\"', "\\": "\\\\"})


def _compose_string(text: str) -> str:
    return '"' + text.translate(_ESCAPES) + '"'


def _compose_number(number: Union[int, float]) -> str:
    text = f"{float(number):f}"
    if "." in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def _compose(value: Any, pretty: bool, indent: int) -> Iterator[str]:
    kind = json_type(value)

    if kind is JsonType.NULL:
        yield "null"
    elif kind is JsonType.TRUE:
        yield "true"
    elif kind is JsonType.FALSE:
        yield "false"
    elif kind is JsonType.STRING:
        yield _compose_string(value)
    elif kind is JsonType.NUMBER:
        yield _compose_number(value)
    elif kind is JsonType.ARRAY:
        yield "["
        for position, item in enumerate(value):
            if position > 0:
                yield ","
            if pretty:
                yield "\n" + " " * (indent + INDENT_SIZE)
            yield from _compose(item, pretty, indent + INDENT_SIZE)
        yield ("\n" + " " * indent + "]") if pretty else "]"
    else:
        yield "{"
        for position, (key, child) in enumerate(value.items()):
            if not isinstance(key, str):
                raise JsonError(
                    "Failed to compose JSON object: "
                    f"Key of Python type {type(key).__name__} is not a string"
                )
            if position > 0:
                yield ","
            if pretty:
                yield "\n" + " " * (indent + INDENT_SIZE)
            yield _compose_string(key)
            yield ": " if pretty else ":"
            yield from _compose(child, pretty, indent + INDENT_SIZE)
        yield ("\n" + " " * indent + "}") if pretty else "}"


def compose(value: Any, pretty: bool = False) -> str:
    """Return the JSON text for a value.

    With ``pretty`` set, nested elements are placed on their own indented
    lines and the text ends with a newline.
    """
    try:
        text = "".join(_compose(value, pretty, 0))
    except RecursionError:
        raise JsonError("Failed to compose JSON: Nesting too deep") from None
    if pretty:
        text += "\n"
    return text


def compose_file(value: Any, path: Union[str, Path], pretty: bool = False) -> None:
    """Compose a value and write the JSON text to a file."""
    text = compose(value, pretty)
    Path(path).write_bytes(text.encode("utf-8", errors="surrogateescape"))