"""Parser for JSON text into native Python values.

The parser is deliberately lenient about string contents: a backslash
simply makes the following character literal, so arbitrary (even binary)
data survives a compose/parse round trip unchanged.  Numbers are read the
way the C library's ``strtod`` reads them and always come back as
``float``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Union

from .values import JsonError

_WHITESPACE = " \r\n\t"
_TRUNCATE_AT = 64

_STRING_BODY = re.compile(r'(?:[^"\\]|\\.)*', re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)

_HEX_NUMBER = re.compile(
    r"-?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_SPECIAL_NUMBER = re.compile(
    r"-?(?:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE
)
_DECIMAL_NUMBER = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_EXPECTED_VALUE = (
    "Expected 'null', 'true', 'false', NUMBER, STRING, OBJECT, ARRAY"
)


class JsonParseError(JsonError):
    """Raised when JSON text cannot be parsed."""


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.end = len(text)

    def at_end(self) -> bool:
        return self.pos >= self.end

    def peek(self) -> str:
        return self.text[self.pos]

    def snippet(self) -> str:
        return self.text[self.pos : self.pos + _TRUNCATE_AT]

    def fail(self, message: str) -> JsonParseError:
        return JsonParseError(f"Failed to parse JSON: {message}")

    def skip_whitespace(self) -> None:
        while self.pos < self.end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def expect(self, token: str) -> None:
        if self.end - self.pos < len(token):
            raise self.fail(
                f"Expected token '{token}', but reached End-of-Buffer"
            )
        if not self.text.startswith(token, self.pos):
            raise self.fail(f"Expected '{token}', but found '{self.snippet()}'")
        self.pos += len(token)

    def value(self) -> Any:
        self.skip_whitespace()
        if self.at_end():
            raise self.fail(f"{_EXPECTED_VALUE}; but reached End-of-Buffer")

        text, pos = self.text, self.pos
        for token, result in (("null", None), ("true", True), ("false", False)):
            if text.startswith(token, pos):
                self.pos += len(token)
                return result

        head = self.peek()
        if head == '"':
            return self.string()
        if head == "{":
            return self.object()
        if head == "[":
            return self.array()
        if head.isdigit() and head.isascii() or head == "-":
            return self.number()
        raise self.fail(f"{_EXPECTED_VALUE}; but found '{self.snippet()}'")

    def string(self) -> str:
        self.expect('"')
        match = _STRING_BODY.match(self.text, self.pos)
        self.pos = match.end()
        if not self.at_end() and self.peek() == "\\":
            raise self.fail(
                "Expected control character after '\\', "
                "but reached End-of-Buffer"
            )
        self.expect('"')
        return _ESCAPE.sub(r"\1", match.group())

    def object(self) -> dict:
        self.expect("{")
        self.skip_whitespace()
        result: dict = {}
        first = True
        while not self.at_end() and self.peek() != "}":
            if not first:
                self.expect(",")
                self.skip_whitespace()
            first = False

            key = self.string()
            self.skip_whitespace()
            self.expect(":")
            result[key] = self.value()
            self.skip_whitespace()
        self.expect("}")
        return result

    def array(self) -> list:
        self.expect("[")
        self.skip_whitespace()
        result: list = []
        first = True
        while not self.at_end() and self.peek() != "]":
            if not first:
                self.expect(",")
                self.skip_whitespace()
            first = False

            result.append(self.value())
            self.skip_whitespace()
        self.expect("]")
        return result

    def number(self) -> float:
        for pattern, convert in (
            (_HEX_NUMBER, float.fromhex),
            (_SPECIAL_NUMBER, _special_float),
            (_DECIMAL_NUMBER, float),
        ):
            match = pattern.match(self.text, self.pos)
            if match:
                self.pos = match.end()
                return convert(match.group())
        raise JsonParseError(
            f"Failed to parse JSON string: Expected NUMBER, found {self.snippet()}"
        )


def _special_float(token: str) -> float:
    # Drop an optional NaN payload such as "nan(123)".
    return float(token.split("(", 1)[0])


def parse(text: Union[str, bytes, bytearray]) -> Any:
    """Parse JSON text and return the value it holds.

    Bytes are decoded as UTF-8; undecodable bytes are kept as surrogate
    escapes so that they can be encoded back unchanged.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="surrogateescape")

    parser = _Parser(text)
    try:
        result = parser.value()
    except RecursionError:
        raise JsonParseError("Failed to parse JSON: Nesting too deep") from None
    parser.skip_whitespace()
    if not parser.at_end():
        raise parser.fail(
            f"Expected End-of-File; but found '{parser.snippet()}'"
        )
    return result


def parse_file(path: Union[str, Path]) -> Any:
    """Read a file and parse its JSON contents."""
    return parse(Path(path).read_bytes())