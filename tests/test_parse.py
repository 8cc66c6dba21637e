import math

import pytest

from leech.parse import JsonParseError, parse, parse_file
from leech.values import JsonError


@pytest.mark.parametrize(
    "text, expected",
    [("null", None), ("true", True), ("false", False)],
)
def test_literals(text, expected):
    assert parse(text) is expected


def test_surrounding_whitespace_is_ignored():
    assert parse(" \r\n\t true \t\r\n ") is True


def test_nested_structure():
    text = '{ "a" : [ 1 , "two" , null , true , false ] , "b" : { "c" : [] } }'
    assert parse(text) == {
        "a": [1, "two", None, True, False],
        "b": {"c": []},
    }


def test_empty_containers():
    assert parse("{}") == {}
    assert parse("[]") == []
    assert parse("[ ]") == []
    assert parse("{\n}") == {}


def test_object_key_order_is_preserved():
    assert list(parse('{"zeta": 1, "alpha": 2, "mid": 3}')) == ["zeta", "alpha", "mid"]


def test_duplicate_key_last_value_wins():
    assert parse('{"a": 1, "a": 2}') == {"a": 2}


def test_escaped_quote_and_backslash():
    assert parse(r'"say \"hi\""') == 'say "hi"'
    assert parse(r'"back\\slash"') == "back\\slash"


def test_escape_makes_next_character_literal():
    assert parse(r'"\n"') == "n"
    assert parse(r'"a\/b"') == "a/b"


def test_raw_control_characters_are_kept():
    assert parse('"line\nbreak\ttab"') == "line\nbreak\ttab"


def test_unicode_string():
    assert parse('"h\u00e9llo \u4e16\u754c"') == "h\u00e9llo \u4e16\u754c"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42.0),
        ("-0.5", -0.5),
        ("1e3", 1e3),
        ("2.5E-1", 2.5e-1),
        ("007", 7.0),
        ("-12", -12.0),
    ],
)
def test_numbers(text, expected):
    result = parse(text)
    assert isinstance(result, float)
    assert result == expected


def test_hex_number_as_strtod_reads_it():
    assert parse("0x10") == 16.0


def test_negative_infinity_and_nan():
    assert parse("-inf") == float("-inf")
    assert math.isnan(parse("-nan"))


def test_numbers_in_array():
    assert parse("[1,-2,3.5]") == [1.0, -2.0, 3.5]


def test_bytes_input():
    assert parse(b'{"k": "v"}') == {"k": "v"}


def test_invalid_utf8_bytes_round_trip():
    value = parse(b'"\xff\xfe"')
    assert value.encode("utf-8", errors="surrogateescape") == b"\xff\xfe"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "nul",
        "x",
        "-",
        "-x",
        "null x",
        "truex",
        "[",
        "{",
        "[1,]",
        "[1 2]",
        "[,1]",
        '{"a" 1}',
        "{a: 1}",
        '{"a": 1,}',
        '{"a": 1 "b": 2}',
        '{"a":}',
        '"abc',
        '"abc\\',
        "]",
        "+1",
        ".5",
    ],
)
def test_invalid_input_raises(text):
    with pytest.raises(JsonParseError):
        parse(text)


def test_parse_error_is_json_error():
    with pytest.raises(JsonError):
        parse("[1,")


def test_trailing_content_message():
    with pytest.raises(JsonParseError, match="End-of-File"):
        parse("[] []")


def test_error_message_is_truncated():
    with pytest.raises(JsonParseError) as info:
        parse("y" * 200)
    message = str(info.value)
    assert "y" * 64 in message
    assert "y" * 65 not in message


def test_deep_nesting_raises_parse_error():
    with pytest.raises(JsonParseError):
        parse("[" * 100000)


def test_parse_file(tmp_path):
    path = tmp_path / "doc.json"
    path.write_bytes(b'{"version": 1, "blocks": []}\n')
    assert parse_file(path) == {"version": 1.0, "blocks": []}


def test_parse_file_accepts_str_path(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text('["a", "b"]', encoding="utf-8")
    assert parse_file(str(path)) == ["a", "b"]


def test_parse_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "absent.json")


def test_parse_file_invalid_contents(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(JsonParseError):
        parse_file(path)