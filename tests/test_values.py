import pytest

from leech.values import (
    JsonError,
    JsonType,
    element,
    json_type,
    member,
    pop_element,
    pop_member,
    type_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, JsonType.NULL),
        (True, JsonType.TRUE),
        (False, JsonType.FALSE),
        ("text", JsonType.STRING),
        (3.5, JsonType.NUMBER),
        (7, JsonType.NUMBER),
        ([1, 2], JsonType.ARRAY),
        ({"a": 1}, JsonType.OBJECT),
    ],
)
def test_json_type(value, expected):
    assert json_type(value) is expected


@pytest.mark.parametrize(
    "value, name",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        ("s", "string"),
        (1.0, "number"),
        ([], "array"),
        ({}, "object"),
    ],
)
def test_type_name(value, name):
    assert type_name(value) == name


def test_type_names_follow_enum_order():
    samples = [None, True, False, "s", 1.0, [], {}]
    assert [json_type(v) for v in samples] == list(JsonType)
    assert [type_name(v) for v in samples] == [
        "null", "true", "false", "string", "number", "array", "object"
    ]


def test_json_type_rejects_unknown():
    with pytest.raises(JsonError):
        json_type(object())


def test_member_returns_value():
    obj = {"id": "users", "n": 2.0}
    assert member(obj, "id") == "users"
    assert member(obj, "n", JsonType.NUMBER) == 2.0


def test_member_missing_key():
    with pytest.raises(JsonError, match='Entry with key "nope" does not exist'):
        member({"a": 1}, "nope")


def test_member_wrong_kind():
    with pytest.raises(JsonError, match="Expected type string, but found type number"):
        member({"a": 1}, "a", JsonType.STRING)


def test_member_requires_object():
    with pytest.raises(JsonError):
        member([1], "a")


def test_element_returns_value():
    arr = [{"x": None}, "two"]
    assert element(arr, 0, JsonType.OBJECT) == {"x": None}
    assert element(arr, 1) == "two"


def test_element_out_of_bounds():
    with pytest.raises(JsonError, match=r"Index 2 is out of bounds \(2 >= 2\)"):
        element(["a", "b"], 2)


def test_element_negative_index_is_out_of_bounds():
    with pytest.raises(JsonError):
        element(["a"], -1)


def test_element_wrong_kind():
    with pytest.raises(JsonError, match="Expected type array"):
        element([None], 0, JsonType.ARRAY)


def test_pop_member_removes():
    obj = {"a": [1], "b": 2}
    removed = pop_member(obj, "a", JsonType.ARRAY)
    assert removed == [1]
    assert obj == {"b": 2}


def test_pop_member_wrong_kind_leaves_object_untouched():
    obj = {"a": "text"}
    with pytest.raises(JsonError):
        pop_member(obj, "a", JsonType.OBJECT)
    assert obj == {"a": "text"}


def test_pop_member_missing():
    obj = {}
    with pytest.raises(JsonError):
        pop_member(obj, "a")
    assert obj == {}


def test_pop_element_removes_and_shifts():
    arr = [{"id": "t1"}, {"id": "t2"}]
    first = pop_element(arr, 0, JsonType.OBJECT)
    assert first == {"id": "t1"}
    assert arr == [{"id": "t2"}]


def test_pop_element_wrong_kind_leaves_array_untouched():
    arr = ["a", []]
    with pytest.raises(JsonError):
        pop_element(arr, 0, JsonType.ARRAY)
    assert arr == ["a", []]


def test_pop_element_out_of_bounds():
    arr = []
    with pytest.raises(JsonError):
        pop_element(arr, 0)
    assert arr == []