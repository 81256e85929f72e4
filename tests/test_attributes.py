import pytest

from quilldelta.attributes import compose, diff, format_attributes, invert, transform


def test_compose():
    a = {"keyA": "a", "anotherKeyA": "a", "keyANull": None}
    b = {"keyA": "ab", "keyB": "b", "keyBNull": None}
    assert compose(a, b, False) == {"keyA": "ab", "anotherKeyA": "a", "keyB": "b"}


def test_compose_doc_example():
    a = {"keyA": "a", "keyANull": None}
    b = {"keyA": "ab", "keyB": "b", "keyBNull": None}
    assert compose(a, b, False) == {"keyA": "ab", "keyB": "b"}


def test_compose_keep_null():
    a = {"keyA": "a", "keyANull": None}
    b = {"keyA": "ab", "keyB": "b", "keyBNull": None}
    assert compose(a, b, True) == {"keyA": "ab", "keyB": "b", "keyBNull": None}


def test_compose_null_output():
    assert compose({"keyANull": None}, {"keyBNull": None}, False) is None


def test_compose_does_not_mutate_inputs():
    a = {"x": 1}
    b = {"y": None}
    compose(a, b, False)
    assert a == {"x": 1}
    assert b == {"y": None}


def test_diff():
    a = {"1": "a", "2": "ab", "a-null": None}
    b = {"1": "ab", "3": "b", "b-null": None}
    assert diff(a, b) == {
        "1": "ab",
        "2": None,
        "3": "b",
        "a-null": None,
        "b-null": None,
    }


def test_diff_doc_example():
    a = {"keyA": "a", "keyANull": None}
    b = {"keyA": "ab", "keyB": "b", "keyBNull": None}
    assert diff(a, b) == {
        "keyA": "ab",
        "keyB": "b",
        "keyBNull": None,
        "keyANull": None,
    }


def test_diff_null():
    a = {"1": "a", "2": "ab", "a-null": None}
    assert diff(a, dict(a)) is None


def test_diff_distinguishes_bool_from_number():
    assert diff({"bold": True}, {"bold": 1}) == {"bold": 1}


def test_invert_replace():
    base = {"color": "blue"}
    assert invert({"color": "red"}, base) == base


def test_invert_revert_unset():
    assert invert({"bold": None}, {"bold": True}) == {"bold": True}


def test_invert_merge():
    assert invert({"bold": True}, {"italic": True}) == {"bold": None}


def test_invert_on_null():
    assert invert({}, {"bold": True}) == {}


def test_invert_base_null():
    assert invert({"bold": True}, {}) == {"bold": None}


def test_invert_both_null():
    assert invert({}, {}) == {}


def test_invert_same_value_is_dropped():
    assert invert({"bold": True}, {"bold": True}) == {}


RIGHT = {"color": "blue", "font": "serif", "italic": True}
LEFT = {"bold": True, "color": "red", "font": None}


def test_transform_left_empty():
    assert transform({}, RIGHT, False) == RIGHT


def test_transform_right_empty():
    assert transform(LEFT, {}, False) is None


def test_transform_both_empty():
    assert transform({}, {}, False) is None


def test_transform_with_priority():
    assert transform(LEFT, RIGHT, True) == {"italic": True}


def test_transform_without_priority():
    assert transform(LEFT, RIGHT, False) == RIGHT


def test_transform_priority_all_keys_shared():
    assert transform({"a": 1}, {"a": 2}, True) is None


@pytest.mark.parametrize(
    "attributes, expected",
    [
        ({}, "{}"),
        ({"bold": True}, "{bold: true}}"),
        ({"color": "red"}, "{color: red}}"),
        ({"font": None}, "{font: null}}"),
    ],
)
def test_format_attributes(attributes, expected):
    assert format_attributes(attributes) == expected