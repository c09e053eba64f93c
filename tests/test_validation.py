"""Caller-side input checks."""

import pytest

from algorithms import InputValidationError
from engine import parse_array_input, parse_value, require_node, validate_array
from engine.validation import parse_int


def test_parse_array_skips_junk_tokens():
    assert parse_array_input("5, 3, x, 8") == [5, 3, 8]
    assert parse_array_input(" 12px ,-4") == [12, -4]


def test_parse_array_size_bounds():
    with pytest.raises(InputValidationError, match="between 2 and 200"):
        parse_array_input("5")
    with pytest.raises(InputValidationError, match=r"got 201"):
        parse_array_input(",".join("1" * 201))


def test_parse_array_custom_bounds():
    assert parse_array_input("1,2,3", min_size=3, max_size=3) == [1, 2, 3]
    with pytest.raises(InputValidationError):
        parse_array_input("1,2", min_size=3, max_size=5)


@pytest.mark.parametrize("bad", [
    "1,2,3",
    [1, True],
    [1, "2"],
    [1, None],
    [1, float("nan")],
    [1, float("inf")],
])
def test_validate_array_rejects(bad):
    with pytest.raises(InputValidationError):
        validate_array(bad)


def test_validate_array_accepts_floats():
    assert validate_array((1.5, -2, 3)) == [1.5, -2, 3]


def test_parse_int():
    assert parse_int("42") == 42
    assert parse_int("  -7abc") == -7
    assert parse_int("abc") is None


@pytest.mark.parametrize("raw, expected", [(42, 42), ("17", 17), (3.0, 3), ("8 ", 8), ("-4.0", -4)])
def test_parse_value_accepts(raw, expected):
    assert parse_value(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "abc", "12px", 3.5, "3.5", "nan", True, [1]])
def test_parse_value_rejects(raw):
    with pytest.raises(InputValidationError, match="valid number"):
        parse_value(raw)


def test_require_node(chain_graph):
    assert require_node(chain_graph, 2) == "2"
    with pytest.raises(InputValidationError):
        require_node(chain_graph, "9")
    with pytest.raises(InputValidationError):
        require_node(chain_graph, None)
