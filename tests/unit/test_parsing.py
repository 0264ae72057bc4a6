"""Unit tests for configuration token trimming and value parsing helpers."""

import pytest

from vpnconfig.models.datatypes import TriState
from vpnconfig.parsing import (
    parse_config_boolean,
    parse_prefix_integer,
    strtob,
    trim_config_token,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  host  ", "host"),
        ("\tvalue \r", "value"),
        ("a", "a"),
        ("a \v\f", "a"),
        ("inner  space ", "inner  space"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_trim_config_token_strips_c_whitespace(raw: str, expected: str) -> None:
    """Trimming should drop leading and trailing C whitespace only."""

    assert trim_config_token(raw) == expected


def test_trim_config_token_keeps_non_ascii_whitespace() -> None:
    """Unicode spaces are not C whitespace and should survive trimming."""

    assert trim_config_token("value\u00a0") == "value\u00a0"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("443", 443),
        (" 12", 12),
        ("+7", 7),
        ("-5", -5),
        ("0x1bb", 443),
        ("0X1BB", 443),
        ("010", 8),
        ("443abc", 443),
        ("0x", 0),
        ("09", 0),
        ("0", 0),
    ],
)
def test_parse_prefix_integer_detects_base_and_stops_at_garbage(
    text: str, expected: int
) -> None:
    """Prefix parsing should follow automatic base detection rules."""

    assert parse_prefix_integer(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", " ", "x10"])
def test_parse_prefix_integer_returns_none_without_digits(text: str) -> None:
    """Inputs without a leading integer should be reported as unparseable."""

    assert parse_prefix_integer(text) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRUE", 1),
        ("true", 1),
        ("TrUe", 1),
        ("false", 0),
        ("FALSE", 0),
        ("", 0),
        ("1", 1),
        ("0", 0),
        ("1abc", 1),
        ("0x1", 1),
        ("01", 1),
        ("2", -1),
        ("10", -1),
        ("yes", -1),
        ("no", -1),
        ("-1", -1),
        (" 1", -1),
    ],
)
def test_strtob_matches_integer_contract(value: str, expected: int) -> None:
    """`strtob` should return 1, 0, or -1 for unrecognized values."""

    assert strtob(value) == expected


def test_parse_config_boolean_returns_tristate_members() -> None:
    """The enum form should map onto `TriState` and `None` for invalid input."""

    assert parse_config_boolean("true") is TriState.TRUE
    assert parse_config_boolean("") is TriState.FALSE
    assert parse_config_boolean("0") is TriState.FALSE
    assert parse_config_boolean("on") is None
