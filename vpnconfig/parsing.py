"""Shared parsing helpers for configuration line values."""

from __future__ import annotations

from .models.datatypes import TriState


# Same set as C `isspace` in the "C" locale.
C_WHITESPACE = " \t\n\v\f\r"

_DECIMAL_DIGITS = "0123456789"
_OCTAL_DIGITS = "01234567"
_HEX_DIGITS = "0123456789abcdefABCDEF"


def trim_config_token(text: str) -> str:
    """Trim C whitespace around a key or value token.

    Leading whitespace is removed completely. Trailing whitespace is removed
    down to index 1 only, so the first character of the token is never
    inspected by the trailing pass.
    """

    stripped = text.lstrip(C_WHITESPACE)
    return stripped[:1] + stripped[1:].rstrip(C_WHITESPACE)


def parse_prefix_integer(text: str) -> int | None:
    """Parse the leading integer of `text` with automatic base detection.

    Accepts optional leading whitespace and sign, then a `0x` hexadecimal,
    `0` octal, or decimal literal. Parsing stops at the first character that
    is not a digit of the detected base; trailing content is ignored.

    Returns:
        The parsed integer, or `None` when no digit could be consumed.
    """

    index = 0
    length = len(text)
    while index < length and text[index] in C_WHITESPACE:
        index += 1

    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1

    if (
        text.startswith(("0x", "0X"), index)
        and index + 2 < length
        and text[index + 2] in _HEX_DIGITS
    ):
        base, digits = 16, _HEX_DIGITS
        index += 2
    elif text.startswith("0", index):
        base, digits = 8, _OCTAL_DIGITS
    else:
        base, digits = 10, _DECIMAL_DIGITS

    start = index
    while index < length and text[index] in digits:
        index += 1
    if index == start:
        return None
    return sign * int(text[start:index], base)


def parse_config_boolean(value: str) -> TriState | None:
    """Parse a configuration boolean and return `None` for invalid values.

    Accepted forms: empty string (false), `true`/`false` in any case, and an
    integer literal starting with a digit whose value is exactly 0 or 1.
    """

    if value == "":
        return TriState.FALSE
    lowered = value.lower()
    if lowered == "true":
        return TriState.TRUE
    if lowered == "false":
        return TriState.FALSE
    if value[0] not in _DECIMAL_DIGITS:
        return None

    parsed = parse_prefix_integer(value)
    if parsed == 0:
        return TriState.FALSE
    if parsed == 1:
        return TriState.TRUE
    return None


def strtob(value: str) -> int:
    """Integer form of `parse_config_boolean`: 1, 0, or -1 when unrecognized."""

    parsed = parse_config_boolean(value)
    if parsed is None:
        return -1
    return parsed.value
