"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

import sys
from typing import TextIO, Union

CodeOrChar = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def _code(value: CodeOrChar) -> int:
    """Return the integer code of a character or pass an integer through."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return int(value)


def _wrap_int32(value: int) -> int:
    """Truncate an integer to a signed 32-bit value."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, C style.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Anything unparsable yields 0. The
    result wraps to a signed 32-bit integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and text[position] in _DIGITS:
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def is_alpha(code: CodeOrChar) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def is_digit(code: CodeOrChar) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(code) <= 57


def is_alnum(code: CodeOrChar) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: CodeOrChar) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(code) <= 127


def is_print(code: CodeOrChar) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(code) <= 126


def to_upper(code: CodeOrChar) -> CodeOrChar:
    """Upper-case an ASCII letter; other values are returned unchanged.

    A character comes back as a character, an integer code as an integer.
    """
    value = _code(code)
    result = value - 32 if 97 <= value <= 122 else value
    return chr(result) if isinstance(code, str) else result


def to_lower(code: CodeOrChar) -> CodeOrChar:
    """Lower-case an ASCII letter; other values are returned unchanged.

    A character comes back as a character, an integer code as an integer.
    """
    value = _code(code)
    result = value + 32 if 65 <= value <= 90 else value
    return chr(result) if isinstance(code, str) else result


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of a 32-bit integer to a text stream."""
    target = sys.stdout if stream is None else stream
    target.write(itoa(number))