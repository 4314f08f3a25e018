"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF


class FormatError(ValueError):
    """Raised when a template cannot be rendered."""


def _to_int32(value: int) -> int:
    return (int(value) + 2**31) % 2**32 - 2**31


def format_number(number: int, base: int = 10, upper: bool = False) -> str:
    """Return number written in base (2 to 16), with a leading '-' when negative."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if number < 0:
        return "-" + format_number(-number, base, upper)
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if not number:
            break
    return "".join(reversed(out))


def format_pointer(address: int) -> str:
    """Return '(nil)' for a null address, otherwise '0x' and lower-case hex."""
    if address < 0:
        raise ValueError("an address cannot be negative")
    if address == 0:
        return "(nil)"
    return "0x" + format_number(address, 16)


def _next_arg(values: Iterator[Any], flag: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise FormatError(f"no argument left for '%{flag}'") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"'%c' expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(flag: str, values: Iterator[Any]) -> str:
    if flag == "%":
        return "%"
    if flag not in "cspiduxX":
        return "%" + flag
    value = _next_arg(values, flag)
    if flag == "c":
        return _char(value)
    if flag == "s":
        return "(null)" if value is None else str(value)
    if flag == "p":
        return format_pointer(int(value))
    if flag in "id":
        return format_number(_to_int32(value))
    unsigned = int(value) & _UINT32_MASK
    if flag == "u":
        return format_number(unsigned)
    return format_number(unsigned, 16, upper=flag == "X")


def _chunks(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    position = 0
    length = len(template)
    while position < length:
        percent = template.find("%", position)
        if percent < 0:
            yield template[position:]
            return
        if percent > position:
            yield template[position:percent]
        if percent + 1 >= length:
            raise FormatError("template ends with a lone '%'")
        yield _convert(template[percent + 1], values)
        position = percent + 2


def render(template: str, *args: Any) -> str:
    """Return the template with its conversions filled in from args."""
    return "".join(_chunks(template, args))


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered template to stream (stdout by default).

    Returns the number of characters written. Output produced before a
    malformed part of the template is still written before FormatError
    is raised.
    """
    target = sys.stdout if stream is None else stream
    written = 0
    for chunk in _chunks(template, args):
        target.write(chunk)
        written += len(chunk)
    return written