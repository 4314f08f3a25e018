"""String and byte-buffer helpers with C library semantics."""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _as_char(char: CharLike) -> str:
    """Normalise a single character or an integer code to a one-char string.

    Integer codes are reduced to an unsigned byte first.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    return chr(int(char) & 0xFF)


def _check_limit(data: bytes, limit: int, name: str = "data") -> None:
    if limit < 0:
        raise ValueError("limit must not be negative")
    if limit > len(data):
        raise ValueError(f"limit {limit} exceeds the length of {name} ({len(data)})")


def split(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in charset from both ends of text."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end of text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find needle wholly inside the first limit characters of haystack.

    Returns the index of the first match, 0 for an empty needle, and None
    when there is no match.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most limit characters; return the code difference at the first mismatch."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    pairs = zip_longest(first[:limit], second[:limit], fillvalue=_NUL)
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def memcmp(first: bytes, second: bytes, limit: int) -> int:
    """Compare the first limit bytes; return the byte difference at the first mismatch."""
    _check_limit(first, limit, "first")
    _check_limit(second, limit, "second")
    for left, right in zip(first[:limit], second[:limit]):
        if left != right:
            return left - right
    return 0


def memchr(data: bytes, value: int, limit: int) -> Optional[int]:
    """Return the index of the first byte equal to value within limit bytes, or None."""
    _check_limit(data, limit)
    index = bytes(data).find(value & 0xFF, 0, limit)
    return None if index < 0 else index


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for the NUL character yields the length of text.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for the NUL character yields the length of text.
    """
    target = _as_char(char)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strlcpy(source: str, size: int) -> Tuple[str, int]:
    """Copy source into a buffer of size characters including the terminator.

    Returns the copied text and the full length of source.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(source)
    return source[: size - 1], len(source)


def strlcat(destination: str, source: str, size: int) -> Tuple[str, int]:
    """Append source to destination inside a buffer of size characters.

    Returns the resulting text and the length the full concatenation would
    have had. When destination already fills the buffer it is returned
    unchanged and the length reported is size plus the length of source.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(destination), size)
    if dst_len == size:
        return destination, size + len(source)
    room = size - dst_len - 1
    return destination + source[:room], dst_len + len(source)