"""Bit-level wire format: each byte travels as eight bits, most significant first."""

from __future__ import annotations

from typing import Iterable, Iterator

from minitalk.charclass import is_digit

WORD_SIZE = 8
MASK_DEC = 0x01
MASK_ENC = 0x80


def encode_byte(value: int) -> tuple[int, ...]:
    """Return the eight bits of a byte, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return tuple(1 if value & (MASK_ENC >> shift) else 0 for shift in range(WORD_SIZE))


def decode_bits(bits: Iterable[int]) -> int:
    """Rebuild a byte from eight bits given most significant first."""
    word = tuple(bits)
    if len(word) != WORD_SIZE:
        raise ValueError(f"expected {WORD_SIZE} bits, got {len(word)}")
    if any(bit not in (0, 1) for bit in word):
        raise ValueError(f"bits must be 0 or 1: {word!r}")
    result = 0
    for position, bit in enumerate(word):
        result |= (bit * MASK_DEC) << (WORD_SIZE - 1 - position)
    return result


def _to_bytes(text: str | bytes) -> bytes:
    data = text.encode("utf-8", "surrogateescape") if isinstance(text, str) else bytes(text)
    if b"\0" in data:
        raise ValueError("a message cannot contain a NUL byte")
    return data


def _message_bits(data: bytes) -> Iterator[int]:
    for byte in data + b"\0":
        yield from encode_byte(byte)


def encode_message(text: str | bytes) -> Iterator[int]:
    """Return the bits of a message followed by its NUL terminator."""
    return _message_bits(_to_bytes(text))


def is_valid_pid(text: str) -> bool:
    """True when every character of text is a decimal digit."""
    return all(is_digit(char) for char in text)


class Decoder:
    """Reassembles messages from a stream of bits."""

    def __init__(self) -> None:
        self._bits: list[int] = []
        self._message = bytearray()

    def feed(self, bit: int) -> bytes | None:
        """Take one bit; return the whole message once its terminator arrives."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._bits.append(bit)
        if len(self._bits) < WORD_SIZE:
            return None
        byte = decode_bits(self._bits)
        self._bits.clear()
        if byte == 0:
            message = bytes(self._message)
            self._message.clear()
            return message
        self._message.append(byte)
        return None