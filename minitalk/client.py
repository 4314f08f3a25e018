"""Sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, Iterable, Sequence

from minitalk.charclass import atoi
from minitalk.printf import printf
from minitalk.protocol import WORD_SIZE, encode_message, is_valid_pid

CHAR_DELAY = 0.00075
END_DELAY = 0.0015

KillFunc = Callable[[int, int], None]
SleepFunc = Callable[[float], None]


def _signal_for(bit: int) -> int:
    if bit == 0:
        return signal.SIGUSR1
    if bit == 1:
        return signal.SIGUSR2
    raise ValueError(f"bit must be 0 or 1, got {bit!r}")


def _transmit(
    pid: int, bits: Iterable[int], delay: float, kill: KillFunc, sleep: SleepFunc
) -> None:
    for bit in bits:
        kill(pid, _signal_for(bit))
        sleep(delay)


def send_bits(
    pid: int, bits: Iterable[int], delay: float = CHAR_DELAY, kill: KillFunc | None = None
) -> None:
    """Signal each bit to pid: SIGUSR1 for 0, SIGUSR2 for 1, pausing after each."""
    _transmit(pid, bits, delay, os.kill if kill is None else kill, time.sleep)


def send_message(
    pid: int,
    text: str | bytes,
    kill: KillFunc | None = None,
    sleep: SleepFunc | None = None,
) -> None:
    """Send text and its terminator; the terminator gets a longer pause per bit."""
    kill = os.kill if kill is None else kill
    sleep = time.sleep if sleep is None else sleep
    bits = list(encode_message(text))
    _transmit(pid, bits[:-WORD_SIZE], CHAR_DELAY, kill, sleep)
    _transmit(pid, bits[-WORD_SIZE:], END_DELAY, kill, sleep)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry: client <PID> <string>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Invalid format : ./client <PID> <string>\n")
        return 0
    pid_text, text = args
    if not is_valid_pid(pid_text):
        printf("PID contains invalid characters!\n")
        return 0
    send_message(atoi(pid_text), text)
    return 0