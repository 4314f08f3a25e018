"""Signal-driven receiver that prints each message it reassembles."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import Sequence, TextIO

from minitalk.printf import printf
from minitalk.protocol import Decoder


class MessageServer:
    """Turns SIGUSR1 (bit 0) and SIGUSR2 (bit 1) into printed messages."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.decoder = Decoder()

    def handle_signal(self, signum: int, frame: FrameType | None = None) -> str | None:
        """Record one bit; print and return the message when it is complete."""
        if signum == signal.SIGUSR1:
            bit = 0
        elif signum == signal.SIGUSR2:
            bit = 1
        else:
            raise ValueError(f"unexpected signal: {signum}")
        message = self.decoder.feed(bit)
        if message is None:
            return None
        text = message.decode("utf-8", errors="replace")
        target = sys.stdout if self.stream is None else self.stream
        printf("%s\n", text, stream=target)
        target.flush()
        return text

    def install(self) -> None:
        """Register the handler for SIGUSR1 and SIGUSR2."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the process id and wait for messages until interrupted."""
    server = MessageServer()
    server.install()
    printf("PID : [%d]\n", os.getpid())
    printf("waiting message from the client...\n")
    sys.stdout.flush()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 130