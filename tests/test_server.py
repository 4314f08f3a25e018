import io
import os
import signal
from unittest.mock import patch

import pytest

from minitalk.protocol import encode_message
from minitalk.server import MessageServer, main


def _signal_for(bit):
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def _deliver(server, text):
    return [server.handle_signal(_signal_for(bit), None) for bit in encode_message(text)]


@pytest.fixture
def restore_handlers():
    saved = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))
    yield
    signal.signal(signal.SIGUSR1, saved[0])
    signal.signal(signal.SIGUSR2, saved[1])


def test_message_is_printed_and_returned():
    stream = io.StringIO()
    server = MessageServer(stream=stream)
    results = _deliver(server, "hi")
    assert results[-1] == "hi"
    assert all(result is None for result in results[:-1])
    assert stream.getvalue() == "hi\n"


def test_consecutive_messages_are_printed_in_order():
    stream = io.StringIO()
    server = MessageServer(stream=stream)
    _deliver(server, "first")
    _deliver(server, "second")
    assert stream.getvalue() == "first\nsecond\n"


def test_unicode_message():
    stream = io.StringIO()
    server = MessageServer(stream=stream)
    _deliver(server, "naïve")
    assert stream.getvalue() == "naïve\n"


def test_default_stream_is_stdout(capsys):
    server = MessageServer()
    _deliver(server, "out")
    assert capsys.readouterr().out == "out\n"


def test_unexpected_signal_rejected():
    with pytest.raises(ValueError):
        MessageServer(stream=io.StringIO()).handle_signal(signal.SIGINT, None)


def test_install_registers_handlers(restore_handlers):
    server = MessageServer(stream=io.StringIO())
    server.install()
    assert signal.getsignal(signal.SIGUSR1) == server.handle_signal
    assert signal.getsignal(signal.SIGUSR2) == server.handle_signal


def test_main_prints_banner_and_stops_on_interrupt(capsys, restore_handlers):
    with patch("signal.pause", side_effect=KeyboardInterrupt):
        status = main()
    out = capsys.readouterr().out
    assert out.startswith(f"PID : [{os.getpid()}]\n")
    assert "waiting message from the client...\n" in out
    assert status == 130