# minitalk

A tiny message channel between two processes on the same POSIX machine.
The client sends a string to the server one bit at a time: `SIGUSR1`
carries a `0`, `SIGUSR2` carries a `1`. Each byte goes most significant
bit first. A terminating zero byte tells the server that the message is
complete, and the server then prints it on a line of its own.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and waits
until it is interrupted:

```
$ minitalk-server
PID : [12345]
waiting message from the client...
```

From another terminal, send a message to that process id:

```
$ minitalk-client 12345 "hello there"
```

The server prints:

```
hello there
```

The client takes exactly two arguments, a process id and a string.
If the count is wrong, it prints the usage line
`Invalid format : ./client <PID> <string>`. If the process id holds
anything other than digits, it prints `PID contains invalid characters!`.
Nothing is sent in either case.

The text is sent as UTF-8. It cannot contain a NUL character, since a
zero byte ends a message; such a string is refused with `ValueError`.
The client pauses 0.75 ms after each bit of the text and 1.5 ms after
each bit of the terminator.

## Library use

The encoding is available without sending any signals:

```python
from minitalk.protocol import Decoder, encode_byte, encode_message

encode_byte(ord("A"))            # (0, 1, 0, 0, 0, 0, 0, 1)
bits = encode_message("hi")      # bits of "hi", then the terminating zero byte

decoder = Decoder()
for bit in bits:
    message = decoder.feed(bit)  # None until the zero byte arrives, then b"hi"
```

`minitalk.protocol` also offers `decode_bits` (eight bits back to a byte)
and `is_valid_pid` (true when a string holds only decimal digits).

`minitalk.client.send_message(pid, text, kill=None, sleep=None)` takes the
functions it uses to send a signal and to pause between signals, so a
transport can be swapped in or observed; `send_bits` sends a plain
sequence of bits. `minitalk.server.MessageServer` holds the state on the
receiving side: `handle_signal` takes one signal number, and when a
message completes it prints it and returns it as text.
`MessageServer.install` registers that handler for `SIGUSR1` and
`SIGUSR2`.

The package also carries the small helpers the programs are built on:

- `minitalk.printf`: `render`, `printf`, `format_number`,
  `format_pointer` and `FormatError`, a formatter for the `%c %s %p %d
  %i %u %x %X %%` conversions.
- `minitalk.charclass`: `atoi`, `itoa`, `put_number`, `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`.
- `minitalk.strtools`: `split`, `strtrim`, `substr`, `strnstr`,
  `strncmp`, `memcmp`, `memchr`, `strchr`, `strrchr`, `strlcpy`,
  `strlcat`.

## Limitations

- There is no acknowledgement from the server: the client relies on its
  pauses, and bits lost to signal coalescing corrupt the message.
- The client does not check that the process exists; sending to an
  unknown process id fails with the error `os.kill` raises.
- Signals `SIGUSR1` and `SIGUSR2` are needed, so the commands do not run
  on Windows.

## Tests

```
pip install ".[test]"
pytest
```