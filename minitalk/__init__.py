"""Pass text between processes as a stream of SIGUSR1/SIGUSR2 bits, with small formatting and string helpers."""

__version__ = "0.1.0"