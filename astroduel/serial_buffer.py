"""Receive buffer and output helpers for the serial console link."""

from collections import deque

UART_BUFFER_LENGTH = 256


class UartBuffer:
    """Ring buffer of received bytes.

    Holds at most ``UART_BUFFER_LENGTH - 1`` bytes. When it is full, each
    newly received byte pushes out the oldest one.
    """

    def __init__(self) -> None:
        self._bytes: deque[int] = deque(maxlen=UART_BUFFER_LENGTH - 1)

    def receive(self, byte: int) -> None:
        """Store one received byte; only the low eight bits are kept."""
        self._bytes.append(byte & 0xFF)

    def get_char(self) -> int:
        """Take the oldest byte, or return 0 when the buffer is empty."""
        if not self._bytes:
            return 0
        return self._bytes.popleft()

    def count(self) -> int:
        """Number of bytes waiting to be read."""
        return len(self._bytes)

    def clear(self) -> None:
        """Discard every waiting byte."""
        self._bytes.clear()

    def __len__(self) -> int:
        return len(self._bytes)


def translate_newlines(data: "str | bytes") -> "str | bytes":
    """Put a carriage return before every line feed, as the console expects."""
    if isinstance(data, str):
        return data.replace("\n", "\r\n")
    return bytes(data).replace(b"\n", b"\r\n")


def baud_divider(apbclock: int, baud: int, oversampling8: bool) -> int:
    """Value for the baud rate register, rounded to the nearest divider.

    With 8-sample oversampling the low nibble is shifted right by one bit,
    as the register layout requires in that mode.
    """
    if baud <= 0:
        raise ValueError(f"baud rate must be positive, got {baud}")
    if apbclock < 0:
        raise ValueError(f"clock frequency must not be negative, got {apbclock}")

    clock = ((2 * apbclock) & 0xFFFFFFFF) if oversampling8 else apbclock
    divider, remainder = divmod(clock, baud)
    if remainder >= baud // 2:
        divider += 1

    if oversampling8:
        divider = (divider & 0xFFF0) | ((divider & 0x000F) >> 1)

    return divider & 0xFFFF