"""
Byte stream contract consumed by the encoder.

The encoder needs an object with ``write(bytes)`` and ``read(size)``. A
serial port (pyserial ``Serial``), a socket wrapped with ``makefile("rwb")``,
a USB endpoint wrapper or an open binary file all qualify. The encoder never
opens, flushes, or closes the transport; its lifetime belongs to the caller.

MemoryTransport is an in-process printer stand-in that records every write
and answers reads from a queue of scripted bytes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

__all__ = [
    "Transport",
    "MemoryTransport",
]


@runtime_checkable
class Transport(Protocol):
    """
    Bidirectional byte stream.

    Methods:
        write: Send bytes. Returns the number of bytes accepted, or None
               when the stream does not report it (treated as complete).
               Raises OSError on failure.
        read: Return up to ``size`` bytes. An empty result means no data
              arrived (EOF or timeout). Raises OSError on failure.
    """

    def write(self, data: bytes) -> Optional[int]: ...

    def read(self, size: int) -> bytes: ...


class MemoryTransport:
    """
    In-memory transport.

    Example:
        >>> transport = MemoryTransport(responses=b"\\x12")
        >>> transport.write(b"\\x10\\x04\\x01")
        3
        >>> transport.read(1)
        b'\\x12'
        >>> transport.getvalue()
        b'\\x10\\x04\\x01'
    """

    def __init__(self, responses: bytes = b"") -> None:
        self.writes: List[bytes] = []
        self._pending = bytearray(responses)

    def write(self, data: bytes) -> int:
        self.writes.append(bytes(data))
        return len(data)

    def read(self, size: int) -> bytes:
        chunk = bytes(self._pending[:size])
        del self._pending[:size]
        return chunk

    def feed(self, data: bytes) -> None:
        """Queue bytes for subsequent reads."""
        self._pending.extend(data)

    def getvalue(self) -> bytes:
        """All written bytes, concatenated."""
        return b"".join(self.writes)

    def clear(self) -> None:
        self.writes.clear()
