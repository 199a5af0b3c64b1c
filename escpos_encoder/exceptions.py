"""
Exceptions raised by the ESC/POS command encoder.

Hierarchy:
    EscposError (base)
    ├── TransportError      write/read on the byte stream failed
    └── EncodingError       text could not be transcoded for the printer

Example:
    >>> from escpos_encoder.exceptions import EscposError
    >>> try:
    ...     session.cut()
    ... except EscposError as e:
    ...     logger.error(f"Printer command failed: {e}")
    ...     print(f"Command: {e.command}")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "EscposError",
    "TransportError",
    "EncodingError",
]


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class EscposError(Exception):
    """
    Base exception for every encoder error.

    Attributes:
        message: Human readable description.
        command: Name of the encoder operation that failed (optional).
        context: Extra debugging details (optional).
    """

    def __init__(
        self,
        message: str,
        *,
        command: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.command = command
        self.context = context or {}

    def __str__(self) -> str:
        """
        Format the message with the command name and context.

        Example:
            >>> str(TransportError("write failed", command="cut"))
            'TransportError: write failed [command=cut]'
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.command:
            parts.append(f" [command={self.command}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"command={self.command!r}, "
            f"context={self.context!r})"
        )


# ==============================================================================
# TRANSPORT ERRORS
# ==============================================================================


class TransportError(EscposError):
    """
    The transport failed to accept or deliver bytes.

    Raised when:
    - transport.write() raises OSError or reports a short write
    - transport.read() raises OSError or returns no data

    When raised from a style setter, the in-memory style has already been
    updated while the printer may not have received the command. Callers
    that catch it should re-send the style (e.g. ``session.init()``).
    """

    pass


# ==============================================================================
# ENCODING ERRORS
# ==============================================================================


class EncodingError(EscposError, ValueError):
    """
    Text could not be converted to the printer character encoding.

    Attributes:
        encoding: Codec name that failed.

    Example:
        >>> session = PrinterSession(transport, {"encoding": "ascii"})
        >>> session.write("Привет")
        EncodingError: cannot encode text with 'ascii' [command=write]
    """

    def __init__(
        self,
        message: str,
        *,
        encoding: Optional[str] = None,
        command: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, command=command, context=context)
        self.encoding = encoding
