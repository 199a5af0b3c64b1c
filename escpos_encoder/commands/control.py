"""
Printer control commands for ESC/POS receipt printers.

Contains the control byte constants and the commands that do not change
text style: hardware initialize, end of transmission, paper cut, cash
drawer pulses, paper feed and real-time status requests.

Reference: ESC/POS Application Programming Guide (Epson TM series)
"""

from typing import Final

__all__ = [
    "NUL",
    "LF",
    "EOT",
    "DLE",
    "ESC",
    "FS",
    "GS",
    "ESC_INIT",
    "END_MARKER",
    "CUT_FULL",
    "CUT_PARTIAL",
    "DRAWER_PULSE",
    "CASH_PULSE",
    "PULSE",
    "formfeed_n",
    "status_request",
]

# =============================================================================
# CONTROL BYTES
# =============================================================================

NUL: Final[bytes] = b"\x00"
LF: Final[bytes] = b"\n"
EOT: Final[bytes] = b"\x04"  # End of Transmission
DLE: Final[bytes] = b"\x10"  # Data Link Escape
ESC: Final[bytes] = b"\x1b"
FS: Final[bytes] = b"\x1c"
GS: Final[bytes] = b"\x1d"  # Group Separator

# =============================================================================
# SESSION
# =============================================================================

ESC_INIT: Final[bytes] = ESC + b"@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and restores power-on defaults
        (font scale 1x1, all emphasis/orientation toggles off).

Example:
    >>> transport.write(ESC_INIT + b"Receipt\\n")
"""

END_MARKER: Final[bytes] = b"\xfa"
"""
End of output marker.

Hex: FA
Note: Single raw byte. Must not be transcoded (0xFA is not ASCII).
"""

# =============================================================================
# PAPER CUT
# =============================================================================

CUT_FULL: Final[bytes] = GS + b"VA0"
"""
Feed to cutting position and cut.

Command: GS V A 0
Hex: 1D 56 41 30
"""

CUT_PARTIAL: Final[bytes] = GS + b"V\x01"
"""
Partial cut (one point left uncut).

Command: GS V 1
Hex: 1D 56 01
"""

# =============================================================================
# CASH DRAWER
# =============================================================================

DRAWER_PULSE: Final[bytes] = ESC + b"p\x00\x0a\x0a"
"""
Open cash drawer (pin 2, 20 ms on / 20 ms off).

Command: ESC p 0 10 10
Hex: 1B 70 00 0A 0A
"""

CASH_PULSE: Final[bytes] = ESC + b"p\x00\x0a\xff"
"""
Cash drawer pulse with maximum off time.

Command: ESC p 0 10 255
Hex: 1B 70 00 0A FF
"""

PULSE: Final[bytes] = ESC + b"p\x02"
"""
Short drawer pulse (t=2, i.e. 2 x 2 ms).

Command: ESC p 2
Hex: 1B 70 02
"""

# =============================================================================
# PAPER FEED
# =============================================================================


def formfeed_n(n: int) -> bytes:
    """
    Print buffer and feed ``n`` lines.

    Command: ESC d n
    Hex: 1B 64 n

    Args:
        n: Line count. Only the low byte is sent, so 256 becomes 0.

    Returns:
        ESC/POS command bytes.

    Example:
        >>> formfeed_n(3)
        b'\\x1bd\\x03'
    """
    return ESC + b"d" + bytes([n & 0xFF])


# =============================================================================
# STATUS
# =============================================================================


def status_request(n: int) -> bytes:
    """
    Real-time status transmission request.

    Command: DLE EOT n
    Hex: 10 04 n

    The printer answers with exactly one status byte.

    Args:
        n: Status kind (1 printer, 2 offline cause, 3 error cause, 4 paper).

    Returns:
        ESC/POS command bytes.
    """
    return DLE + EOT + bytes([n & 0xFF])
