"""
Positioning commands for ESC/POS receipt printers.

Justification, left margin and absolute cursor moves. Positions are sent
as 16-bit little-endian values (nL nH).

Reference: ESC/POS Application Programming Guide, "Print position" commands
"""

from typing import Final

from escpos_encoder.commands.control import ESC, GS

__all__ = [
    "MAX_LEFT_MARGIN",
    "align",
    "left_margin",
    "move_x",
    "move_y",
]

MAX_LEFT_MARGIN: Final[int] = 47
"""Largest left margin the encoder transmits."""


def _le16(value: int) -> bytes:
    return bytes([value % 256, (value // 256) & 0xFF])


def align(index: int) -> bytes:
    """
    Select justification.

    Command: ESC a n
    Hex: 1B 61 n

    Args:
        index: 0 = left, 1 = center, 2 = right.
    """
    return ESC + b"a" + bytes([index & 0xFF])


def left_margin(size: int) -> bytes:
    """
    Set left margin.

    Command: GS L nL nH
    Hex: 1D 4C nL nH

    Args:
        size: Margin in motion units (0-47).

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If size is negative or greater than 47.

    Example:
        >>> left_margin(10)
        b'\\x1dL\\n\\x00'
    """
    if not (0 <= size <= MAX_LEFT_MARGIN):
        raise ValueError(f"Left margin must be 0-{MAX_LEFT_MARGIN}, got {size}")

    return GS + b"L" + _le16(size)


def move_x(x: int) -> bytes:
    """
    Set absolute horizontal print position.

    Command: ESC $ nL nH
    Hex: 1B 24 nL nH
    """
    return ESC + b"$" + _le16(x)


def move_y(y: int) -> bytes:
    """
    Set absolute vertical print position (page mode).

    Command: GS $ nL nH
    Hex: 1D 24 nL nH
    """
    return GS + b"$" + _le16(y)
