"""
Text style commands for ESC/POS receipt printers.

Font selection, character scale, print mode, color, letter spacing and
the persistent style toggles (underline, emphasize, upside-down, rotate,
reverse, smoothing). Toggle builders pass the value through verbatim as
the parameter byte; the printer interprets it.

Reference: ESC/POS Application Programming Guide, "Character" commands
"""

from typing import Final

from escpos_encoder.commands.control import ESC, GS

__all__ = [
    "MAX_FONT_SCALE",
    "select_font",
    "font_size",
    "font_style",
    "font_color",
    "letter_space",
    "underline",
    "emphasize",
    "upside_down",
    "rotate",
    "reverse",
    "smooth",
]

MAX_FONT_SCALE: Final[int] = 7
"""Largest width/height value accepted by GS ! (scale 8x)."""

# =============================================================================
# FONT
# =============================================================================


def select_font(index: int) -> bytes:
    """
    Select character font.

    Command: ESC M n
    Hex: 1B 4D n

    Args:
        index: 0 = Font A (12x24), 1 = Font B (9x17), 2 = Font C.
    """
    return ESC + b"M" + bytes([index & 0xFF])


def font_size(width: int, height: int) -> bytes:
    """
    Select character size.

    Command: GS ! n
    Hex: 1D 21 n
    Encoding: n = (width << 4) | height

    Args:
        width: Horizontal scale value (0-7).
        height: Vertical scale value (0-7).

    Returns:
        ESC/POS command bytes.

    Raises:
        ValueError: If width or height is outside 0-7.

    Example:
        >>> font_size(1, 1)
        b'\\x1d!\\x11'
    """
    if not (0 <= width <= MAX_FONT_SCALE and 0 <= height <= MAX_FONT_SCALE):
        raise ValueError(f"Font scale must be 0-{MAX_FONT_SCALE}, got {width}x{height}")

    return GS + b"!" + bytes([(width << 4) | height])


def font_style(style: int) -> bytes:
    """
    Select print mode.

    Command: ESC ! n
    Hex: 1B 21 n
    """
    return ESC + b"!" + bytes([style & 0xFF])


def font_color(color: int) -> bytes:
    """
    Select print color (two-color printers).

    Command: ESC r n
    Hex: 1B 72 n
    """
    return ESC + b"r" + bytes([color & 0xFF])


def letter_space(n: int) -> bytes:
    """
    Set right-side character spacing in motion units.

    Command: ESC SP n
    Hex: 1B 20 n
    """
    return ESC + b" " + bytes([n & 0xFF])


# =============================================================================
# STYLE TOGGLES
# =============================================================================


def underline(v: int) -> bytes:
    """ESC - n (1B 2D n): underline off/1-dot/2-dot."""
    return ESC + b"-" + bytes([v & 0xFF])


def emphasize(v: int) -> bytes:
    """ESC G n (1B 47 n): double-strike."""
    return ESC + b"G" + bytes([v & 0xFF])


def upside_down(v: int) -> bytes:
    """ESC { n (1B 7B n): upside-down print mode."""
    return ESC + b"{" + bytes([v & 0xFF])


def rotate(v: int) -> bytes:
    # Same command byte as the international charset select.
    return ESC + b"R" + bytes([v & 0xFF])


def reverse(v: int) -> bytes:
    """GS B n (1D 42 n): white/black reverse print."""
    return GS + b"B" + bytes([v & 0xFF])


def smooth(v: int) -> bytes:
    """GS b n (1D 62 n): smoothing."""
    return GS + b"b" + bytes([v & 0xFF])
