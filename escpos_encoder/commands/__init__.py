"""
ESC/POS command builders for thermal receipt printers.

Pure functions and constants that return the exact byte sequences the
printer expects. Nothing here touches a transport or keeps state; the
stateful encoder lives in escpos_encoder.printer.

Module Structure:
    commands/
    ├── __init__.py          # This file (public API exports)
    ├── control.py           # Control bytes, init, cut, drawer, feed, status
    ├── text_formatting.py   # Font, size, style toggles, spacing, color
    ├── positioning.py       # Alignment, margin, cursor moves
    ├── charset.py           # International charset, Chinese mode
    ├── barcode.py           # GS k barcode framing
    └── graphics.py          # ( L graphics frame

Usage:
    >>> from escpos_encoder.commands import ESC_INIT, CUT_FULL, font_size
    >>> transport.write(ESC_INIT + font_size(1, 1) + b"Total\\n" + CUT_FULL)
"""

from escpos_encoder.commands.barcode import FRAMING_THRESHOLD, barcode_frame
from escpos_encoder.commands.charset import CHINESE_ON, international_charset
from escpos_encoder.commands.control import (
    CASH_PULSE,
    CUT_FULL,
    CUT_PARTIAL,
    DLE,
    DRAWER_PULSE,
    END_MARKER,
    EOT,
    ESC,
    ESC_INIT,
    FS,
    GS,
    LF,
    NUL,
    PULSE,
    formfeed_n,
    status_request,
)
from escpos_encoder.commands.graphics import GRAPHICS_PREFIX, graphics_frame, graphics_header
from escpos_encoder.commands.positioning import (
    MAX_LEFT_MARGIN,
    align,
    left_margin,
    move_x,
    move_y,
)
from escpos_encoder.commands.text_formatting import (
    MAX_FONT_SCALE,
    emphasize,
    font_color,
    font_size,
    font_style,
    letter_space,
    reverse,
    rotate,
    select_font,
    smooth,
    underline,
    upside_down,
)

__all__ = [
    # Control
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
    # Text formatting
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
    # Positioning
    "MAX_LEFT_MARGIN",
    "align",
    "left_margin",
    "move_x",
    "move_y",
    # Charset
    "CHINESE_ON",
    "international_charset",
    # Barcode
    "FRAMING_THRESHOLD",
    "barcode_frame",
    # Graphics
    "GRAPHICS_PREFIX",
    "graphics_header",
    "graphics_frame",
]
