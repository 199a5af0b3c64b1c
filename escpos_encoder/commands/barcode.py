"""
Barcode commands for ESC/POS receipt printers.

Frames barcode data for GS k. Two framings exist, selected by the
format number:

    format < 69:  GS k m d1...dk NUL        (NUL terminated)
    format > 69:  GS k m <len> d1...dk      (length prefixed)

The length prefix is the payload length written as decimal ASCII text
(``"5"`` for five bytes), not a binary byte. Format 69 itself has no
framing and produces no frame bytes.

Reference: ESC/POS Application Programming Guide, GS k
"""

from typing import Final

from escpos_encoder.commands.control import GS, NUL

__all__ = [
    "FRAMING_THRESHOLD",
    "barcode_frame",
]

FRAMING_THRESHOLD: Final[int] = 69


def barcode_frame(type_code: bytes, fmt: int, data: bytes) -> bytes:
    """
    Build the GS k frame for an already encoded barcode payload.

    Args:
        type_code: One-byte barcode type (see BarcodeFormat.type_code_for).
                   Empty for unmapped formats, in which case the frame
                   carries no type byte.
        fmt: Format number used to pick the framing.
        data: Barcode payload bytes.

    Returns:
        Frame bytes, or b"" when ``fmt`` is 69.

    Example:
        >>> barcode_frame(b"\\x03", 3, b"12345")
        b'\\x1dk\\x0312345\\x00'
        >>> barcode_frame(b"I", 73, b"12345")
        b'\\x1dkI512345'
    """
    if fmt > FRAMING_THRESHOLD:
        return GS + b"k" + type_code + str(len(data)).encode("ascii") + data
    if fmt < FRAMING_THRESHOLD:
        return GS + b"k" + type_code + data + NUL
    return b""
