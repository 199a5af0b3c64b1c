"""
Graphics commands for ESC/POS receipt printers.

Contains the generic length-prefixed graphics frame (``( L``). The data is
passed through untouched: callers supply already rasterized parameters
and payload for the chosen function.

Frame layout:
    ESC ( L pL pH m fn d1...dk
    pL pH = little-endian (k + 2), the length covers m and fn.

Reference: ESC/POS Application Programming Guide, "Graphics" functions
"""

from typing import Final

from escpos_encoder.commands.control import ESC

__all__ = [
    "GRAPHICS_PREFIX",
    "graphics_header",
    "graphics_frame",
]

GRAPHICS_PREFIX: Final[bytes] = ESC + b"(L"


def graphics_header(m: int, fn: int, data_length: int) -> bytes:
    """
    Four-byte header: pL pH m fn.

    Example:
        >>> graphics_header(48, 50, 0)
        b'\\x02\\x0002'
    """
    length = data_length + 2
    return bytes([length % 256, (length // 256) & 0xFF, m & 0xFF, fn & 0xFF])


def graphics_frame(m: int, fn: int, data: bytes) -> bytes:
    """
    Frame ``data`` as a graphics sub-command.

    Args:
        m: Mode byte (48 for graphics functions).
        fn: Function byte.
        data: Parameters and payload, sent untransformed.

    Returns:
        ESC ( L + header + data.

    Raises:
        ValueError: If data is longer than the 16-bit length field allows.
    """
    if len(data) + 2 > 0xFFFF:
        raise ValueError(f"Graphics payload too large: {len(data)} bytes")

    return GRAPHICS_PREFIX + graphics_header(m, fn, len(data)) + bytes(data)
