"""
Character set commands for ESC/POS receipt printers.

International character set selection (affects codes 23h, 24h, 40h,
5Bh-5Eh, 60h, 7Bh-7Eh) and Chinese (double byte) character mode. Text
itself is transcoded to GB18030 by escpos_encoder.text.

Reference: ESC/POS Application Programming Guide, "Character" and
           "Kanji/Chinese" commands
"""

from typing import Final

from escpos_encoder.commands.control import ESC, FS

__all__ = [
    "CHINESE_ON",
    "international_charset",
]

CHINESE_ON: Final[bytes] = FS + b"&"
"""
Select Chinese character mode.

Command: FS &
Hex: 1C 26
Effect: Following GB18030 double byte codes print as Chinese characters.
"""


def international_charset(index: int) -> bytes:
    """
    Select international character set.

    Command: ESC R n
    Hex: 1B 52 n

    Args:
        index: 0 USA, 1 France, 2 Germany, 3 UK, 4 Denmark I, 5 Sweden,
               6 Italy, 7 Spain I, 8 Japan, 9 Norway.

    Example:
        >>> international_charset(2)
        b'\\x1bR\\x02'
    """
    return ESC + b"R" + bytes([index & 0xFF])
