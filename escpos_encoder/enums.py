"""
enums.py

Closed option types for the ESC/POS encoder.

Every enum that is selected by a string on the wire side (font, alignment,
language, feed mode) offers ``parse()`` which accepts a member or its exact
string value and falls back to a fixed default for anything else. Values
from configuration files or user input therefore never raise; the fallback
is logged at WARNING.

NO command bytes here. See escpos_encoder.commands for the protocol.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Any, Final, Optional

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Font(str, Enum):
    A = "A"
    B = "B"
    C = "C"

    @property
    def index(self) -> int:
        return _FONT_INDEX[self]

    @classmethod
    def parse(cls, value: Any) -> "Font":
        """Return the matching font, or Font.A for unknown input."""
        return _parse(cls, value, cls.A)


_FONT_INDEX: Final = {Font.A: 0, Font.B: 1, Font.C: 2}


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def index(self) -> int:
        return _ALIGN_INDEX[self]

    @classmethod
    def parse(cls, value: Any) -> "Alignment":
        """Return the matching alignment, or Alignment.LEFT for unknown input."""
        return _parse(cls, value, cls.LEFT)


_ALIGN_INDEX: Final = {Alignment.LEFT: 0, Alignment.CENTER: 1, Alignment.RIGHT: 2}


class Language(str, Enum):
    """International character sets selectable with ESC R n."""

    EN = "en"  # USA
    FR = "fr"  # France
    DE = "de"  # Germany
    UK = "uk"  # United Kingdom
    DA = "da"  # Denmark I
    SV = "sv"  # Sweden
    IT = "it"  # Italy
    ES = "es"  # Spain I
    JA = "ja"  # Japan
    NO = "no"  # Norway

    @property
    def index(self) -> int:
        return list(Language).index(self)

    @classmethod
    def parse(cls, value: Any) -> "Language":
        """Return the matching language, or Language.EN for unknown input."""
        return _parse(cls, value, cls.EN)


class FeedMode(str, Enum):
    """What feed_and_cut does before cutting."""

    FEED = "feed"
    CUT_ONLY = "cut"

    @classmethod
    def parse(cls, value: Any) -> "FeedMode":
        """
        Resolve a feed mode.

        Accepts a member, a string, or a legacy ``{"type": ...}`` mapping.
        Only ``"feed"`` selects FEED; everything else (including a missing
        ``type`` key) is CUT_ONLY. No warning is logged since any other value
        is a valid "cut only" request.
        """
        if isinstance(value, dict):
            value = value.get("type")
        if isinstance(value, cls):
            return value
        if value == cls.FEED.value:
            return cls.FEED
        return cls.CUT_ONLY


class BarcodeFormat(IntEnum):
    """
    Barcode formats accepted by GS k.

    Formats below 69 are NUL-terminated, formats above 69 carry a length
    prefix. The member value doubles as the type code byte.
    """

    UPC_A = 0
    UPC_E = 1
    EAN13 = 2
    EAN8 = 3
    CODE39 = 4
    CODE128 = 73

    @property
    def type_code(self) -> bytes:
        return bytes([self.value])

    @classmethod
    def type_code_for(cls, fmt: int) -> bytes:
        """Type code byte for ``fmt``, or b"" when the format is not mapped."""
        try:
            return cls(fmt).type_code
        except ValueError:
            return b""


class StatusRequest(IntEnum):
    """Status kinds for DLE EOT n."""

    PRINTER = 1
    OFFLINE = 2
    ERROR = 3
    PAPER = 4


def _parse(enum_cls: Any, value: Any, default: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    member: Optional[Any] = None
    if isinstance(value, str):
        member = enum_cls._value2member_map_.get(value)
    if member is None:
        _logger.warning(
            "Unknown %s %r, falling back to %s", enum_cls.__name__, value, default.value
        )
        return default
    return member
