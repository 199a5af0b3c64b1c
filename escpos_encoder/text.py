"""
Text transcoding for ESC/POS printers.

Printers with a Chinese font expect GB18030 (a superset of GBK/GB2312).
ASCII is unchanged by GB18030, so control sequences written as text survive
the conversion byte for byte.

Template engines often hand over XML-escaped text; ``unescape_entities``
turns the few entities receipts use back into characters.
"""

from __future__ import annotations

import codecs
import logging
from typing import Final, Tuple

from escpos_encoder.exceptions import EncodingError

__all__ = [
    "DEFAULT_ENCODING",
    "ENCODING_ERROR_MODES",
    "ENTITY_REPLACEMENTS",
    "check_encoding",
    "transcode",
    "unescape_entities",
]

logger: Final = logging.getLogger(__name__)

DEFAULT_ENCODING: Final[str] = "gb18030"
ENCODING_ERROR_MODES: Final[Tuple[str, ...]] = ("strict", "replace", "ignore")

# Order matters: "&amp;" must be replaced last so "&amp;lt;" becomes "&lt;"
# and not "<".
ENTITY_REPLACEMENTS: Final[Tuple[Tuple[str, str], ...]] = (
    ("&#9;", "\t"),
    ("&#x9;", "\t"),
    ("&#10;", "\n"),
    ("&#xA;", "\n"),
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&amp;", "&"),
)


def unescape_entities(text: str) -> str:
    """
    Replace tab/linefeed character references and XML entities.

    Example:
        >>> unescape_entities("A&amp;B&#10;&lt;ok&gt;")
        'A&B\\n<ok>'
    """
    for entity, char in ENTITY_REPLACEMENTS:
        text = text.replace(entity, char)
    return text


def check_encoding(encoding: str, errors: str = "strict") -> str:
    """
    Validate a codec name and error mode, returning the canonical codec name.

    Raises:
        EncodingError: Unknown codec or unsupported error mode.
    """
    if errors not in ENCODING_ERROR_MODES:
        raise EncodingError(
            f"Unsupported encoding error mode {errors!r}",
            encoding=encoding,
            context={"allowed": "/".join(ENCODING_ERROR_MODES)},
        )
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise EncodingError(f"Unknown encoding {encoding!r}", encoding=encoding) from exc


def transcode(text: str, encoding: str = DEFAULT_ENCODING, errors: str = "strict") -> bytes:
    """
    Encode text for the printer.

    Args:
        text: Unicode text.
        encoding: Target codec (GB18030 by default).
        errors: "strict" raises EncodingError; "replace" and "ignore" are
                best effort and log a warning when characters were lost.

    Returns:
        Encoded bytes.

    Raises:
        EncodingError: A character has no mapping and errors is "strict".
    """
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        if errors == "strict":
            raise EncodingError(
                f"cannot encode text with {encoding!r}",
                encoding=encoding,
                context={"character": exc.object[exc.start : exc.end], "position": exc.start},
            ) from exc
        logger.warning(
            "Text not fully representable in %s, first bad character %r at %d",
            encoding,
            exc.object[exc.start : exc.end],
            exc.start,
        )
        return text.encode(encoding, errors)
