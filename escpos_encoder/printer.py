"""
Stateful ESC/POS command encoder.

PrinterSession keeps the printer's persistent text style (font scale and
the underline/emphasize/upside-down/rotate/reverse/smooth toggles) in memory
and transmits the matching command on every change, so the in-memory style
is always what the printer was last told. ESC/POS has no commit step: each
command takes effect when received, so nothing is buffered.

Every transmitting method returns the number of bytes handed to the
transport. Ignored requests (out-of-range font size or margin) return 0.
A failing transport raises TransportError.

Example:
    >>> import serial
    >>> from escpos_encoder import PrinterSession
    >>>
    >>> with serial.Serial("/dev/ttyUSB0", 9600, timeout=1) as port:
    ...     session = PrinterSession(port)
    ...     session.init()
    ...     session.set_align("center")
    ...     session.set_font_size(2, 2)
    ...     session.write("合计 12.50\\n")
    ...     session.feed_and_cut(FeedMode.FEED)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Final, Optional, Union

from escpos_encoder.commands import barcode as barcode_cmd
from escpos_encoder.commands import charset, control, graphics, positioning
from escpos_encoder.commands import text_formatting as fmt_cmd
from escpos_encoder.config import merge_config
from escpos_encoder.enums import (
    Alignment,
    BarcodeFormat,
    FeedMode,
    Font,
    Language,
    StatusRequest,
)
from escpos_encoder.exceptions import TransportError
from escpos_encoder.text import check_encoding, transcode, unescape_entities
from escpos_encoder.transport import Transport

__all__ = [
    "StyleState",
    "PrinterSession",
]

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StyleState:
    """Snapshot of the persistent style. Defaults are the power-on state."""

    font_width: int = 1
    font_height: int = 1
    underline: int = 0
    emphasize: int = 0
    upside_down: int = 0
    rotate: int = 0
    reverse: int = 0
    smooth: int = 0


class PrinterSession:
    """
    ESC/POS encoder bound to one transport.

    The transport is used, not owned: the session never closes it.

    A session is not thread-safe. Changing a style updates memory and then
    writes to the transport in two steps, so concurrent callers must
    serialize access (one session per connection, single writer).

    Calls after ``end()`` are not rejected; not sending further output is
    the caller's responsibility.

    Args:
        transport: Object with ``write(bytes)`` and ``read(size)``.
        config: Optional configuration dict (see escpos_encoder.config).

    Raises:
        EncodingError: Configured codec or error mode is not supported.
    """

    _font_width: int
    _font_height: int
    _underline: int
    _emphasize: int
    _upside_down: int
    _rotate: int
    _reverse: int
    _smooth: int

    def __init__(self, transport: Transport, config: Optional[Dict[str, Any]] = None) -> None:
        cfg = merge_config(config)
        self._transport = transport
        self._errors: str = cfg["encoding_errors"]
        self._encoding = check_encoding(cfg["encoding"], self._errors)
        self._unescape = bool(cfg["unescape_entities"])
        self.reset()

        logger.debug(
            "Session created (encoding=%s, errors=%s, unescape=%s)",
            self._encoding,
            self._errors,
            self._unescape,
        )

    # -------------------------------------------------------------------------
    # Style state
    # -------------------------------------------------------------------------

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def font_width(self) -> int:
        return self._font_width

    @property
    def font_height(self) -> int:
        return self._font_height

    @property
    def underline(self) -> int:
        return self._underline

    @property
    def emphasize(self) -> int:
        return self._emphasize

    @property
    def upside_down(self) -> int:
        return self._upside_down

    @property
    def rotate(self) -> int:
        return self._rotate

    @property
    def reverse(self) -> int:
        return self._reverse

    @property
    def smooth(self) -> int:
        return self._smooth

    @property
    def style(self) -> StyleState:
        return StyleState(
            font_width=self._font_width,
            font_height=self._font_height,
            underline=self._underline,
            emphasize=self._emphasize,
            upside_down=self._upside_down,
            rotate=self._rotate,
            reverse=self._reverse,
            smooth=self._smooth,
        )

    def reset(self) -> None:
        """
        Restore the power-on style in memory only.

        Nothing is transmitted; use ``init()`` to reset the printer too.
        """
        self._font_width = 1
        self._font_height = 1
        self._underline = 0
        self._emphasize = 0
        self._upside_down = 0
        self._rotate = 0
        self._reverse = 0
        self._smooth = 0

    def init(self) -> int:
        """Reset the in-memory style and send ESC @ to the printer."""
        self.reset()
        return self._send("init", control.ESC_INIT)

    def end(self) -> int:
        """Send the end-of-output marker (0xFA)."""
        return self._send("end", control.END_MARKER)

    # -------------------------------------------------------------------------
    # Output primitives
    # -------------------------------------------------------------------------

    def write_raw(self, data: bytes) -> int:
        """Send bytes untouched. Empty input writes nothing and returns 0."""
        return self._send("write_raw", data)

    def write(self, text: str, unescape: Optional[bool] = None) -> int:
        """
        Transcode text to the printer encoding and send it.

        Args:
            text: Text to print.
            unescape: Replace XML entities first. None uses the
                      ``unescape_entities`` config value.

        Raises:
            EncodingError: Text is not representable and the error mode is
                           "strict".
            TransportError: Write failed.
        """
        if self._unescape if unescape is None else unescape:
            text = unescape_entities(text)
        return self._send("write", self._encode(text))

    def read_raw(self, size: int = 1) -> bytes:
        """Read up to ``size`` bytes from the transport."""
        try:
            return self._transport.read(size)
        except OSError as exc:
            logger.error("Transport read failed: %s", exc)
            raise TransportError(f"read failed: {exc}", command="read_raw") from exc

    # -------------------------------------------------------------------------
    # Style setters
    # -------------------------------------------------------------------------

    def send_font_size(self) -> int:
        return self._send("font_size", fmt_cmd.font_size(self._font_width, self._font_height))

    def set_font_size(self, width: int, height: int) -> int:
        """
        Set character scale.

        Values outside 0-7 are ignored: nothing is sent, the stored size is
        unchanged, and 0 is returned.
        """
        if not (
            0 <= width <= fmt_cmd.MAX_FONT_SCALE and 0 <= height <= fmt_cmd.MAX_FONT_SCALE
        ):
            logger.debug("Ignoring out-of-range font size %sx%s", width, height)
            return 0
        self._font_width = width
        self._font_height = height
        return self.send_font_size()

    def set_font_style(self, style: int) -> int:
        """Send ESC ! style. Does not change the stored font size."""
        return self._send("font_style", fmt_cmd.font_style(style))

    def set_font(self, font: Union[Font, str]) -> int:
        """Select font A, B or C; anything else selects A."""
        return self._send("font", fmt_cmd.select_font(Font.parse(font).index))

    def set_font_color(self, color: int) -> int:
        return self._send("font_color", fmt_cmd.font_color(color))

    def set_letter_space(self, n: int) -> int:
        return self._send("letter_space", fmt_cmd.letter_space(n))

    def send_underline(self) -> int:
        return self._send("underline", fmt_cmd.underline(self._underline))

    def send_emphasize(self) -> int:
        return self._send("emphasize", fmt_cmd.emphasize(self._emphasize))

    def send_upside_down(self) -> int:
        return self._send("upside_down", fmt_cmd.upside_down(self._upside_down))

    def send_rotate(self) -> int:
        return self._send("rotate", fmt_cmd.rotate(self._rotate))

    def send_reverse(self) -> int:
        return self._send("reverse", fmt_cmd.reverse(self._reverse))

    def send_smooth(self) -> int:
        return self._send("smooth", fmt_cmd.smooth(self._smooth))

    # Toggles store the byte that is sent, not the raw argument.
    def set_underline(self, v: int) -> int:
        self._underline = v & 0xFF
        return self.send_underline()

    def set_emphasize(self, v: int) -> int:
        self._emphasize = v & 0xFF
        return self.send_emphasize()

    def set_upside_down(self, v: int) -> int:
        self._upside_down = v & 0xFF
        return self.send_upside_down()

    def set_rotate(self, v: int) -> int:
        self._rotate = v & 0xFF
        return self.send_rotate()

    def set_reverse(self, v: int) -> int:
        self._reverse = v & 0xFF
        return self.send_reverse()

    def set_smooth(self, v: int) -> int:
        self._smooth = v & 0xFF
        return self.send_smooth()

    def set_align(self, align: Union[Alignment, str]) -> int:
        """Set justification; unknown names align left."""
        return self._send("align", positioning.align(Alignment.parse(align).index))

    def set_lang(self, lang: Union[Language, str]) -> int:
        """Select the international character set; unknown codes select "en"."""
        return self._send("lang", charset.international_charset(Language.parse(lang).index))

    def set_chinese_on(self) -> int:
        return self._send("chinese_on", charset.CHINESE_ON)

    def set_margin_left(self, size: int) -> int:
        """Set the left margin. Sizes above 47 are ignored and return 0."""
        if not (0 <= size <= positioning.MAX_LEFT_MARGIN):
            logger.debug("Ignoring out-of-range left margin %s", size)
            return 0
        return self._send("margin_left", positioning.left_margin(size))

    def send_move_x(self, x: int) -> int:
        return self._send("move_x", positioning.move_x(x))

    def send_move_y(self, y: int) -> int:
        return self._send("move_y", positioning.move_y(y))

    # -------------------------------------------------------------------------
    # Paper, drawer and feed
    # -------------------------------------------------------------------------

    def cut(self) -> int:
        return self._send("cut", control.CUT_FULL)

    def cut_partial(self) -> int:
        return self._send("cut_partial", control.CUT_PARTIAL)

    def open_drawer(self) -> int:
        return self._send("open_drawer", control.DRAWER_PULSE)

    def cash(self) -> int:
        return self._send("cash", control.CASH_PULSE)

    def pulse(self) -> int:
        return self._send("pulse", control.PULSE)

    def linefeed(self) -> int:
        return self._send("linefeed", self._encode("\n"))

    def formfeed_n(self, n: int) -> int:
        """Feed ``n`` lines. Only the low byte of ``n`` is sent."""
        return self._send("formfeed", control.formfeed_n(n))

    def formfeed(self) -> int:
        return self.formfeed_n(1)

    def feed_and_cut(self, mode: Union[FeedMode, str, Dict[str, str], None] = FeedMode.CUT_ONLY) -> int:
        """
        Optionally feed one line, then cut.

        Args:
            mode: FeedMode.FEED (or "feed", or {"type": "feed"}) feeds first;
                  anything else only cuts.
        """
        written = 0
        if FeedMode.parse(mode) is FeedMode.FEED:
            written += self.formfeed()
        return written + self.cut()

    # -------------------------------------------------------------------------
    # Barcode and graphics
    # -------------------------------------------------------------------------

    def barcode(self, value: str, fmt: Union[BarcodeFormat, int]) -> int:
        """
        Print a barcode, centered.

        Resets the in-memory style (the printer itself is not
        re-initialized), centers, sends the GS k frame, then sends the
        barcode text once more.

        Args:
            value: Barcode data.
            fmt: Format number. 0-4 and 73 are mapped; any other number
                 sends an empty type code. 69 sends no frame.
        """
        fmt = int(fmt)
        code = BarcodeFormat.type_code_for(fmt)
        if not code:
            logger.warning("Unmapped barcode format %s, sending empty type code", fmt)

        payload = self._encode(value)

        self.reset()
        written = self.set_align(Alignment.CENTER)
        written += self._send("barcode", barcode_cmd.barcode_frame(code, fmt, payload))
        # Payload text is repeated after the frame.
        written += self._send("barcode_text", payload)
        return written

    def g_send(self, m: int, fn: int, data: bytes) -> int:
        """
        Send a length-prefixed graphics sub-command (ESC ( L pL pH m fn data).

        ``data`` is sent untransformed.
        """
        return self._send("graphics", graphics.graphics_frame(m, fn, data))

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    def read_status(self, n: Union[StatusRequest, int]) -> int:
        """
        Query real-time status (DLE EOT n) and return the status byte.

        Raises:
            TransportError: The request could not be written, the read
                            failed, or no byte arrived.
        """
        self._send("read_status", control.status_request(int(n)))
        data = self.read_raw(1)
        if not data:
            logger.error("No status byte received for DLE EOT %s", int(n))
            raise TransportError(
                "no status byte received", command="read_status", context={"n": int(n)}
            )
        return data[0]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _encode(self, text: str) -> bytes:
        return transcode(text, self._encoding, self._errors)

    def _send(self, command: str, data: bytes) -> int:
        if not data:
            return 0
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s: %s", command, data.hex(" "))
        try:
            accepted = self._transport.write(data)
        except OSError as exc:
            logger.error("Transport write failed during %s: %s", command, exc)
            raise TransportError(f"write failed: {exc}", command=command) from exc
        if accepted is not None and accepted < len(data):
            logger.error("Short write during %s: %s of %s bytes", command, accepted, len(data))
            raise TransportError(
                "short write",
                command=command,
                context={"written": accepted, "expected": len(data)},
            )
        return len(data)
