"""
Unit tests for escpos_encoder/commands/control.py
"""

import pytest

from escpos_encoder.commands.control import (
    CASH_PULSE,
    CUT_FULL,
    CUT_PARTIAL,
    DRAWER_PULSE,
    END_MARKER,
    ESC_INIT,
    PULSE,
    formfeed_n,
    status_request,
)


class TestConstants:
    @pytest.mark.parametrize(
        "command,expected",
        [
            (ESC_INIT, b"\x1b\x40"),
            (END_MARKER, b"\xfa"),
            (CUT_FULL, b"\x1d\x56\x41\x30"),
            (CUT_PARTIAL, b"\x1d\x56\x01"),
            (DRAWER_PULSE, b"\x1b\x70\x00\x0a\x0a"),
            (CASH_PULSE, b"\x1b\x70\x00\x0a\xff"),
            (PULSE, b"\x1b\x70\x02"),
        ],
    )
    def test_bytes(self, command: bytes, expected: bytes) -> None:
        assert command == expected

    def test_cut_survives_gb18030(self) -> None:
        assert CUT_FULL.decode("ascii").encode("gb18030") == CUT_FULL


class TestFormfeedN:
    @pytest.mark.parametrize("n", [0, 1, 127, 128, 255])
    def test_byte_range(self, n: int) -> None:
        assert formfeed_n(n) == b"\x1bd" + bytes([n])

    def test_wraps_above_255(self) -> None:
        assert formfeed_n(256) == b"\x1bd\x00"
        assert formfeed_n(258) == b"\x1bd\x02"


class TestStatusRequest:
    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_bytes(self, n: int) -> None:
        assert status_request(n) == bytes([0x10, 0x04, n])
