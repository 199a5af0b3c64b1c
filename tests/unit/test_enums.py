"""
Unit tests for escpos_encoder/enums.py
"""

import logging
from typing import Any

import pytest

from escpos_encoder.enums import (
    Alignment,
    BarcodeFormat,
    FeedMode,
    Font,
    Language,
    StatusRequest,
)


class TestFont:
    @pytest.mark.parametrize("name,index", [("A", 0), ("B", 1), ("C", 2)])
    def test_parse_known(self, name: str, index: int) -> None:
        assert Font.parse(name).index == index

    def test_parse_member(self) -> None:
        assert Font.parse(Font.C) is Font.C

    @pytest.mark.parametrize("value", ["D", "a", "", None, 1])
    def test_parse_unknown_defaults_to_a(self, value: Any) -> None:
        assert Font.parse(value) is Font.A

    def test_unknown_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="escpos_encoder.enums"):
            Font.parse("Z")
        assert "Unknown Font 'Z'" in caplog.text


class TestAlignment:
    @pytest.mark.parametrize("name,index", [("left", 0), ("center", 1), ("right", 2)])
    def test_parse_known(self, name: str, index: int) -> None:
        assert Alignment.parse(name).index == index

    @pytest.mark.parametrize("value", ["middle", "CENTER", None])
    def test_parse_unknown_defaults_to_left(self, value: Any) -> None:
        assert Alignment.parse(value) is Alignment.LEFT


class TestLanguage:
    @pytest.mark.parametrize(
        "code,index",
        [
            ("en", 0),
            ("fr", 1),
            ("de", 2),
            ("uk", 3),
            ("da", 4),
            ("sv", 5),
            ("it", 6),
            ("es", 7),
            ("ja", 8),
            ("no", 9),
        ],
    )
    def test_indexes(self, code: str, index: int) -> None:
        assert Language.parse(code).index == index

    def test_parse_unknown_defaults_to_en(self) -> None:
        assert Language.parse("ru") is Language.EN


class TestFeedMode:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (FeedMode.FEED, FeedMode.FEED),
            (FeedMode.CUT_ONLY, FeedMode.CUT_ONLY),
            ("feed", FeedMode.FEED),
            ("cut", FeedMode.CUT_ONLY),
            ("Feed", FeedMode.CUT_ONLY),
            ({"type": "feed"}, FeedMode.FEED),
            ({"type": "other"}, FeedMode.CUT_ONLY),
            ({}, FeedMode.CUT_ONLY),
            (None, FeedMode.CUT_ONLY),
        ],
    )
    def test_parse(self, value: Any, expected: FeedMode) -> None:
        assert FeedMode.parse(value) is expected


class TestBarcodeFormat:
    @pytest.mark.parametrize(
        "fmt,code",
        [(0, b"\x00"), (1, b"\x01"), (2, b"\x02"), (3, b"\x03"), (4, b"\x04"), (73, b"\x49")],
    )
    def test_type_code_for_mapped(self, fmt: int, code: bytes) -> None:
        assert BarcodeFormat.type_code_for(fmt) == code

    @pytest.mark.parametrize("fmt", [5, 65, 69, 72, 74, -1])
    def test_type_code_for_unmapped(self, fmt: int) -> None:
        assert BarcodeFormat.type_code_for(fmt) == b""

    def test_member_type_code(self) -> None:
        assert BarcodeFormat.CODE128.type_code == b"I"


class TestStatusRequest:
    def test_values(self) -> None:
        assert [s.value for s in StatusRequest] == [1, 2, 3, 4]
