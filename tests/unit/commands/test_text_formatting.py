"""
Unit tests for escpos_encoder/commands/text_formatting.py
"""

from typing import Callable

import pytest

from escpos_encoder.commands.text_formatting import (
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


class TestFontSize:
    def test_packs_width_and_height(self) -> None:
        for width in range(8):
            for height in range(8):
                assert font_size(width, height) == b"\x1d!" + bytes([(width << 4) | height])

    @pytest.mark.parametrize("width,height", [(8, 0), (0, 8), (-1, 1), (1, -1)])
    def test_out_of_range(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="Font scale"):
            font_size(width, height)


class TestSimpleCommands:
    @pytest.mark.parametrize(
        "builder,prefix",
        [
            (select_font, b"\x1bM"),
            (font_style, b"\x1b\x21"),
            (font_color, b"\x1b\x72"),
            (letter_space, b"\x1b\x20"),
            (underline, b"\x1b-"),
            (emphasize, b"\x1bG"),
            (upside_down, b"\x1b{"),
            (rotate, b"\x1bR"),
            (reverse, b"\x1dB"),
            (smooth, b"\x1db"),
        ],
    )
    @pytest.mark.parametrize("value", [0, 1, 2, 0x80, 0xFF])
    def test_value_passed_through(
        self, builder: Callable[[int], bytes], prefix: bytes, value: int
    ) -> None:
        assert builder(value) == prefix + bytes([value])
