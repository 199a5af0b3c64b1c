"""
Unit tests for escpos_encoder/exceptions.py
"""

import pytest

from escpos_encoder.exceptions import EncodingError, EscposError, TransportError


class TestHierarchy:
    @pytest.mark.parametrize("exc_cls", [TransportError, EncodingError])
    def test_subclasses_base(self, exc_cls: type) -> None:
        assert issubclass(exc_cls, EscposError)

    def test_encoding_error_is_value_error(self) -> None:
        assert issubclass(EncodingError, ValueError)

    def test_transport_error_is_not_value_error(self) -> None:
        assert not issubclass(TransportError, ValueError)


class TestFormatting:
    def test_str_plain(self) -> None:
        assert str(EscposError("boom")) == "EscposError: boom"

    def test_str_with_command(self) -> None:
        err = TransportError("write failed", command="cut")
        assert str(err) == "TransportError: write failed [command=cut]"

    def test_str_with_context(self) -> None:
        err = TransportError("short write", command="init", context={"written": 1, "expected": 2})
        assert str(err) == "TransportError: short write [command=init] (written=1, expected=2)"

    def test_repr(self) -> None:
        err = EscposError("x", command="end")
        assert repr(err) == "EscposError(message='x', command='end', context={})"

    def test_attributes_default(self) -> None:
        err = EscposError("x")
        assert err.message == "x"
        assert err.command is None
        assert err.context == {}

    def test_encoding_attribute(self) -> None:
        err = EncodingError("bad", encoding="ascii", command="write")
        assert err.encoding == "ascii"
        assert err.command == "write"

    def test_catch_by_base(self) -> None:
        with pytest.raises(EscposError):
            raise TransportError("read failed")
