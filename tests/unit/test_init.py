"""
Unit tests for escpos_encoder/__init__.py
Package metadata, logging setup and public API.
"""

import logging
import logging.handlers
import re
from pathlib import Path
from typing import Iterator
from unittest import mock

import pytest

import escpos_encoder


class TestVersionMetadata:
    """Version metadata and constants."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", escpos_encoder.__version__)

    def test_version_components(self) -> None:
        expected_version = (
            f"{escpos_encoder.VERSION_MAJOR}."
            f"{escpos_encoder.VERSION_MINOR}."
            f"{escpos_encoder.VERSION_PATCH}"
        )
        assert escpos_encoder.__version__ == expected_version

    def test_metadata_attributes(self) -> None:
        for attr in ("__author__", "__description__", "__license__", "__python_requires__"):
            value = getattr(escpos_encoder, attr)
            assert isinstance(value, str) and value, f"{attr} must be a non-empty string"


class TestPublicAPI:
    """Public API exports."""

    def test_all_exports_exist(self) -> None:
        for name in escpos_encoder.__all__:
            assert hasattr(escpos_encoder, name), f"'{name}' from __all__ is missing"

    def test_no_duplicate_exports(self) -> None:
        assert len(escpos_encoder.__all__) == len(set(escpos_encoder.__all__))

    def test_core_exported(self) -> None:
        for name in ("PrinterSession", "load_config", "get_logger", "TransportError"):
            assert name in escpos_encoder.__all__


class TestLogging:
    """Package logging configuration."""

    @pytest.fixture
    def bare_package_logger(self) -> Iterator[logging.Logger]:
        root_logger = logging.getLogger(escpos_encoder.LOGGER_NAME)
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level
        for handler in saved_handlers:
            root_logger.removeHandler(handler)
        yield root_logger
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)

    def test_get_logger_returns_logger(self) -> None:
        assert isinstance(escpos_encoder.get_logger("receipts"), logging.Logger)

    def test_get_logger_name_format(self) -> None:
        assert escpos_encoder.get_logger("receipts").name == "escpos_encoder.receipts"

    def test_get_logger_with_qualified_name(self) -> None:
        logger = escpos_encoder.get_logger("escpos_encoder.printer")
        assert logger.name == "escpos_encoder.printer"

    def test_get_logger_with_main(self) -> None:
        assert escpos_encoder.get_logger("__main__").name == "escpos_encoder.main"

    def test_get_logger_strips_leading_dots(self) -> None:
        assert escpos_encoder.get_logger("..plugin").name == "escpos_encoder.plugin"

    def test_logger_is_configured(self) -> None:
        root_logger = logging.getLogger("escpos_encoder")
        assert len(root_logger.handlers) >= 1

    def test_log_level_from_environment(self, bare_package_logger: logging.Logger) -> None:
        with mock.patch.dict("os.environ", {"ESCPOS_LOG_LEVEL": "DEBUG"}):
            escpos_encoder._setup_logging()
        assert bare_package_logger.level == logging.DEBUG

    def test_unknown_log_level_defaults_to_info(self, bare_package_logger: logging.Logger) -> None:
        with mock.patch.dict("os.environ", {"ESCPOS_LOG_LEVEL": "VERBOSE"}):
            escpos_encoder._setup_logging()
        assert bare_package_logger.level == logging.INFO

    def test_setup_is_idempotent(self, bare_package_logger: logging.Logger) -> None:
        escpos_encoder._setup_logging()
        count = len(bare_package_logger.handlers)
        escpos_encoder._setup_logging()
        assert len(bare_package_logger.handlers) == count

    def test_log_file_handler(self, bare_package_logger: logging.Logger, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "escpos.log"
        with mock.patch.dict("os.environ", {"ESCPOS_LOG_FILE": str(log_file)}):
            escpos_encoder._setup_logging()
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in bare_package_logger.handlers
        )
        assert log_file.parent.is_dir()


class TestDocumentation:
    def test_module_has_docstring(self) -> None:
        assert escpos_encoder.__doc__ and "ESC/POS" in escpos_encoder.__doc__

    def test_get_logger_has_docstring(self) -> None:
        assert escpos_encoder.get_logger.__doc__
