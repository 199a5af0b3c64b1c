"""
escpos_encoder
==============

ESC/POS command encoder for thermal receipt printers.

This package provides:
    - PrinterSession: a stateful encoder that mirrors the printer's text
      style in memory and writes each command to a byte stream
    - Pure command builders (escpos_encoder.commands) returning exact bytes
    - GB18030 text transcoding for Chinese-capable printers
    - GS k barcode framing and ( L graphics framing

How the byte stream is obtained (serial port, socket, USB, file) is up to
the caller. Anything with ``write(bytes)`` and ``read(size)`` works.

Basic usage:
    >>> from escpos_encoder import PrinterSession, FeedMode, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> with open("/dev/usb/lp0", "r+b", buffering=0) as port:
    ...     session = PrinterSession(port)
    ...     session.init()
    ...     session.set_emphasize(1)
    ...     session.write("TOTAL 12.50\\n")
    ...     session.set_emphasize(0)
    ...     session.barcode("12345", 73)
    ...     session.feed_and_cut(FeedMode.FEED)
    >>>
    >>> logger.info("Receipt sent")

Logging is controlled by the ESCPOS_LOG_LEVEL environment variable
(DEBUG logs every command as hex) and, optionally, ESCPOS_LOG_FILE.

Version: 0.1.0
License: MIT
Python: 3.10+
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "escpos_encoder developers"
__description__ = "ESC/POS command encoder for thermal receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.10"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# PYTHON VERSION CHECK
# =============================================================================

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"escpos_encoder requires Python 3.10 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

LOGGER_NAME = "escpos_encoder"


def _setup_logging() -> None:
    """
    Configure the package logger.

    - Console handler (stderr) for WARNING and above
    - Rotating file handler for all enabled levels when ESCPOS_LOG_FILE is set
    - Level from ESCPOS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL),
      INFO by default

    Idempotent: does nothing if the package logger already has handlers.
    """
    log_level_str = os.environ.get("ESCPOS_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("ESCPOS_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(f"Cannot open log file {log_file}: {e}. Logging to console only.")


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``escpos_encoder`` namespace.

    Args:
        module_name: Usually ``__name__``. ``"__main__"`` maps to
                     ``escpos_encoder.main``.

    Example:
        >>> logger = get_logger("receipts")
        >>> logger.name
        'escpos_encoder.receipts'
    """
    if module_name.startswith(LOGGER_NAME):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAME}.{clean_name}")


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

from escpos_encoder.config import DEFAULT_CONFIG, load_config  # noqa: E402
from escpos_encoder.enums import (  # noqa: E402
    Alignment,
    BarcodeFormat,
    FeedMode,
    Font,
    Language,
    StatusRequest,
)
from escpos_encoder.exceptions import EncodingError, EscposError, TransportError  # noqa: E402
from escpos_encoder.printer import PrinterSession, StyleState  # noqa: E402
from escpos_encoder.transport import MemoryTransport, Transport  # noqa: E402

__all__ = [
    # Metadata
    "__version__",
    # Logging and config
    "get_logger",
    "load_config",
    "DEFAULT_CONFIG",
    # Encoder
    "PrinterSession",
    "StyleState",
    # Transport
    "Transport",
    "MemoryTransport",
    # Options
    "Alignment",
    "BarcodeFormat",
    "FeedMode",
    "Font",
    "Language",
    "StatusRequest",
    # Errors
    "EscposError",
    "TransportError",
    "EncodingError",
]
