"""
Encoder configuration.

Configuration is a plain dict. ``load_config`` merges a JSON object file
over DEFAULT_CONFIG; a missing, unreadable or malformed file falls back to
the defaults with a warning, so a bad config never prevents printing.

Keys:
    encoding: str - codec used for text (default "gb18030")
    encoding_errors: str - "strict" raises EncodingError,
                     "replace"/"ignore" are best effort
    unescape_entities: bool - replace XML entities in written text
    log_level: str - informational, the level itself comes from
               the ESCPOS_LOG_LEVEL environment variable
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "merge_config",
]

logger: Final = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE: Final[str] = "escpos.json"

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "encoding": "gb18030",
    "encoding_errors": "strict",
    "unescape_entities": False,
    "log_level": "INFO",
}


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return DEFAULT_CONFIG updated with ``overrides`` (a new dict)."""
    config = dict(DEFAULT_CONFIG)
    if overrides:
        config.update(overrides)
    return config


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load encoder configuration from a JSON file or use defaults.

    Args:
        config_path: Path to the JSON file. Defaults to ``escpos.json`` in
                     the current directory.

    Returns:
        Configuration dict, always containing every default key.

    Example:
        >>> config = load_config(Path("printer/escpos.json"))
        >>> session = PrinterSession(transport, config)
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = merge_config()

    if not config_path.exists():
        logger.info(f"Config file {config_path} not found. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Config file must contain a JSON object, got {type(user_config).__name__}"
            )

        config.update(user_config)

        logger.info(f"Config loaded from {config_path}")
        logger.debug(f"Config: {config}")

    except json.JSONDecodeError as e:
        logger.warning(
            f"Cannot parse {config_path}: invalid JSON at line {e.lineno}, "
            f"column {e.colno}. Using defaults."
        )
    except OSError as e:
        logger.warning(f"Cannot read {config_path}: {e}. Using defaults.")
    except ValueError as e:
        logger.warning(f"Invalid config format: {e}. Using defaults.")

    return config
