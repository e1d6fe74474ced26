"""Configuration loading from the per-user config directory."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from arxiv_cli.models import (
    CONFIG_APP_NAME,
    DEFAULT_QUERY,
    DEFAULT_TIMEOUT_SECONDS,
    FIRST_PAGE,
    MAX_PAGE,
    MAX_TIMEOUT_SECONDS,
    MIN_PAGE,
    SEARCH_API_URL,
    UserConfig,
)

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration
# ============================================================================
#
# Validation contract: _dict_to_config() returns a valid UserConfig for any input.
#
#   Field            Rule                        Handler
#   ───────────────  ──────────────────────────  ──────────────────────
#   start_page       0 ≤ x ≤ MAX_PAGE            _coerce_page
#   timeout_seconds  1 ≤ x ≤ MAX_TIMEOUT_SECONDS  _coerce_timeout
#   base_url         non-empty string            _dict_to_config
#   scalar fields    type-checked via _safe_get  _dict_to_config
#
CONFIG_FILENAME = "config.json"


def get_config_path() -> Path:
    """Get the path to the configuration file.

    Uses platformdirs for cross-platform config directory:
    - Linux: ~/.config/arxiv-cli/config.json
    - macOS: ~/Library/Application Support/arxiv-cli/config.json
    - Windows: %APPDATA%/arxiv-cli/config.json
    """
    config_dir = Path(user_config_dir(CONFIG_APP_NAME))
    return config_dir / CONFIG_FILENAME


def _safe_get(data: dict, key: str, default: Any, expected_type: type) -> Any:
    """Safely get a value from dict with type validation.

    Returns the default if key is missing or value has wrong type.
    """
    value = data.get(key, default)
    # bool is an int subclass; never accept it where a number is expected
    if expected_type is int and isinstance(value, bool):
        return default
    if not isinstance(value, expected_type):
        return default
    return value


def _coerce_page(value: Any) -> int:
    """Validate and clamp a configured start page."""
    if not isinstance(value, int) or isinstance(value, bool):
        return FIRST_PAGE
    return max(MIN_PAGE, min(value, MAX_PAGE))


def _coerce_timeout(value: Any) -> int:
    """Validate and clamp the HTTP timeout in seconds."""
    if not isinstance(value, int) or isinstance(value, bool):
        return DEFAULT_TIMEOUT_SECONDS
    return max(1, min(value, MAX_TIMEOUT_SECONDS))


def _dict_to_config(data: dict[str, Any]) -> UserConfig:
    """Deserialize a dictionary to UserConfig with type validation."""
    base_url = _safe_get(data, "base_url", SEARCH_API_URL, str).strip()
    return UserConfig(
        base_url=base_url or SEARCH_API_URL,
        default_query=_safe_get(data, "default_query", DEFAULT_QUERY, str),
        start_page=_coerce_page(data.get("start_page", FIRST_PAGE)),
        timeout_seconds=_coerce_timeout(data.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)),
        seen_file=_safe_get(data, "seen_file", "", str),
        ascii_icons=_safe_get(data, "ascii_icons", False, bool),
        version=_safe_get(data, "version", 1, int),
    )


def load_config(config_path: Path | None = None) -> UserConfig:
    """Load configuration from disk.

    Returns default config if the file doesn't exist or is unusable.
    Logs specific errors to help diagnose config issues.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return UserConfig()

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Config file has invalid JSON, using defaults: %s", e)
        return UserConfig()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read config file, using defaults: %s", e)
        return UserConfig()

    if not isinstance(data, dict):
        logger.warning("Config root must be a JSON object, using defaults")
        return UserConfig()
    return _dict_to_config(data)


__all__ = [
    "CONFIG_APP_NAME",
    "CONFIG_FILENAME",
    "get_config_path",
    "load_config",
]
