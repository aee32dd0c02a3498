"""Configuration loader for kjbpass.

Loads defaults from config.json at project root, with hardcoded fallbacks.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Hardcoded fallback defaults
FALLBACK_DEFAULTS = {
    "word_count": 4,
    "symbol": False,
    "number": False,
    "hyphenate": True,
    "default_symbol": "@",
    "corpus_path": None,
    "count": 1,
}

BUNDLED_CORPUS = Path(__file__).parent / "resources" / "kjb_stripped.txt"


_config: dict[str, Any] | None = None
_config_dir: Path | None = None


def _find_config() -> Path | None:
    """Find config.json by walking up from current file."""
    paths = [
        Path(__file__).parent.parent.parent / "config.json",  # python/kjbpass -> root
        Path.cwd() / "config.json",
    ]
    for path in paths:
        if path.exists():
            return path
    return None


def _is_valid_config(data: Any) -> bool:
    """A usable config is an object whose "defaults" (if any) is an object."""
    return isinstance(data, dict) and isinstance(data.get("defaults", {}), dict)


def load() -> dict[str, Any]:
    """Load configuration from config.json or use fallbacks."""
    global _config, _config_dir
    if _config is not None:
        return _config

    config_path = _find_config()
    if config_path:
        try:
            with open(config_path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        else:
            if _is_valid_config(data):
                logger.debug("Loaded configuration from %s", config_path)
                _config = data
                _config_dir = config_path.parent
                return _config
            logger.warning("Ignoring malformed config %s", config_path)

    # Fallback
    _config = {"defaults": FALLBACK_DEFAULTS}
    _config_dir = None
    return _config


def reset() -> None:
    """Forget the cached configuration so the next load() re-reads it."""
    global _config, _config_dir
    _config = None
    _config_dir = None


def get_default(key: str, fallback: Any = None) -> Any:
    """Get a default value from config."""
    cfg = load()
    if not _is_valid_config(cfg):
        return fallback
    return cfg.get("defaults", {}).get(key, fallback)


# Convenience accessors
def default_word_count() -> int:
    return get_default("word_count", FALLBACK_DEFAULTS["word_count"])


def default_symbol_option() -> bool | str:
    return get_default("symbol", FALLBACK_DEFAULTS["symbol"])


def default_number_option() -> bool | str:
    return get_default("number", FALLBACK_DEFAULTS["number"])


def default_hyphenate() -> bool:
    return get_default("hyphenate", FALLBACK_DEFAULTS["hyphenate"])


def default_symbol() -> str:
    """Symbol appended when the symbol option is simply True.

    Must be a non-empty string, otherwise "@" is used.
    """
    symbol = get_default("default_symbol", FALLBACK_DEFAULTS["default_symbol"])
    if isinstance(symbol, str) and symbol:
        return symbol
    return FALLBACK_DEFAULTS["default_symbol"]


def default_count() -> int:
    count = get_default("count", FALLBACK_DEFAULTS["count"])
    if isinstance(count, int) and not isinstance(count, bool) and count > 0:
        return count
    return FALLBACK_DEFAULTS["count"]


def default_corpus_path() -> Path:
    """Path of the word list, either configured or the bundled one.

    A relative corpus_path is taken from the directory of the loaded
    config.json.
    """
    configured: Optional[str] = get_default("corpus_path")
    if not configured or not isinstance(configured, str):
        return BUNDLED_CORPUS
    path = Path(configured)
    if not path.is_absolute():
        path = (_config_dir or Path.cwd()) / path
    return path
