"""Application configuration"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _get_config_value(key: str, default: str | None = None) -> str | None:
    """
    Get configuration value from environment or local.settings.json.

    Priority:
    1. Environment variable
    2. local.settings.json (Values.key)
    3. Default value

    Args:
        key: Configuration key name
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # Try environment variable first
    value = os.getenv(key)
    if value:
        return value

    # Try local.settings.json
    project_root = Path(__file__).resolve().parent.parent
    local_settings_path = project_root / "local.settings.json"

    if local_settings_path.exists():
        try:
            with open(local_settings_path) as f:
                settings = json.load(f)
                value = settings.get("Values", {}).get(key)
                if value:
                    return str(value)
        except (json.JSONDecodeError, KeyError):
            pass

    # Return default
    return default


def _get_float(key: str, default: float) -> float:
    """Read a float setting, falling back to the default on bad values."""
    value = _get_config_value(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid float for {key}: {value!r}, using {default}")
        return default


def _get_int(key: str, default: int) -> int:
    """Read an int setting, falling back to the default on bad values."""
    value = _get_config_value(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key}: {value!r}, using {default}")
        return default


def get_content_weight() -> float:
    """
    Get the weight applied to content-based scores in the hybrid blend.

    Returns:
        Content weight (default: 0.7)
    """
    return _get_float("CONTENT_WEIGHT", 0.7)


def get_collaborative_weight() -> float:
    """
    Get the weight applied to collaborative scores in the hybrid blend.

    Returns:
        Collaborative weight (default: 0.3)
    """
    return _get_float("COLLABORATIVE_WEIGHT", 0.3)


def get_mf_min_ratings() -> int:
    """
    Get the rating count that must be exceeded before matrix factorization
    replaces neighbor scoring.

    Returns:
        Threshold (default: 10)
    """
    return _get_int("MF_MIN_RATINGS", 10)


def get_mf_epochs() -> int:
    """Get the number of SGD epochs per training run (default: 50)."""
    return _get_int("MF_EPOCHS", 50)


def get_mf_factors() -> int:
    """Get the latent factor count (default: 20)."""
    return _get_int("MF_FACTORS", 20)


def get_mf_random_seed() -> int | None:
    """
    Get the seed for matrix factorization training.

    Returns:
        Seed, or None for unseeded training
    """
    value = _get_config_value("MF_RANDOM_SEED")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for MF_RANDOM_SEED: {value!r}, training unseeded")
        return None


def get_log_level() -> str:
    """Get the log level used by the command-line scripts (default: INFO)."""
    return (_get_config_value("LOG_LEVEL", default="INFO") or "INFO").upper()
