"""Configuration settings for the WaveformSegments package."""

import os
from typing import Any, Dict, Optional

# Default configuration
DEFAULT_CONFIG: Dict[str, Any] = {
    # Segment colors
    "randomize_segment_color": False,
    "segment_color": "rgba(0, 225, 128, 1)",

    # Automatically generated ids look like "<prefix>.<n>"
    "segment_id_prefix": "peaks.segment",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_config(key: str, default: Optional[Any] = None) -> Any:
    """Get configuration value by key.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value
    """
    # Environment variables override defaults
    env_key = f"WAVEFORMSEGMENTS_{key.upper()}"
    if env_key in os.environ:
        return os.environ[env_key]

    # Otherwise use defaults
    return DEFAULT_CONFIG.get(key, default)


def get_bool_config(key: str, default: bool = False) -> bool:
    """Get a boolean configuration value by key.

    Environment overrides arrive as strings, so "1", "true", "yes" and "on"
    (any case) count as true.

    Args:
        key: Configuration key
        default: Default value if key not found

    Returns:
        Configuration value as a bool
    """
    value = get_config(key, default)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)
