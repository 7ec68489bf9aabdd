"""Environment variable helper functions"""

import os
from typing import Optional


def get_env_int(key: str, default: int) -> int:
    """Get integer from environment variable

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        int: Parsed integer value
    """
    try:
        return int(os.getenv(key, default))
    except (TypeError, ValueError):
        return default


def get_env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a non-empty string from environment variable, falling back to default"""
    val = os.getenv(key)
    if not val:
        return default
    return val
