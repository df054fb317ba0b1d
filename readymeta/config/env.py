"""Environment variable utilities."""
import os
from typing import Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable, falling back to default when missing or empty.

    Args:
        name: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value
