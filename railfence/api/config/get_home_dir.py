"""Get rail fence home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RAILFENCE_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get rail fence home directory path or path under it.

    Checks RAILFENCE_HOME environment variable first, defaults to ~/.railfence if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.railfence")
        >>> get_home_dir("config.json")
        Path("/Users/user/.railfence/config.json")
    """
    home_env = os.environ.get("RAILFENCE_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / RAILFENCE_HOME_EXT if user_home else Path.home() / RAILFENCE_HOME_EXT

    return home / Path(*parts) if parts else home
