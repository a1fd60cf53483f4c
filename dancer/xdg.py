"""XDG Base Directory utilities for config and data locations."""

import os
from pathlib import Path


def get_xdg_config_path(filename: str) -> Path:
    """Get the config file path: $XDG_CONFIG_HOME/dancer/{filename}, else ~/.config/dancer/{filename}."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(xdg_config) / "dancer" / filename


def get_xdg_data_path(subdir: str = "") -> Path:
    """Get XDG-compliant data directory path.

    - $XDG_DATA_HOME/dancer/{subdir} (if XDG_DATA_HOME is set)
    - ~/.local/share/dancer/{subdir} (XDG default)

    Args:
        subdir: Optional subdirectory within the dancer data dir (e.g., "workspaces")

    Returns:
        Path to data directory
    """
    xdg_data = os.environ.get("XDG_DATA_HOME", str(Path.home() / ".local" / "share"))
    data_path = Path(xdg_data) / "dancer"
    if subdir:
        data_path = data_path / subdir
    return data_path
