"""Dancer configuration management."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .xdg import get_xdg_config_path, get_xdg_data_path

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "/api/serve"


class ServeConfig(BaseModel):
    """Dancer serve configuration."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
    )

    host: str = "127.0.0.1"
    port: int = 8080
    base_path: str = DEFAULT_BASE_PATH
    data_dir: Optional[Path] = None
    log_level: str = "info"

    @field_validator("base_path")
    @classmethod
    def normalize_base_path(cls, v: str) -> str:
        """Ensure a leading slash and no trailing slash ("" mounts at the root)."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    def resolve_data_dir(self) -> Path:
        """Directory holding workspace files.

        Precedence: DANCER_DATA_DIR, then ``data_dir``, then the XDG data dir.
        """
        env_dir = os.environ.get("DANCER_DATA_DIR")
        if env_dir:
            return Path(env_dir)
        if self.data_dir:
            return self.data_dir
        return get_xdg_data_path("workspaces")


def get_config_path() -> Path:
    return get_xdg_config_path("config.json")


def load_config(path: Optional[Path] = None) -> ServeConfig:
    """Load Dancer configuration from JSON file.

    Args:
        path: Path to config.json file. If None, uses default path

    Returns:
        ServeConfig with loaded settings. Returns default config if file doesn't exist
        or cannot be parsed.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return ServeConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if "data_dir" in data and data["data_dir"]:
            data["data_dir"] = Path(data["data_dir"]).expanduser()

        return ServeConfig.model_validate(data)

    except json.JSONDecodeError as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return ServeConfig()
    except Exception as e:
        logger.warning("Failed to load config from %s: %s", path, e)
        return ServeConfig()


def save_config(config: ServeConfig, path: Optional[Path] = None) -> None:
    """Save Dancer configuration to JSON file.

    Args:
        config: ServeConfig object to save
        path: Path to config.json file. If None, uses default path

    Raises:
        IOError: If file cannot be written
    """
    if path is None:
        path = get_config_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    config_data = config.model_dump(exclude_none=True, mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_data, f, indent=2)
