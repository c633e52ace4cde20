from pathlib import Path
from typing import Final

from xdg import BaseDirectory

RESOURCE_NAME: Final[str] = "applauncher"


def data_dirs() -> list[Path]:
    """Returns the XDG data search path, user directory first."""
    return [Path(d) for d in BaseDirectory.xdg_data_dirs]


def config_file_path() -> Path:
    """Returns the location of `config.toml` (which may not exist)."""
    return Path(BaseDirectory.xdg_config_home) / RESOURCE_NAME / "config.toml"


def cache_dir_path() -> Path:
    """Returns the per-user cache directory for this app (which may not exist)."""
    return Path(BaseDirectory.xdg_cache_home) / RESOURCE_NAME
