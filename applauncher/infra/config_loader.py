import tomllib
from dataclasses import fields
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from logly import logger

from applauncher.core.launcher_types import LauncherConfig
from applauncher.infra.xdg_paths import config_file_path


def _coerce_options(data: dict) -> dict:
    """Keeps recognized keys whose values have the expected type."""
    defaults = LauncherConfig()
    options: dict = {}
    for field in fields(LauncherConfig):
        if field.name not in data:
            continue
        value = data[field.name]
        expected = type(getattr(defaults, field.name))
        # bool is a subclass of int; reject it for integer options.
        if not isinstance(value, expected) or (
            expected is int and isinstance(value, bool)
        ):
            logger.warning(
                f"Ignoring config option {field.name}={value!r}: "
                f"expected {expected.__name__}"
            )
            continue
        options[field.name] = value

    if options.get("max_search_results", 1) < 1:
        logger.warning("max_search_results must be at least 1; using 1")
        options["max_search_results"] = 1
    return options


def load_config(path: Path | None = None) -> LauncherConfig:
    """Loads the launcher configuration from a TOML file.

    Missing files give the defaults. Unparseable files and ill-typed options are
    logged and replaced by their defaults.

    Args:
        path: Config file location. Defaults to the XDG config location.

    Returns:
        The configuration snapshot.
    """
    config_path = path or config_file_path()
    if not config_path.exists():
        logger.info(f"No config at {config_path}; using defaults")
        return LauncherConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Failed to read config {config_path}: {e}; using defaults")
        return LauncherConfig()

    config = LauncherConfig(**_coerce_options(data))
    logger.info(f"Loaded config from {config_path}")
    return config


def get_current_time(config: LauncherConfig, now: datetime | None = None) -> str:
    """Formats the current time for display in the configured timezone."""
    tz = None
    if config.timezone:
        try:
            tz = ZoneInfo(config.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {config.timezone!r}; using local time")

    current = (now or datetime.now()).astimezone(tz)
    return current.strftime(config.time_format)
