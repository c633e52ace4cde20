from pathlib import Path

from logly import _LoggerProxy, logger

from applauncher.infra.xdg_paths import cache_dir_path


def log_dir_path() -> Path:
    return cache_dir_path() / "logs"


def init_logger(level: str = "INFO") -> _LoggerProxy:
    """Initialize the logger.

    Logs go to the console and to a size-rotated file in the user cache
    directory.

    Args:
        level: Minimum level to emit.

    """
    log_dir = log_dir_path()
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.configure(
        level=level,
        color=True,
        console=True,
        auto_sink=True,
    )

    logger.add(f"{log_dir}/app.log", size_limit="10MB", retention=3)

    logger.success("logger initialized!")

    return logger
