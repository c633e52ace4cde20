import subprocess
from pathlib import Path

from logly import logger

from applauncher.core.errors import HomeDirectoryError, SpawnError
from applauncher.infra.recent_apps_cache import RecentAppsCache
from applauncher.infra.shell import build_shell_argv


def spawn_detached(argv: list[str], cwd: Path | None = None) -> None:
    """Starts a process in its own session without waiting for it.

    Args:
        argv: Argument vector.
        cwd: Working directory for the child.

    Raises:
        SpawnError: If the process could not be started.
    """
    try:
        logger.info(f"Spawning argv={' '.join(argv)} cwd={cwd}")
        subprocess.Popen(
            argv,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise SpawnError(f"failed to spawn {argv[0]}: {e}") from e


def resolve_home_dir() -> Path:
    """Returns the invoking user's home directory.

    Raises:
        HomeDirectoryError: If no home directory can be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError("failed to find home directory") from e


def launch_application(
    app_name: str, command: str, recent_cache: RecentAppsCache | None = None
) -> None:
    """Records an application as recently used, then launches it detached.

    The child runs through the shell with the home directory as its working
    directory. Nothing is spawned if the cache update fails.

    Args:
        app_name: Display name recorded in the recent-apps cache.
        command: Shell command line.
        recent_cache: Cache to update, or None when tracking is disabled.

    Raises:
        CacheError: If the cache could not be updated or persisted.
        HomeDirectoryError: If the home directory cannot be resolved.
        SpawnError: If the shell could not be started.
    """
    if recent_cache is not None:
        recent_cache.record(app_name)

    home = resolve_home_dir()
    spawn_detached(build_shell_argv(command), cwd=home)
    logger.info(f"Launched {app_name!r}")
