from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Final

from logly import logger

from applauncher.core.desktop_entry_parser import parse_desktop_entry
from applauncher.core.launcher_types import ApplicationEntry
from applauncher.infra.xdg_paths import data_dirs as default_data_dirs

DESKTOP_SUFFIX: Final[str] = ".desktop"


def _scan_applications_dir(base_dir: Path) -> list[Path]:
    """Lists `.desktop` files in `<base_dir>/applications`.

    A missing or unreadable directory yields an empty list.
    """
    apps_dir = base_dir / "applications"
    try:
        return [p for p in apps_dir.iterdir() if p.suffix == DESKTOP_SUFFIX]
    except OSError as e:
        logger.debug(f"Skipping {apps_dir}: {e}")
        return []


def locate_desktop_entries(data_dirs: Iterable[Path] | None = None) -> list[Path]:
    """Finds candidate descriptor files across all data directories.

    Each base directory is scanned on its own worker thread.

    Args:
        data_dirs: Base directories to scan. Defaults to the XDG data search path.

    Returns:
        All found paths, grouped per base directory.
    """
    dirs = list(default_data_dirs() if data_dirs is None else data_dirs)
    if not dirs:
        return []

    with ThreadPoolExecutor(max_workers=len(dirs)) as executor:
        per_dir = list(executor.map(_scan_applications_dir, dirs))

    return [path for paths in per_dir for path in paths]


def build_application_index(
    paths: Sequence[Path], max_workers: int | None = None
) -> list[ApplicationEntry]:
    """Parses descriptor files in parallel and keeps the successful ones.

    Args:
        paths: Descriptor files, in discovery order.
        max_workers: Thread pool size. None lets the executor decide.

    Returns:
        Parsed entries in the same order as `paths`.
    """
    if not paths:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        parsed = list(executor.map(parse_desktop_entry, paths))

    return [entry for entry in parsed if entry is not None]


def load_application_index(
    data_dirs: Iterable[Path] | None = None,
) -> list[ApplicationEntry]:
    """Builds the application index from the installed `.desktop` files."""
    paths = locate_desktop_entries(data_dirs)
    applications = build_application_index(paths)
    logger.info(
        f"Indexed {len(applications)} applications from {len(paths)} desktop files"
    )
    return applications
