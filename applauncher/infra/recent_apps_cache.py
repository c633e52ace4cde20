import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Final

from logly import logger

from applauncher.core.errors import CacheError

DEFAULT_CAPACITY: Final[int] = 10


def recent_apps_capacity(max_search_results: int) -> int:
    """Returns a cache size large enough to seed a full result list."""
    return max(DEFAULT_CAPACITY, max_search_results)


class RecentAppsCache:
    """Most-recent-first list of launched application names, persisted as JSON.

    All access goes through a single lock so that seeding, recording and the
    final save at exit never interleave.
    """

    def __init__(
        self,
        path: Path,
        recent_apps: list[str] | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._path = path
        self._capacity = capacity
        self._lock = threading.Lock()
        self._recent_apps = list(recent_apps or [])[:capacity]

    @property
    def path(self) -> Path:
        return self._path

    @classmethod
    def load(cls, path: Path, capacity: int = DEFAULT_CAPACITY) -> "RecentAppsCache":
        """Loads the cache from disk.

        A missing file gives an empty cache. A corrupt file is logged and also
        gives an empty cache; it is overwritten on the next launch.
        """
        if not path.exists():
            return cls(path, capacity=capacity)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable recent apps cache {path}: {e}")
            return cls(path, capacity=capacity)

        items = data.get("recent_apps") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.warning(f"Ignoring malformed recent apps cache {path}")
            return cls(path, capacity=capacity)

        names = [item for item in items if isinstance(item, str) and item]
        return cls(path, recent_apps=names, capacity=capacity)

    def snapshot(self) -> list[str]:
        """Returns a copy of the names, most recent first."""
        with self._lock:
            return list(self._recent_apps)

    def record(self, app_name: str) -> None:
        """Moves `app_name` to the front and persists the list.

        Raises:
            CacheError: If the list cannot be written.
        """
        with self._lock:
            names = [app_name] + [n for n in self._recent_apps if n != app_name]
            names = names[: self._capacity]
            self._write(names)
            self._recent_apps = names

    def save(self) -> None:
        """Persists the current list.

        Raises:
            CacheError: If the list cannot be written.
        """
        with self._lock:
            self._write(self._recent_apps)

    def _write(self, names: list[str]) -> None:
        """Replaces the cache file atomically with `names`."""
        payload = json.dumps({"recent_apps": names}, indent=2)
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheError(f"failed to write recent apps cache {self._path}: {e}") from e
