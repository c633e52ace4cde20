import sys

from logly import logger
from PySide6.QtWidgets import QApplication

from applauncher.application.app_launcher import AppLauncher
from applauncher.core.errors import CacheError
from applauncher.infra.config_loader import load_config
from applauncher.infra.recent_apps_cache import RecentAppsCache, recent_apps_capacity
from applauncher.infra.xdg_paths import cache_dir_path
from applauncher.logging import init_logger
from applauncher.presentation.launcher_window import LauncherWindow


def _save_recent_apps(cache: RecentAppsCache) -> None:
    try:
        cache.save()
    except CacheError:
        logger.exception("Failed to persist recent apps cache")


def main() -> int:
    init_logger()

    config = load_config()
    recent_cache = RecentAppsCache.load(
        cache_dir_path() / "recent_apps.json",
        capacity=recent_apps_capacity(config.max_search_results),
    )

    app = QApplication(sys.argv)
    launcher = AppLauncher(config, recent_cache)
    launcher.quit_requested.connect(app.quit)
    if config.enable_recent_apps:
        app.aboutToQuit.connect(lambda: _save_recent_apps(recent_cache))

    window = LauncherWindow(launcher)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
