from typing import Final

from logly import logger
from PySide6.QtCore import QObject, Signal

from applauncher.application.app_interface import PowerActions
from applauncher.core.app_search import search_applications, seed_recent_apps
from applauncher.core.errors import LauncherError
from applauncher.core.launcher_types import ApplicationEntry, LauncherConfig
from applauncher.infra.config_loader import get_current_time
from applauncher.infra.desktop_locator import load_application_index
from applauncher.infra.power import SystemPowerActions
from applauncher.infra.process_spawner import launch_application
from applauncher.infra.recent_apps_cache import RecentAppsCache

ESC: Final[str] = "ESC"
ENTER: Final[str] = "ENTER"
POWER_OFF: Final[str] = "P"
RESTART: Final[str] = "R"
LOGOUT: Final[str] = "L"


class AppLauncher(QObject):
    """Launcher session: owns the index, the query and the current results.

    Input tokens drive a two-state machine. The session starts browsing and
    moves to quitting on Escape or after a successful launch; failed launches
    keep it browsing with query and results untouched.
    """

    results_changed = Signal(object)  # list[str]
    error = Signal(str)
    quit_requested = Signal()

    def __init__(
        self,
        config: LauncherConfig,
        recent_cache: RecentAppsCache,
        power: PowerActions | None = None,
        applications: list[ApplicationEntry] | None = None,
        parent: QObject | None = None,
    ):
        """Initializes the session.

        Args:
            config: Configuration snapshot.
            recent_cache: Recent-apps cache used for seeding and recording.
            power: Power action handler. Defaults to systemd.
            applications: Prebuilt index. If omitted, installed `.desktop` files
                are indexed.
            parent: Optional Qt parent object.
        """
        super().__init__(parent)
        self._config = config
        self._recent_cache = recent_cache
        self._power: PowerActions = power or SystemPowerActions()
        self._applications: tuple[ApplicationEntry, ...] = tuple(
            load_application_index() if applications is None else applications
        )
        self._query = ""
        self._is_quit = False
        self._search_results = self._initial_results()

    def _initial_results(self) -> list[ApplicationEntry]:
        if not self._config.enable_recent_apps:
            return []
        return seed_recent_apps(
            self._recent_cache.snapshot(),
            self._applications,
            self._config.max_search_results,
        )

    def update(self) -> None:
        """Periodic tick; requests shutdown once the session is quitting."""
        if self._is_quit:
            self.quit_requested.emit()

    def handle_input(self, token: str) -> None:
        """Applies one input token from the presentation layer.

        Args:
            token: "ESC", "ENTER", a power token ("P", "R", "L") when power
                options are enabled, or the query text.
        """
        if token == ESC:
            self._is_quit = True
        elif token == ENTER:
            self._launch_first_result()
        elif token == POWER_OFF and self._config.enable_power_options:
            self._power.power_off()
        elif token == RESTART and self._config.enable_power_options:
            self._power.restart()
        elif token == LOGOUT and self._config.enable_power_options:
            self._power.logout()
        else:
            self.set_query(token)

    def set_query(self, query: str) -> None:
        """Replaces the query and recomputes the results."""
        self._query = query
        self._search_results = search_applications(
            query, self._applications, self._config.max_search_results
        )
        self.results_changed.emit(self.get_search_results())

    def should_quit(self) -> bool:
        return self._is_quit

    def get_query(self) -> str:
        return self._query

    def get_search_results(self) -> list[str]:
        return [app.name for app in self._search_results]

    def get_time(self) -> str:
        return get_current_time(self._config)

    def get_config(self) -> LauncherConfig:
        return self._config

    def launch_app(self, app_name: str) -> None:
        """Launches the current result named `app_name`, if there is one."""
        for app in self._search_results:
            if app.name == app_name:
                self._launch(app)
                return

    def _launch_first_result(self) -> None:
        if self._search_results:
            self._launch(self._search_results[0])

    def _launch(self, app: ApplicationEntry) -> None:
        cache = self._recent_cache if self._config.enable_recent_apps else None
        try:
            launch_application(app.name, app.command, cache)
        except LauncherError as e:
            logger.error(f"Failed to launch app: {e}")
            self.error.emit(f"Failed to launch {app.name}: {e}")
            return
        self._is_quit = True
