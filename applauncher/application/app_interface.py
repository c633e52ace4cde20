from typing import Protocol, runtime_checkable

from applauncher.core.launcher_types import LauncherConfig


@runtime_checkable
class AppInterface(Protocol):
    """What the presentation layer needs from a launcher session."""

    def update(self) -> None: ...

    def handle_input(self, token: str) -> None: ...

    def should_quit(self) -> bool: ...

    def get_query(self) -> str: ...

    def get_search_results(self) -> list[str]: ...

    def get_time(self) -> str: ...

    def launch_app(self, app_name: str) -> None: ...

    def get_config(self) -> LauncherConfig: ...


class PowerActions(Protocol):
    """OS-level power actions triggered from the launcher."""

    def power_off(self) -> None: ...

    def restart(self) -> None: ...

    def logout(self) -> None: ...
