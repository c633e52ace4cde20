import getpass

from logly import logger

from applauncher.core.errors import SpawnError
from applauncher.infra.process_spawner import spawn_detached


def build_power_argv(action: str, user: str | None = None) -> list[str]:
    """Builds the argv for an OS power action.

    Args:
        action: One of "poweroff", "reboot" or "logout".
        user: Login name for "logout". If omitted, the current user is used.

    Returns:
        Argument vector suitable for `subprocess.Popen(...)`.

    Raises:
        ValueError: If the action is unknown.
    """
    if action == "poweroff":
        return ["systemctl", "poweroff"]
    if action == "reboot":
        return ["systemctl", "reboot"]
    if action == "logout":
        return ["loginctl", "terminate-user", user or getpass.getuser()]
    raise ValueError(f"unknown power action: {action}")


class SystemPowerActions:
    """Runs power actions through systemd."""

    def power_off(self) -> None:
        self._run("poweroff")

    def restart(self) -> None:
        self._run("reboot")

    def logout(self) -> None:
        self._run("logout")

    @staticmethod
    def _run(action: str) -> None:
        logger.info(f"Requesting power action {action}")
        try:
            spawn_detached(build_power_argv(action))
        except (SpawnError, OSError, KeyError) as e:
            logger.error(f"Power action {action} failed: {e}")
