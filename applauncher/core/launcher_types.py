from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ApplicationEntry:
    """Represents an installed application parsed from a `.desktop` file.

    Attributes:
        name: Display name (first `Name=` value).
        command: Shell command line with field codes stripped.
    """

    name: str
    command: str


@dataclass(frozen=True, slots=True)
class LauncherConfig:
    """Options recognized by the launcher.

    Attributes:
        enable_recent_apps: Seed results from, and record launches into, the
            recent-apps cache.
        enable_power_options: Accept the power-off/restart/logout tokens.
        max_search_results: Upper bound for both seeded and searched results.
        timezone: IANA zone name for the clock. Empty means local time.
        time_format: `strftime` format for the clock.
    """

    enable_recent_apps: bool = True
    enable_power_options: bool = False
    max_search_results: int = 5
    timezone: str = ""
    time_format: str = "%H:%M"
