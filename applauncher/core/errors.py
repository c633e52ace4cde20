class LauncherError(Exception):
    """Base class for recoverable launch failures."""


class CacheError(LauncherError):
    """The recent-apps cache could not be updated or persisted."""


class HomeDirectoryError(LauncherError):
    """The invoking user's home directory could not be resolved."""


class SpawnError(LauncherError):
    """The shell process for an application could not be started."""
