import shutil


def find_shell_executable() -> str:
    """Finds the POSIX shell used to run launch commands.

    Returns:
        The resolved path of `sh`, or the literal name if it is not on PATH.
    """
    return shutil.which("sh") or "sh"


def build_shell_argv(command: str, shell: str | None = None) -> list[str]:
    """Builds an argv list that runs a command line through the shell.

    Args:
        command: Command line to execute, passed through unquoted.
        shell: Shell executable path/name. If omitted, it will be auto-detected.

    Returns:
        Argument vector suitable for `subprocess.Popen(...)`.
    """
    exe = shell or find_shell_executable()
    return [exe, "-c", command]
