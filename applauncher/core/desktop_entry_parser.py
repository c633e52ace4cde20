from pathlib import Path
from typing import Final

from .launcher_types import ApplicationEntry

# Desktop entry field codes; substituted with file/URL arguments by a file manager.
FIELD_CODES: Final[tuple[str, ...]] = ("%f", "%u", "%U", "%F", "%i", "%c", "%k")

_NAME_PREFIX: Final[str] = "Name="
_EXEC_PREFIX: Final[str] = "Exec="


def strip_field_codes(command: str) -> str:
    """Removes every field-code placeholder from an `Exec=` value.

    Args:
        command: Raw `Exec=` value.

    Returns:
        The command with placeholders removed and surrounding whitespace trimmed.
    """
    for code in FIELD_CODES:
        command = command.replace(code, "")
    return command.strip()


def parse_desktop_entry_text(text: str) -> ApplicationEntry | None:
    """Extracts the display name and launch command from desktop entry text.

    Only the first `Name=` and the first `Exec=` line are honored, wherever they
    appear in the file. Section headers, localized keys and all other fields are
    ignored.

    Args:
        text: Contents of a `.desktop` file.

    Returns:
        The parsed entry, or None if either field is missing or empty.
    """
    name: str | None = None
    command: str | None = None

    # Only "\n" ends a line; other Unicode line breaks are part of the value.
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        if name is None and line.startswith(_NAME_PREFIX):
            name = line[len(_NAME_PREFIX) :].strip()
        elif command is None and line.startswith(_EXEC_PREFIX):
            command = line[len(_EXEC_PREFIX) :].strip()
        if name is not None and command is not None:
            break

    if not name or command is None:
        return None

    command = strip_field_codes(command)
    if not command:
        return None
    return ApplicationEntry(name=name, command=command)


def parse_desktop_entry(path: Path) -> ApplicationEntry | None:
    """Reads and parses one `.desktop` file.

    Unreadable files and files that are not valid UTF-8 yield None.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return parse_desktop_entry_text(text)
