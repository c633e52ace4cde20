from pathlib import Path

from applauncher.core.desktop_entry_parser import (
    FIELD_CODES,
    parse_desktop_entry,
    parse_desktop_entry_text,
    strip_field_codes,
)
from applauncher.core.launcher_types import ApplicationEntry


def test_parse_desktop_entry_text_reads_name_and_exec() -> None:
    text = (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=  Text Editor  \n"
        "Comment=Edit text files\n"
        "Exec=gedit %U\n"
        "Icon=gedit\n"
    )

    assert parse_desktop_entry_text(text) == ApplicationEntry(
        name="Text Editor", command="gedit"
    )


def test_parse_desktop_entry_text_first_occurrence_wins() -> None:
    text = (
        "[Desktop Entry]\n"
        "Name=Web Browser\n"
        "Exec=firefox %u\n"
        "\n"
        "[Desktop Action new-window]\n"
        "Name=New Window\n"
        "Exec=firefox --new-window %u\n"
    )

    assert parse_desktop_entry_text(text) == ApplicationEntry(
        name="Web Browser", command="firefox"
    )


def test_parse_desktop_entry_text_ignores_section_headers() -> None:
    text = "[Desktop Action new]\nExec=tool --new\n[Desktop Entry]\nName=Tool\n"

    assert parse_desktop_entry_text(text) == ApplicationEntry("Tool", "tool --new")


def test_parse_desktop_entry_text_prefix_is_case_sensitive() -> None:
    text = "name=lower\nNAME=upper\nExec=app\n"

    assert parse_desktop_entry_text(text) is None


def test_parse_desktop_entry_text_ignores_localized_keys() -> None:
    text = "Name[de]=Dateien\nName=Files\nExec=nautilus --new-window\n"

    assert parse_desktop_entry_text(text) == ApplicationEntry(
        name="Files", command="nautilus --new-window"
    )


def test_parse_desktop_entry_text_returns_none_when_field_missing() -> None:
    assert parse_desktop_entry_text("[Desktop Entry]\nName=Only Name\n") is None
    assert parse_desktop_entry_text("[Desktop Entry]\nExec=only-exec\n") is None
    assert parse_desktop_entry_text("") is None


def test_parse_desktop_entry_text_returns_none_for_empty_values() -> None:
    assert parse_desktop_entry_text("Name=   \nExec=app\n") is None
    assert parse_desktop_entry_text("Name=App\nExec= %f %u\n") is None


def test_parse_desktop_entry_text_handles_crlf_line_endings() -> None:
    text = "Name=Paint\r\nExec=kolourpaint %F\r\n"

    assert parse_desktop_entry_text(text) == ApplicationEntry("Paint", "kolourpaint")


def test_strip_field_codes_removes_every_placeholder() -> None:
    command = "app " + " ".join(FIELD_CODES) + " --flag"

    cleaned = strip_field_codes(command)

    assert all(code not in cleaned for code in FIELD_CODES)
    assert cleaned.startswith("app")
    assert cleaned.endswith("--flag")


def test_strip_field_codes_removes_literal_substrings() -> None:
    assert strip_field_codes("  viewer --file=%f  ") == "viewer --file="


def test_parse_desktop_entry_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "org.example.Terminal.desktop"
    path.write_text("[Desktop Entry]\nName=Terminal\nExec=/usr/bin/xterm\n")

    assert parse_desktop_entry(path) == ApplicationEntry("Terminal", "/usr/bin/xterm")


def test_parse_desktop_entry_returns_none_for_missing_file(tmp_path: Path) -> None:
    assert parse_desktop_entry(tmp_path / "missing.desktop") is None


def test_parse_desktop_entry_returns_none_for_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "broken.desktop"
    path.write_bytes(b"Name=\xff\xfe\nExec=app\n")

    assert parse_desktop_entry(path) is None


def test_parse_desktop_entry_text_only_splits_on_newline() -> None:
    text = "Name=Viewer\nComment=see\u2028Exec=evil --pwn\nExec=viewer %f\n"

    assert parse_desktop_entry_text(text) == ApplicationEntry("Viewer", "viewer")


def test_parse_desktop_entry_text_keeps_form_feed_inside_values() -> None:
    entry = parse_desktop_entry_text("Name=A\x0cB\nExec=app\n")

    assert entry == ApplicationEntry("A\x0cB", "app")
