from applauncher.core.app_search import search_applications, seed_recent_apps
from applauncher.core.launcher_types import ApplicationEntry

FILES = ApplicationEntry("Files", "nautilus")
FIREFOX = ApplicationEntry("Firefox", "firefox")
FILE_MANAGER = ApplicationEntry("File Manager", "pcmanfm")
TERMINAL = ApplicationEntry("Terminal", "/usr/bin/xterm")


def test_search_applications_is_case_insensitive_and_keeps_index_order() -> None:
    index = [FILES, FIREFOX, FILE_MANAGER]

    assert search_applications("file", index, 10) == [FILES, FILE_MANAGER]
    assert search_applications("FILE", index, 10) == [FILES, FILE_MANAGER]


def test_search_applications_matches_contiguous_substring_only() -> None:
    index = [FILES, FIREFOX, TERMINAL]

    assert search_applications("fox", index, 10) == [FIREFOX]
    assert search_applications("fx", index, 10) == []


def test_search_applications_empty_query_returns_first_entries() -> None:
    index = [FILES, FIREFOX, FILE_MANAGER, TERMINAL]

    assert search_applications("", index, 2) == [FILES, FIREFOX]


def test_search_applications_deduplicates_by_name_first_wins() -> None:
    flatpak_firefox = ApplicationEntry("Firefox", "flatpak run org.mozilla.firefox")
    index = [FIREFOX, flatpak_firefox, FILES]

    results = search_applications("", index, 10)

    assert results == [FIREFOX, FILES]
    assert len({app.name for app in results}) == len(results)


def test_search_applications_dedup_happens_before_truncation() -> None:
    index = [FIREFOX, FIREFOX, FIREFOX, FILES]

    assert search_applications("", index, 2) == [FIREFOX, FILES]


def test_search_applications_caps_results() -> None:
    index = [ApplicationEntry(f"App {i}", f"app{i}") for i in range(20)]

    results = search_applications("app", index, 5)

    assert len(results) == 5
    assert all("app" in app.name.lower() for app in results)


def test_search_applications_handles_empty_index() -> None:
    assert search_applications("anything", [], 5) == []


def test_seed_recent_apps_skips_unknown_names_and_keeps_order() -> None:
    index = [FILES, TERMINAL, FIREFOX]

    results = seed_recent_apps(["Firefox", "Ghost", "Terminal"], index, 10)

    assert [app.name for app in results] == ["Firefox", "Terminal"]


def test_seed_recent_apps_truncates_and_uses_first_index_match() -> None:
    other_terminal = ApplicationEntry("Terminal", "gnome-terminal")
    index = [TERMINAL, other_terminal, FILES, FIREFOX]

    results = seed_recent_apps(["Terminal", "Files", "Firefox"], index, 2)

    assert results == [TERMINAL, FILES]


def test_seed_recent_apps_requires_exact_name() -> None:
    assert seed_recent_apps(["firefox", "File"], [FIREFOX, FILES], 5) == []
