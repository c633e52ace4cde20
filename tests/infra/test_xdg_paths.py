from pathlib import Path

from applauncher.infra import xdg_paths
from applauncher.infra.xdg_paths import cache_dir_path, config_file_path, data_dirs


def test_data_dirs_keeps_xdg_search_order(monkeypatch) -> None:
    monkeypatch.setattr(
        xdg_paths.BaseDirectory,
        "xdg_data_dirs",
        ["/home/user/.local/share", "/usr/local/share", "/usr/share"],
    )

    assert data_dirs() == [
        Path("/home/user/.local/share"),
        Path("/usr/local/share"),
        Path("/usr/share"),
    ]


def test_config_and_cache_paths_are_namespaced(monkeypatch) -> None:
    monkeypatch.setattr(xdg_paths.BaseDirectory, "xdg_config_home", "/cfg")
    monkeypatch.setattr(xdg_paths.BaseDirectory, "xdg_cache_home", "/cache")

    assert config_file_path() == Path("/cfg/applauncher/config.toml")
    assert cache_dir_path() == Path("/cache/applauncher")
