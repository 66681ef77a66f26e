from __future__ import annotations

from pathlib import Path

from apphub_core.home import resolve_apps_root, resolve_config_path, resolve_hub_paths


def test_resolve_apps_root_from_env(tmp_path: Path) -> None:
    root = resolve_apps_root({"APPHUB_ROOT": str(tmp_path)})
    assert root == tmp_path.resolve()


def test_resolve_apps_root_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_apps_root({}) == tmp_path.resolve()
    assert resolve_apps_root({"APPHUB_ROOT": "   "}) == tmp_path.resolve()


def test_resolve_config_path_unset_is_none() -> None:
    assert resolve_config_path({}) is None


def test_resolve_hub_paths_prefers_explicit_values(tmp_path: Path) -> None:
    other = tmp_path / "other"
    paths = resolve_hub_paths(
        root=tmp_path,
        config_path=tmp_path / "hub.json",
        environ={"APPHUB_ROOT": str(other), "APPHUB_CONFIG": str(other / "x.json")},
    )
    assert paths.root == tmp_path.resolve()
    assert paths.config_path == (tmp_path / "hub.json").resolve()


def test_resolve_hub_paths_does_not_create_root(tmp_path: Path) -> None:
    missing = tmp_path / "missing"
    paths = resolve_hub_paths(root=missing, environ={})
    assert paths.root == missing.resolve()
    assert not missing.exists()


def test_resolve_setting_path_relative_to_config_file(tmp_path: Path) -> None:
    paths = resolve_hub_paths(
        root=tmp_path / "www", config_path=tmp_path / "etc" / "hub.json", environ={}
    )
    expected = (tmp_path / "etc" / "logs" / "hub.log").resolve()
    assert paths.resolve_setting_path("logs/hub.log") == expected
    absolute = tmp_path / "elsewhere.log"
    assert paths.resolve_setting_path(str(absolute)) == absolute.resolve()


def test_resolve_setting_path_without_config_uses_cwd(tmp_path: Path, monkeypatch) -> None:
    cwd = tmp_path / "run"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    paths = resolve_hub_paths(root=tmp_path / "www", environ={})
    assert paths.resolve_setting_path("hub.log") == (cwd / "hub.log").resolve()
