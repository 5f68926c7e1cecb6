"""Tests for configuration loading and serialization."""
import pathlib
import tomllib
from pathlib import Path

import pytest

from cornerplayer import config as config_module


class _FakePosixPath(pathlib.PurePosixPath):
    @classmethod
    def cwd(cls):
        return cls("/work")

    @classmethod
    def home(cls):
        return cls("/home/tester")


def test_merge_configs_is_recursive():
    base = {"a": {"x": 1, "y": 2}, "b": 1}
    overrides = {"a": {"y": 9}, "b": 5}
    result = config_module._merge_configs(base, overrides)
    assert result == {"a": {"x": 1, "y": 9}, "b": 5}
    assert base == {"a": {"x": 1, "y": 2}, "b": 1}


def test_find_config_path_uses_first_existing_dir(monkeypatch, tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (second / "config.toml").write_text("[snap]\ndefault_corner='top-left'\n", encoding="utf-8")

    monkeypatch.setattr(config_module, "_config_dirs", lambda: [first, second])
    assert config_module._find_config_path() == second / "config.toml"


def test_find_config_path_returns_none_when_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(config_module, "_config_dirs", lambda: [tmp_path])
    assert config_module._find_config_path() is None


def test_get_config_path_proxies_find(monkeypatch, tmp_path):
    target = tmp_path / "config.toml"
    monkeypatch.setattr(config_module, "_find_config_path", lambda: target)
    assert config_module.get_config_path() == target


def test_load_config_without_file_uses_defaults(monkeypatch, capsys):
    monkeypatch.setattr(config_module, "_find_config_path", lambda: None)
    loaded = config_module.load_config()
    out = capsys.readouterr().out
    assert loaded["snap"]["velocity_threshold"] == 150.0
    assert loaded["snap"]["default_corner"] == "bottom-right"
    assert "No config.toml found, using defaults" in out


def test_load_config_defaults_are_not_shared(monkeypatch):
    monkeypatch.setattr(config_module, "_find_config_path", lambda: None)
    loaded = config_module.load_config(quiet=True)
    loaded["snap"]["default_corner"] = "top-left"
    assert config_module.DEFAULT_CONFIG["snap"]["default_corner"] == "bottom-right"


def test_load_config_merges_user_values(tmp_path, capsys):
    conf = tmp_path / "config.toml"
    conf.write_text("[snap]\nvelocity_threshold = 400\n[ui]\ndebug = false\n", encoding="utf-8")
    loaded = config_module.load_config(path=conf)
    out = capsys.readouterr().out
    assert loaded["snap"]["velocity_threshold"] == 400
    assert loaded["snap"]["default_corner"] == "bottom-right"
    assert loaded["ui"]["debug"] is False
    assert loaded["panel"]["inset"] == 16
    assert "Loaded config from" in out


def test_load_config_invalid_file_falls_back_when_not_strict(tmp_path, capsys):
    invalid = tmp_path / "config.toml"
    invalid.write_text("[snap\nvelocity_threshold=1\n", encoding="utf-8")
    loaded = config_module.load_config(path=invalid, raise_on_error=False)
    out = capsys.readouterr().out
    assert loaded["snap"]["velocity_threshold"] == 150.0
    assert "Using default configuration" in out


def test_load_config_invalid_file_raises_when_strict(tmp_path):
    invalid = tmp_path / "config.toml"
    invalid.write_text("[snap\nvelocity_threshold=1\n", encoding="utf-8")
    with pytest.raises(tomllib.TOMLDecodeError):
        config_module.load_config(path=invalid, quiet=True, raise_on_error=True)


def test_save_config_writes_sections_and_types(tmp_path):
    path = tmp_path / "nested" / "config.toml"
    content = {
        "snap": {"velocity_threshold": 180.5, "default_corner": "top-left"},
        "ui": {"debug": True, "theme": "light"},
        "animation": {"duration_ms": 350},
    }
    config_module.save_config(path, content)

    raw = path.read_text(encoding="utf-8")
    assert "[snap]" in raw
    assert 'default_corner = "top-left"' in raw
    assert "velocity_threshold = 180.5" in raw
    assert "debug = true" in raw
    assert "duration_ms = 350" in raw
    assert tomllib.loads(raw) == content


def test_resolve_default_corner_falls_back_on_invalid(capsys):
    assert config_module.resolve_default_corner({"snap": {"default_corner": "top_left"}}) == "top-left"
    assert config_module.resolve_default_corner({"snap": {"default_corner": "middle"}}) == "bottom-right"
    assert "Invalid snap.default_corner" in capsys.readouterr().out


@pytest.mark.parametrize("raw, expected", [(200, 200.0), ("90", 90.0), (0, 0.0)])
def test_resolve_velocity_threshold_accepts_numbers(raw, expected):
    assert config_module.resolve_velocity_threshold({"snap": {"velocity_threshold": raw}}) == expected


@pytest.mark.parametrize("raw", [-5, "fast", True, None])
def test_resolve_velocity_threshold_falls_back_on_invalid(raw, capsys):
    assert config_module.resolve_velocity_threshold({"snap": {"velocity_threshold": raw}}) == 150.0
    assert "Invalid snap.velocity_threshold" in capsys.readouterr().out


def test_config_dirs_windows(monkeypatch):
    monkeypatch.setattr(config_module.os, "name", "nt", raising=False)
    monkeypatch.setattr(config_module.sys, "platform", "win32", raising=False)
    monkeypatch.setenv("APPDATA", r"C:\Users\me\AppData\Roaming")
    dirs = config_module._config_dirs()
    assert Path.cwd() in dirs
    assert Path(r"C:\Users\me\AppData\Roaming") / "cornerplayer" in dirs


def test_config_dirs_macos(monkeypatch):
    monkeypatch.setattr(config_module.os, "name", "posix", raising=False)
    monkeypatch.setattr(config_module.sys, "platform", "darwin", raising=False)
    monkeypatch.setattr(config_module, "Path", _FakePosixPath)
    dirs = config_module._config_dirs()
    assert _FakePosixPath("/work") in dirs
    assert _FakePosixPath("/home/tester/Library/Application Support/cornerplayer") in dirs


def test_config_dirs_linux(monkeypatch):
    monkeypatch.setattr(config_module.os, "name", "posix", raising=False)
    monkeypatch.setattr(config_module.sys, "platform", "linux", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", "/tmp/xdg")
    monkeypatch.setattr(config_module, "Path", _FakePosixPath)
    dirs = config_module._config_dirs()
    assert _FakePosixPath("/work") in dirs
    assert _FakePosixPath("/tmp/xdg/cornerplayer") in dirs


def test_get_platform_config_dir_linux_without_xdg(monkeypatch):
    monkeypatch.setattr(config_module.os, "name", "posix", raising=False)
    monkeypatch.setattr(config_module.sys, "platform", "linux", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setattr(config_module, "Path", _FakePosixPath)
    assert config_module.get_platform_config_dir() == _FakePosixPath("/home/tester/.config/cornerplayer")
