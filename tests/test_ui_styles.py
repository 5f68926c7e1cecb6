"""Tests for UI style token and theme utilities."""
import warnings

import pytest

from cornerplayer.ui.styles import utils
from cornerplayer.ui.styles.tokens import RADIUS, SPACING, get_tokens, resolve_profile


class _FakeApp:
    def __init__(self):
        self.styles = []

    def setStyleSheet(self, value):
        self.styles.append(value)


def test_get_tokens_contains_expected_keys_for_themes():
    dark = get_tokens("dark")
    light = get_tokens("light")
    assert "BG_PANEL" in dark and "BG_PANEL" in light
    assert dark["BG_WINDOW"] != light["BG_WINDOW"]


def test_resolve_profile_auto_windows(monkeypatch):
    monkeypatch.setattr("cornerplayer.ui.styles.tokens.sys.platform", "win32", raising=False)
    assert resolve_profile("auto") == "windows-crisp"


def test_resolve_profile_default_non_windows(monkeypatch):
    monkeypatch.setattr("cornerplayer.ui.styles.tokens.sys.platform", "linux", raising=False)
    assert resolve_profile("auto") == "default"
    assert resolve_profile("windows-crisp") == "windows-crisp"
    assert resolve_profile("invalid-profile") == "default"


def test_get_tokens_windows_crisp_overrides_font_stack():
    default_tokens = get_tokens("dark", profile="default")
    crisp_tokens = get_tokens("dark", profile="windows-crisp")
    assert "Segoe UI" in crisp_tokens["FAMILY_PRIMARY"]
    assert crisp_tokens["SIZE_TINY"] != default_tokens["SIZE_TINY"]


def test_load_qss_existing_files():
    assert "PlayerWindow" in utils.load_qss("base.qss")
    assert "PlayerPanel" in utils.load_qss("player.qss")


def test_load_qss_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        utils.load_qss("nope.qss")


def test_bundled_sheets_only_use_known_tokens():
    sheets = [utils.load_qss("base.qss"), utils.load_qss("player.qss")]
    sheets += [utils.load_qss(f"components/{name}.qss") for name in utils.COMPONENTS]
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        out = utils.replace_tokens("\n".join(sheets), theme="light", profile="default")
    assert "{{" not in out


def test_replace_tokens_warns_on_missing_token():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        out = utils.replace_tokens("color: {{MISSING_TOKEN}};", theme="dark", profile="default")
    assert "{{MISSING_TOKEN}}" in out
    assert any("Missing theme tokens" in str(w.message) for w in caught)


def test_apply_theme_uses_cache(monkeypatch):
    app = _FakeApp()
    calls = {"count": 0}
    utils.clear_cache()

    def fake_load(filename):
        calls["count"] += 1
        return f"/* {filename} */\nQWidget {{ color: {{{{TEXT_PRIMARY}}}}; }}"

    monkeypatch.setattr(utils, "load_qss", fake_load)

    utils.apply_theme(app, theme="dark", profile="default")
    utils.apply_theme(app, theme="dark", profile="default")

    assert app.styles[0] == app.styles[1]
    assert "{{TEXT_PRIMARY}}" not in app.styles[0]
    # base + player + optional components, loaded once
    assert calls["count"] == 2 + len(utils.COMPONENTS)


def test_apply_theme_skips_missing_optional_components(monkeypatch):
    app = _FakeApp()
    utils.clear_cache()

    def fake_load(filename):
        if filename.startswith("components/"):
            raise FileNotFoundError(filename)
        return "QWidget { color: {{TEXT_PRIMARY}}; }"

    monkeypatch.setattr(utils, "load_qss", fake_load)
    utils.apply_theme(app, theme="light", profile="default")
    assert app.styles[-1]
    utils.clear_cache()


def test_get_color():
    assert utils.get_color("BG_PANEL", theme="dark", profile="default").startswith("#")
    with pytest.raises(KeyError):
        utils.get_color("NOPE", theme="dark", profile="default")


def test_every_spacing_and_radius_token_is_used():
    sheets = [utils.load_qss("base.qss"), utils.load_qss("player.qss")]
    sheets += [utils.load_qss(f"components/{name}.qss") for name in utils.COMPONENTS]
    combined = "\n".join(sheets)
    for name in list(SPACING) + list(RADIUS):
        assert f"{{{{{name}}}}}" in combined, name
