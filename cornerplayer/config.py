"""Configuration loading and serialization."""
import os
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from .corners import DEFAULT_CORNER, VELOCITY_THRESHOLD, parse_corner

APP_NAME = "cornerplayer"
CONFIG_FILENAME = "config.toml"

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "snap": {
        "velocity_threshold": VELOCITY_THRESHOLD,
        "default_corner": DEFAULT_CORNER,
    },
    "panel": {
        "max_width": 300,
        "gutter": 32,
        "header_height": 100,
        "inset": 16,
        "elastic": 0.5,
    },
    "animation": {
        "duration_ms": 500,
    },
    "ui": {
        "theme": "dark",
        "profile": "auto",
        "debug": True,
    },
}


def get_platform_config_dir() -> Path:
    """Return the per-user config directory for the current platform."""
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_NAME

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def _config_dirs() -> List[Path]:
    """Directories searched for config.toml, in priority order."""
    return [Path.cwd(), get_platform_config_dir()]


def _find_config_path() -> Optional[Path]:
    for directory in _config_dirs():
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def get_config_path() -> Optional[Path]:
    """Return the config file in use, or None when running on defaults."""
    return _find_config_path()


def _merge_configs(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override values into a copy of base."""
    result = {
        key: _merge_configs(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    quiet: bool = False,
    raise_on_error: bool = False,
) -> Dict[str, Any]:
    """Load config.toml merged over the defaults.

    Args:
        path: Explicit config file; searched for when omitted
        quiet: Suppress status output
        raise_on_error: Re-raise read/parse errors instead of using defaults

    Returns:
        Full config dict
    """
    config_path = Path(path) if path is not None else _find_config_path()

    if config_path is None:
        if not quiet:
            print("[INFO] No config.toml found, using defaults")
        return _merge_configs(DEFAULT_CONFIG, {})

    try:
        with open(config_path, "rb") as f:
            user_config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if raise_on_error:
            raise
        if not quiet:
            print(f"[WARN] Could not read {config_path}: {e}")
            print("[INFO] Using default configuration")
        return _merge_configs(DEFAULT_CONFIG, {})

    if not quiet:
        print(f"[OK] Loaded config from {config_path}")
    return _merge_configs(DEFAULT_CONFIG, user_config)


def _format_toml_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def save_config(path: Path, config: Dict[str, Any]) -> None:
    """Write a section/key config dict as TOML."""
    lines: List[str] = []
    for section, values in config.items():
        if not isinstance(values, dict):
            continue
        if lines:
            lines.append("")
        lines.append(f"[{section}]")
        for key, value in values.items():
            lines.append(f"{key} = {_format_toml_value(value)}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def resolve_default_corner(config: Dict[str, Any]) -> str:
    """Return the configured start corner, falling back to the default."""
    raw = config.get("snap", {}).get("default_corner", DEFAULT_CORNER)
    try:
        return parse_corner(raw)
    except ValueError:
        print(f"[WARN] Invalid snap.default_corner '{raw}', using {DEFAULT_CORNER}")
        return DEFAULT_CORNER


def resolve_velocity_threshold(config: Dict[str, Any]) -> float:
    """Return the configured flick threshold in px/s, falling back to the default."""
    raw = config.get("snap", {}).get("velocity_threshold", VELOCITY_THRESHOLD)
    try:
        threshold = float(raw)
    except (TypeError, ValueError):
        threshold = -1.0
    if isinstance(raw, bool) or threshold < 0:
        print(f"[WARN] Invalid snap.velocity_threshold '{raw}', using {VELOCITY_THRESHOLD:g}")
        return VELOCITY_THRESHOLD
    return threshold
