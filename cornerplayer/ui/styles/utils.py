"""Theme loader for the player window.

Loads QSS stylesheets and replaces ``{{TOKEN}}`` placeholders with values from
tokens.py.
"""

import re
import warnings
from pathlib import Path

from .tokens import get_tokens, resolve_profile


_qss_cache: dict[tuple[str, str, str], str] = {}

# Optional per-widget sheets appended after base and player.
COMPONENTS = ["buttons", "debug"]


def load_qss(filename: str) -> str:
    """Load a QSS stylesheet file from the styles directory.

    Raises:
        FileNotFoundError: If the QSS file doesn't exist
    """
    file_path = Path(__file__).parent / filename

    if not file_path.exists():
        raise FileNotFoundError(f"QSS file not found: {file_path}")

    return file_path.read_text(encoding="utf-8")


def replace_tokens(qss: str, theme: str = "dark", profile: str = "auto") -> str:
    """Replace {{TOKEN}} placeholders in QSS with design values.

    Unknown tokens are left in place and reported with a warning.

    Example:
        Input:  "background-color: {{BG_PANEL}};"
        Output: "background-color: #f87171;"
    """
    tokens = get_tokens(theme, profile=profile)
    missing = []

    def replacer(match):
        token_name = match.group(1)
        if token_name in tokens:
            return tokens[token_name]
        missing.append(token_name)
        return match.group(0)

    result = re.sub(r"\{\{([A-Z_]+)\}\}", replacer, qss)

    if missing:
        warnings.warn(
            f"Missing theme tokens: {', '.join(sorted(set(missing)))}",
            stacklevel=2,
        )

    return result


def apply_theme(app, theme: str = "dark", profile: str = "auto") -> None:
    """Build the combined stylesheet for a theme and apply it to a QApplication.

    Raises:
        FileNotFoundError: If base.qss or player.qss is missing
    """
    effective_profile = resolve_profile(profile)
    cache_key = ("combined", theme, effective_profile)
    if cache_key in _qss_cache:
        app.setStyleSheet(_qss_cache[cache_key])
        return

    sheets = [load_qss("base.qss"), load_qss("player.qss")]
    for component in COMPONENTS:
        try:
            sheets.append(load_qss(f"components/{component}.qss"))
        except FileNotFoundError:
            pass

    final_qss = replace_tokens("\n\n".join(sheets), theme, profile=effective_profile)

    _qss_cache[cache_key] = final_qss
    app.setStyleSheet(final_qss)


def get_color(color_name: str, theme: str = "dark", profile: str = "auto") -> str:
    """Get a color token for programmatic drawing.

    Raises:
        KeyError: If color name doesn't exist
    """
    return get_tokens(theme, profile=profile)[color_name]


def clear_cache() -> None:
    """Clear the QSS cache."""
    _qss_cache.clear()
