"""Design tokens for the player window.

The theme loader substitutes these values into the QSS stylesheets so every
widget draws from the same palette.
"""
import sys

# Color Palette - Dark Theme
COLORS_DARK = {
    # Backgrounds
    "BG_WINDOW": "#1a1a1a",       # Container window (near black)
    "BG_PANEL": "#f87171",        # Player panel
    "BG_PLAYLIST": "#3b1d1d",     # Expanded playlist section
    "BG_PLAYLIST_ROW": "#5c2626", # Placeholder playlist rows
    "BG_BUTTON": "#2b2b2b",       # Show player / debug toggle
    "BG_BUTTON_HOVER": "#383838",

    # Borders
    "BORDER_PLAYLIST": "#4a3434",

    # Text
    "TEXT_PRIMARY": "#ffffff",
    "TEXT_SECONDARY": "#d4d4d4",
    "TEXT_DEBUG": "#e5e5e5",

    # Icons
    "ICON": "#ffffff",
}

# Color Palette - Light Theme
COLORS_LIGHT = {
    "BG_WINDOW": "#f4f4f5",
    "BG_PANEL": "#ef4444",
    "BG_PLAYLIST": "#fde2e2",
    "BG_PLAYLIST_ROW": "#fbc4c4",
    "BG_BUTTON": "#e4e4e7",
    "BG_BUTTON_HOVER": "#d4d4d8",

    "BORDER_PLAYLIST": "#f3b4b4",

    "TEXT_PRIMARY": "#18181b",
    "TEXT_SECONDARY": "#3f3f46",
    "TEXT_DEBUG": "#27272a",

    "ICON": "#ffffff",
}

# Typography
FONTS = {
    "FAMILY_PRIMARY": "Inter, 'Helvetica Neue', Arial, sans-serif",
    "SIZE_SMALL": "12px",         # Buttons
    "SIZE_TINY": "10px",          # Debug overlay, playlist caption
    "WEIGHT_MEDIUM": "500",
}

FONTS_WINDOWS_CRISP = {
    "FAMILY_PRIMARY": "'Segoe UI Variable Text', 'Segoe UI', Tahoma, Arial, sans-serif",
    "SIZE_SMALL": "13px",
    "SIZE_TINY": "11px",
    "WEIGHT_MEDIUM": "600",
}

SPACING = {
    "TINY": "4px",
    "SMALL": "8px",
    "MEDIUM": "16px",
}

# Border Radius (prefixed to avoid collision with SPACING keys)
RADIUS = {
    "RADIUS_SMALL": "4px",
    "RADIUS_LARGE": "8px",
}


def resolve_profile(profile: str = "auto") -> str:
    """Resolve effective token profile.

    Args:
        profile: "auto", "default", or "windows-crisp"
    """
    normalized = (profile or "auto").strip().lower()
    if normalized not in {"auto", "default", "windows-crisp"}:
        normalized = "auto"
    if normalized == "auto":
        return "windows-crisp" if sys.platform == "win32" else "default"
    return normalized


def get_tokens(theme: str = "dark", profile: str = "auto") -> dict:
    """Get all design tokens for a theme merged into one dict."""
    colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
    fonts = FONTS_WINDOWS_CRISP if resolve_profile(profile) == "windows-crisp" else FONTS

    return {
        **colors,
        **fonts,
        **SPACING,
        **RADIUS,
    }
