"""Helpers for placing the anchored player panel inside its container.

This module intentionally stays Qt-agnostic so anchoring, drag constraints and
debug labels can be unit tested without GUI dependencies.
"""

from .corners import SIDE_BOTTOM, SIDE_RIGHT, Rect, corner_sides


def panel_width_for(container_width: float, max_width: float = 300, gutter: float = 32) -> float:
    """Return the panel width: the container minus a gutter, capped at max_width."""
    return max(0.0, min(float(max_width), float(container_width) - gutter))


def anchored_rect(
    corner: str,
    container: Rect,
    panel_width: float,
    panel_height: float,
    inset: float = 0,
) -> Rect:
    """Return the resting rect of a panel pinned to a container corner."""
    horizontal, vertical = corner_sides(corner)

    if horizontal == SIDE_RIGHT:
        left = container.right - inset - panel_width
    else:
        left = container.left + inset

    if vertical == SIDE_BOTTOM:
        top = container.bottom - inset - panel_height
    else:
        top = container.top + inset

    return Rect(left=left, top=top, width=panel_width, height=panel_height)


def offset_rect(rect: Rect, dx: float, dy: float) -> Rect:
    """Translate a rect by transition offsets."""
    return Rect(left=rect.left + dx, top=rect.top + dy, width=rect.width, height=rect.height)


def drag_bounds(corner: str, container: Rect, panel: Rect) -> tuple[tuple[float, float], tuple[float, float]]:
    """Return the ((min_x, max_x), (min_y, max_y)) offsets that keep the panel inside.

    Offsets are measured from the panel's anchored position, so a panel pinned
    right can only travel left (negative x) and so on.
    """
    horizontal, vertical = corner_sides(corner)
    travel_x = max(0.0, container.width - panel.width)
    travel_y = max(0.0, container.height - panel.height)

    x_range = (-travel_x, 0.0) if horizontal == SIDE_RIGHT else (0.0, travel_x)
    y_range = (-travel_y, 0.0) if vertical == SIDE_BOTTOM else (0.0, travel_y)
    return x_range, y_range


def elastic_offset(value: float, minimum: float, maximum: float, elastic: float = 0.5) -> float:
    """Constrain a drag offset, letting it overshoot by a fraction of the excess.

    With ``elastic`` 0 the value is clamped hard; with 1 it is unconstrained.
    """
    if value < minimum:
        return minimum + (value - minimum) * elastic
    if value > maximum:
        return maximum + (value - maximum) * elastic
    return value


def describe_anchor(corner: str, inset: int = 16) -> str:
    """Return the debug label for an anchor, e.g. ``bottom-16 right-16``."""
    horizontal, vertical = corner_sides(corner)
    return f"{vertical}-{inset} {horizontal}-{inset}"


def format_offsets(x: float, y: float) -> list[str]:
    """Return the debug overlay lines for the live transition offsets."""
    return [f"X Position: {x:.4f}", f"Y Position: {y:.4f}"]
