"""Corner resolution for the snapping player panel.

Given the state of a drag at release, decide which container corner the panel
snaps to and how far it has to travel to get there. This module stays
Qt-agnostic so the decision logic can be unit tested without GUI dependencies.
"""

from dataclasses import dataclass

CORNER_TOP_LEFT = "top-left"
CORNER_TOP_RIGHT = "top-right"
CORNER_BOTTOM_LEFT = "bottom-left"
CORNER_BOTTOM_RIGHT = "bottom-right"

CORNERS = (CORNER_TOP_LEFT, CORNER_TOP_RIGHT, CORNER_BOTTOM_LEFT, CORNER_BOTTOM_RIGHT)
DEFAULT_CORNER = CORNER_BOTTOM_RIGHT

SIDE_LEFT = "left"
SIDE_RIGHT = "right"
SIDE_TOP = "top"
SIDE_BOTTOM = "bottom"

# px/s a release must exceed to override the drop quadrant on that axis
VELOCITY_THRESHOLD = 150.0


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle in viewport pixels."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class DragEndEvent:
    """Pointer point, release velocity and page scroll at the end of a drag."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0


@dataclass(frozen=True)
class ResolutionResult:
    """Where the panel goes and the transition offsets that take it there."""

    target_offset_x: float
    target_offset_y: float
    target_corner: str


@dataclass(frozen=True)
class _QuadrantRule:
    """Flick behaviour for one drop quadrant.

    ``flick_y``/``flick_x`` give the velocity sign that overrides the quadrant
    on that axis; the override always sends the panel to the opposite side.
    """

    flick_y: int
    flip_y: str
    flick_x: int
    flip_x: str


_QUADRANT_RULES = {
    (SIDE_RIGHT, SIDE_BOTTOM): _QuadrantRule(flick_y=-1, flip_y=SIDE_TOP, flick_x=-1, flip_x=SIDE_LEFT),
    (SIDE_LEFT, SIDE_BOTTOM): _QuadrantRule(flick_y=-1, flip_y=SIDE_TOP, flick_x=1, flip_x=SIDE_RIGHT),
    (SIDE_RIGHT, SIDE_TOP): _QuadrantRule(flick_y=1, flip_y=SIDE_BOTTOM, flick_x=-1, flip_x=SIDE_LEFT),
    (SIDE_LEFT, SIDE_TOP): _QuadrantRule(flick_y=1, flip_y=SIDE_BOTTOM, flick_x=1, flip_x=SIDE_RIGHT),
}


def parse_corner(value: str) -> str:
    """Normalize a corner label, raising ``ValueError`` for unknown labels."""
    normalized = str(value or "").strip().lower().replace("_", "-")
    if normalized not in CORNERS:
        raise ValueError(f"Invalid corner '{value}'. Must be one of {CORNERS}")
    return normalized


def corner_sides(corner: str) -> tuple[str, str]:
    """Split a corner label into its (horizontal, vertical) sides."""
    vertical, horizontal = corner.split("-")
    return horizontal, vertical


def make_corner(horizontal: str, vertical: str) -> str:
    return f"{vertical}-{horizontal}"


def quadrant_for(drag_x: float, drag_y: float, width: float, height: float) -> tuple[str, str]:
    """Return the (horizontal, vertical) half of the container holding a point.

    Points on a midline belong to the left/top half.
    """
    horizontal = SIDE_RIGHT if drag_x > width / 2 else SIDE_LEFT
    vertical = SIDE_BOTTOM if drag_y > height / 2 else SIDE_TOP
    return horizontal, vertical


def side_offset(current_side: str, target_side: str, container_size: float, panel_size: float) -> float:
    """Signed travel along one axis to move from one side to another.

    Zero when the panel already sits on the target side; otherwise the free
    space of the container, positive toward right/bottom.
    """
    if current_side == target_side:
        return 0
    travel = container_size - panel_size
    if target_side in (SIDE_RIGHT, SIDE_BOTTOM):
        return travel
    return -travel


def _flicked(velocity: float, direction: int, threshold: float) -> bool:
    if direction > 0:
        return velocity > threshold
    return velocity < -threshold


def _vertical_label(current_vertical: str, offset_y: float) -> str:
    # Vertical half used when a horizontal flick re-labels the corner.
    if current_vertical == SIDE_TOP and offset_y > 0:
        return SIDE_BOTTOM
    if current_vertical == SIDE_BOTTOM and offset_y == 0:
        return SIDE_BOTTOM
    return SIDE_TOP


def resolve_corner(
    event: DragEndEvent,
    current_corner: str,
    container_rect: Rect,
    panel_rect: Rect,
    threshold: float = VELOCITY_THRESHOLD,
) -> ResolutionResult:
    """Resolve the corner a released panel snaps to.

    Args:
        event: Drag end point, velocity and page scroll at release
        current_corner: Corner the panel is currently anchored to
        container_rect: Bounds of the drag container
        panel_rect: Current on-screen bounds of the panel
        threshold: Release speed (px/s) that must be exceeded to flick

    Returns:
        ResolutionResult with the offsets relative to the current anchor and
        the corner to anchor to once the transition finishes
    """
    drag_x = event.x - event.scroll_x - container_rect.left
    drag_y = event.y - event.scroll_y - container_rect.top

    horizontal, vertical = quadrant_for(drag_x, drag_y, container_rect.width, container_rect.height)
    rule = _QUADRANT_RULES[(horizontal, vertical)]
    current_horizontal, current_vertical = corner_sides(current_corner)

    offset_x = side_offset(current_horizontal, horizontal, container_rect.width, panel_rect.width)
    offset_y = side_offset(current_vertical, vertical, container_rect.height, panel_rect.height)
    target_corner = make_corner(horizontal, vertical)

    if _flicked(event.vy, rule.flick_y, threshold):
        vertical = rule.flip_y
        offset_y = side_offset(current_vertical, vertical, container_rect.height, panel_rect.height)
        target_corner = make_corner(horizontal, vertical)

    if _flicked(event.vx, rule.flick_x, threshold):
        horizontal = rule.flip_x
        offset_x = side_offset(current_horizontal, horizontal, container_rect.width, panel_rect.width)
        target_corner = make_corner(horizontal, _vertical_label(current_vertical, offset_y))

    return ResolutionResult(
        target_offset_x=offset_x,
        target_offset_y=offset_y,
        target_corner=target_corner,
    )
