"""Long-lived player state shared by the drag surface and the transition."""
from typing import Optional

from .corners import (
    DEFAULT_CORNER,
    VELOCITY_THRESHOLD,
    DragEndEvent,
    Rect,
    ResolutionResult,
    parse_corner,
    resolve_corner,
)


class PlayerState:
    """Anchor corner, transition offsets and visibility flags of the player.

    The corner changes only through ``commit()`` after a resolved drag, so the
    resolver always reads the anchor the panel is actually pinned to.
    """

    def __init__(self, corner: str = DEFAULT_CORNER, debug: bool = True):
        self.corner = parse_corner(corner)
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.is_animating = False
        self.playlist_expanded = False
        self.visible = True
        self.debug = debug
        self.pending: Optional[ResolutionResult] = None

    def set_offsets(self, x: float, y: float) -> None:
        self.offset_x = float(x)
        self.offset_y = float(y)

    def begin_drag(self) -> None:
        """Start a gesture; an in-flight transition is superseded."""
        self.pending = None
        self.is_animating = False

    def end_drag(
        self,
        event: DragEndEvent,
        container: Rect,
        panel: Rect,
        threshold: float = VELOCITY_THRESHOLD,
    ) -> ResolutionResult:
        """Resolve the released drag and remember the transition target."""
        result = resolve_corner(event, self.corner, container, panel, threshold=threshold)
        self.pending = result
        if result.target_corner != self.corner:
            self.is_animating = True
        return result

    def commit(self) -> str:
        """Finish the transition: pin the new corner and zero the offsets.

        Returns:
            The corner the panel is anchored to afterwards
        """
        if self.pending is not None:
            self.corner = self.pending.target_corner
            self.pending = None
        self.is_animating = False
        self.set_offsets(0.0, 0.0)
        return self.corner

    def dismiss(self) -> None:
        """Hide the player and collapse its playlist."""
        self.visible = False
        self.playlist_expanded = False

    def show(self) -> None:
        self.visible = True

    def toggle_playlist(self) -> bool:
        self.playlist_expanded = not self.playlist_expanded
        return self.playlist_expanded

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug
