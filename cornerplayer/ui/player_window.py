"""Container window hosting the draggable, corner-snapping player panel."""
import time
from typing import Any, Dict, Optional

from PySide6.QtCore import QPointF, QSize, Qt, QTimer, QVariantAnimation, QEasingCurve, Signal
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from cornerplayer.config import DEFAULT_CONFIG, resolve_default_corner, resolve_velocity_threshold
from cornerplayer.config_reload import ConfigReloader
from cornerplayer.corners import DragEndEvent, Rect, ResolutionResult
from cornerplayer.layout import (
    anchored_rect,
    describe_anchor,
    drag_bounds,
    elastic_offset,
    format_offsets,
    offset_rect,
    panel_width_for,
)
from cornerplayer.state import PlayerState
from cornerplayer.ui.icons import render_icon
from cornerplayer.ui.styles.utils import get_color
from cornerplayer.velocity import VelocityTracker

PLAYLIST_ROWS = 5


class PlayerPanel(QFrame):
    """The draggable player: a header with buttons and a collapsible playlist.

    The panel only reports pointer activity; the window owns the geometry.
    """

    drag_started = Signal()
    drag_moved = Signal(float, float)                    # pointer delta since press
    drag_released = Signal(float, float, float, float)   # window point, velocity
    close_requested = Signal()
    playlist_toggle_requested = Signal()

    def __init__(self, header_height: int = 100, icon_color: str = "#ffffff", parent=None):
        super().__init__(parent)
        self.setObjectName("PlayerPanel")
        self.header_height = header_height
        self.icon_color = icon_color
        self._press_global: Optional[QPointF] = None
        self._dragging = False
        self.tracker = VelocityTracker()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = QWidget(self)
        self.header.setFixedHeight(header_height)
        header_layout = QVBoxLayout(self.header)
        header_layout.setContentsMargins(8, 8, 8, 8)

        self.close_button = self._icon_button("close", 12, "Close player")
        self.close_button.clicked.connect(self.close_requested.emit)
        self.expand_button = self._icon_button("playlist", 20, "Expand playlist")
        self.expand_button.clicked.connect(self.playlist_toggle_requested.emit)

        header_layout.addLayout(self._right_aligned(self.close_button))
        header_layout.addStretch(1)
        header_layout.addLayout(self._right_aligned(self.expand_button))
        layout.addWidget(self.header)

        self.playlist = QFrame(self)
        self.playlist.setObjectName("PlaylistSection")
        playlist_layout = QVBoxLayout(self.playlist)
        playlist_layout.setContentsMargins(8, 8, 8, 8)
        playlist_layout.setSpacing(4)
        caption = QLabel("PLAYLISTS...", self.playlist)
        caption.setObjectName("PlaylistCaption")
        playlist_layout.addWidget(caption)
        for _ in range(PLAYLIST_ROWS):
            row = QFrame(self.playlist)
            row.setObjectName("PlaylistRow")
            row.setFixedHeight(15)
            playlist_layout.addWidget(row)
        self.playlist.setVisible(False)
        layout.addWidget(self.playlist)

    def _icon_button(self, icon_name: str, icon_size: int, tooltip: str) -> QToolButton:
        button = QToolButton(self)
        button.setObjectName("PanelIconButton")
        button.setIcon(render_icon(icon_name, size=32, color=self.icon_color))
        button.setIconSize(QSize(icon_size, icon_size))
        button.setToolTip(tooltip)
        button.setAccessibleName(tooltip)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button

    @staticmethod
    def _right_aligned(widget: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.addStretch(1)
        row.addWidget(widget)
        return row

    def set_playlist_expanded(self, expanded: bool) -> None:
        self.playlist.setVisible(expanded)
        label = "Collapse playlist" if expanded else "Expand playlist"
        self.expand_button.setToolTip(label)
        self.expand_button.setAccessibleName(label)

    def content_height(self) -> int:
        """Header plus the playlist when it is expanded."""
        height = self.header_height
        if self.playlist.isVisibleTo(self):
            height += self.playlist.sizeHint().height()
        return height

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._press_global = event.globalPosition()
        self._dragging = False
        self.tracker.reset()
        self.tracker.add(self._press_global.x(), self._press_global.y(), time.monotonic())
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        if self._press_global is None:
            super().mouseMoveEvent(event)
            return
        point = event.globalPosition()
        self.tracker.add(point.x(), point.y(), time.monotonic())
        dx = point.x() - self._press_global.x()
        dy = point.y() - self._press_global.y()
        if not self._dragging:
            if abs(dx) + abs(dy) < QApplication.startDragDistance():
                event.accept()
                return
            self._dragging = True
            self.drag_started.emit()
        self.drag_moved.emit(dx, dy)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        if self._press_global is None or event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        dragging = self._dragging
        self._press_global = None
        self._dragging = False
        if not dragging:
            # a click, not a drag
            event.accept()
            return

        point = event.globalPosition()
        self.tracker.add(point.x(), point.y(), time.monotonic())
        vx, vy = self.tracker.velocity()

        local = self.parentWidget().mapFromGlobal(point) if self.parentWidget() else point
        self.drag_released.emit(local.x(), local.y(), vx, vy)
        event.accept()


class PlayerWindow(QWidget):
    """Window whose inset area is the drag container for the player panel.

    States:
        - visible: panel pinned to ``state.corner``, debug toggle in the centre
        - dragging: panel follows the pointer within elastic bounds
        - transitioning: offsets animate toward the resolved corner, then the
          anchor is committed and the offsets reset to zero
        - dismissed: panel hidden, "Show player" button in the centre
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        state: Optional[PlayerState] = None,
        reloader: Optional[ConfigReloader] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setObjectName("PlayerWindow")
        self.setWindowTitle("Corner Player")
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        config = config or DEFAULT_CONFIG
        panel_cfg = {**DEFAULT_CONFIG["panel"], **config.get("panel", {})}
        self.inset = int(panel_cfg["inset"])
        self.max_width = float(panel_cfg["max_width"])
        self.gutter = float(panel_cfg["gutter"])
        self.elastic = float(panel_cfg["elastic"])
        self.duration_ms = int(config.get("animation", {}).get("duration_ms", 500))
        self.threshold = resolve_velocity_threshold(config)

        if state is None:
            state = PlayerState(
                corner=resolve_default_corner(config),
                debug=bool(config.get("ui", {}).get("debug", True)),
            )
        self.state = state
        self._drag_start_offsets = (0.0, 0.0)

        self._build_center()

        ui_cfg = config.get("ui", {})
        self.panel = PlayerPanel(
            header_height=int(panel_cfg["header_height"]),
            icon_color=get_color("ICON", theme=ui_cfg.get("theme", "dark"), profile=ui_cfg.get("profile", "auto")),
            parent=self,
        )
        self.panel.drag_started.connect(self._on_drag_started)
        self.panel.drag_moved.connect(self._on_drag_moved)
        self.panel.drag_released.connect(self._on_drag_released)
        self.panel.close_requested.connect(self.dismiss_player)
        self.panel.playlist_toggle_requested.connect(self.toggle_playlist)
        self.resize(960, 640)

        self._animation = QVariantAnimation(self)
        self._animation.setEasingCurve(QEasingCurve.Type.OutBack)
        self._animation.valueChanged.connect(self._on_animation_step)
        self._animation.finished.connect(self.finish_transition)

        self._reloader = reloader
        self._reload_timer: Optional[QTimer] = None
        if reloader is not None:
            reloader.prime()
            self._reload_timer = QTimer(self)
            self._reload_timer.timeout.connect(self.poll_config)
            self._reload_timer.start(500)

        self._sync_widgets()

    def _build_center(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(self.inset, self.inset, self.inset, self.inset)
        layout.addStretch(1)

        self.show_button = QPushButton("Show player", self)
        self.show_button.setObjectName("CenterButton")
        self.show_button.clicked.connect(self.show_player)

        self.debug_button = QPushButton(self)
        self.debug_button.setObjectName("CenterButton")
        self.debug_button.clicked.connect(self.toggle_debug)

        self.debug_label = QLabel(self)
        self.debug_label.setObjectName("DebugLabel")

        for widget in (self.show_button, self.debug_button, self.debug_label):
            layout.addWidget(widget, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)

    # -- geometry ---------------------------------------------------------

    def container_rect(self) -> Rect:
        """The drag boundary: the window shrunk by the inset on every side."""
        return Rect(
            left=self.inset,
            top=self.inset,
            width=max(0, self.width() - 2 * self.inset),
            height=max(0, self.height() - 2 * self.inset),
        )

    def anchored_panel_rect(self) -> Rect:
        """Where the panel rests for the current anchor with zero offsets."""
        width = panel_width_for(self.width(), self.max_width, self.gutter)
        return anchored_rect(self.state.corner, self.container_rect(), width, self.panel.content_height())

    def panel_rect(self) -> Rect:
        """The panel's current on-screen rect (anchor plus offsets)."""
        return offset_rect(self.anchored_panel_rect(), self.state.offset_x, self.state.offset_y)

    def _place_panel(self) -> None:
        rect = self.panel_rect()
        self.panel.setGeometry(int(round(rect.left)), int(round(rect.top)), int(rect.width), int(rect.height))
        self.panel.raise_()

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._place_panel()

    # -- drag and transition ----------------------------------------------

    def _on_drag_started(self) -> None:
        if self._animation.state() == QVariantAnimation.State.Running:
            self._animation.stop()
        self.state.begin_drag()
        self._drag_start_offsets = (self.state.offset_x, self.state.offset_y)
        self._sync_widgets()

    def _on_drag_moved(self, dx: float, dy: float) -> None:
        (min_x, max_x), (min_y, max_y) = drag_bounds(
            self.state.corner, self.container_rect(), self.anchored_panel_rect()
        )
        start_x, start_y = self._drag_start_offsets
        self.state.set_offsets(
            elastic_offset(start_x + dx, min_x, max_x, self.elastic),
            elastic_offset(start_y + dy, min_y, max_y, self.elastic),
        )
        self._place_panel()
        self._sync_debug()

    def _on_drag_released(self, x: float, y: float, vx: float, vy: float) -> None:
        self.handle_drag_end(DragEndEvent(x=x, y=y, vx=vx, vy=vy))

    def handle_drag_end(self, event: DragEndEvent) -> ResolutionResult:
        """Resolve a finished drag and start the transition toward its corner."""
        result = self.state.end_drag(event, self.container_rect(), self.panel_rect(), threshold=self.threshold)
        self._animation.stop()
        self._animation.setDuration(self.duration_ms)
        self._animation.setStartValue(QPointF(self.state.offset_x, self.state.offset_y))
        self._animation.setEndValue(QPointF(result.target_offset_x, result.target_offset_y))
        self._sync_widgets()
        self._animation.start()
        return result

    def _on_animation_step(self, value) -> None:
        self.state.set_offsets(value.x(), value.y())
        self._place_panel()
        self._sync_debug()

    def finish_transition(self) -> None:
        """Commit the resolved corner and re-pin the panel with zero offsets."""
        if self._animation.state() == QVariantAnimation.State.Running:
            self._animation.stop()
        self.state.commit()
        self._place_panel()
        self._sync_widgets()

    # -- player controls --------------------------------------------------

    def dismiss_player(self) -> None:
        self.state.dismiss()
        self.panel.set_playlist_expanded(False)
        self._sync_widgets()

    def show_player(self) -> None:
        self.state.show()
        self._sync_widgets()

    def toggle_playlist(self) -> None:
        self.panel.set_playlist_expanded(self.state.toggle_playlist())
        self._place_panel()

    def toggle_debug(self) -> None:
        self.state.toggle_debug()
        self._sync_widgets()

    def keyPressEvent(self, event) -> None:
        if event.key() == Qt.Key.Key_Escape:
            self.dismiss_player()
            event.accept()
            return
        super().keyPressEvent(event)

    # -- config hot reload --------------------------------------------------

    def poll_config(self) -> None:
        """Apply a changed velocity threshold and debug flag from config.toml."""
        if self._reloader is None:
            return
        try:
            updated_config = self._reloader.poll()
        except Exception as e:
            print(f"[WARN] Config hot-reload skipped: {e}")
            return

        if updated_config is None:
            return

        self.threshold = resolve_velocity_threshold(updated_config)
        self.state.debug = bool(updated_config.get("ui", {}).get("debug", self.state.debug))
        self._sync_widgets()
        print("[INFO] Hot-reloaded config: snap/ui")

    # -- view sync ----------------------------------------------------------

    def _sync_debug(self) -> None:
        lines = [f"CSS: {describe_anchor(self.state.corner, self.inset)}"]
        lines.extend(format_offsets(self.state.offset_x, self.state.offset_y))
        self.debug_label.setText("\n".join(lines))

    def _sync_widgets(self) -> None:
        visible = self.state.visible
        self.panel.setVisible(visible)
        self.panel.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, self.state.is_animating)
        self.show_button.setVisible(not visible)
        self.debug_button.setVisible(visible)
        self.debug_button.setText(f"Debug {'off' if self.state.debug else 'on'}")
        self.debug_label.setVisible(visible and self.state.debug)
        self._sync_debug()
        self._place_panel()
