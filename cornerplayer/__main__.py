"""Main entry point for the corner player."""
import argparse
import signal
import sys
from pathlib import Path

from .config import get_config_path, load_config
from .config_reload import ConfigReloader
from .corners import CORNERS


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Corner player - a floating panel that snaps to window corners"
    )
    parser.add_argument(
        "--corner",
        choices=CORNERS,
        help="Corner the player starts in (overrides snap.default_corner)"
    )
    parser.add_argument(
        "--theme",
        choices=("dark", "light"),
        help="Color theme (overrides ui.theme)"
    )
    parser.add_argument(
        "--no-debug",
        action="store_true",
        help="Start with the debug overlay hidden"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config.toml (default: search working and user config dirs)"
    )
    return parser.parse_args(argv)


def _apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Return config with command line overrides applied."""
    if args.corner:
        config.setdefault("snap", {})["default_corner"] = args.corner
    if args.theme:
        config.setdefault("ui", {})["theme"] = args.theme
    if args.no_debug:
        config.setdefault("ui", {})["debug"] = False
    return config


def main(argv=None) -> None:
    """Main entry point."""
    args = _parse_args(argv)

    config = _apply_overrides(load_config(path=args.config), args)
    config_path = args.config or get_config_path()

    try:
        from PySide6.QtCore import QTimer
        from PySide6.QtWidgets import QApplication
        from cornerplayer.ui.player_window import PlayerWindow
        from cornerplayer.ui.styles.utils import apply_theme
    except ImportError as e:
        print(f"[ERR] PySide6 is required to show the player: {e}")
        sys.exit(1)

    try:
        app = QApplication(sys.argv[:1])
        app.setApplicationName("Corner Player")

        ui_cfg = config.get("ui", {})
        apply_theme(app, theme=ui_cfg.get("theme", "dark"), profile=ui_cfg.get("profile", "auto"))

        reloader = ConfigReloader(path_getter=lambda: config_path) if config_path else None
        window = PlayerWindow(config=config, reloader=reloader)
        window.show()

        # Keep terminal Ctrl+C usable while Qt event loop is running.
        def _handle_signal(*_args):
            app.quit()

        signal.signal(signal.SIGINT, _handle_signal)
        signal_pump = QTimer()
        signal_pump.timeout.connect(lambda: None)
        signal_pump.start(200)

        print("[INFO] Player window open (Esc dismisses the player)")
        exit_code = app.exec()
        sys.exit(exit_code)

    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")
    except Exception as e:
        print(f"\n[ERR] Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
