"""Poll config.toml and reload it when it changes on disk."""
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import get_config_path, load_config


def _strict_load(path: Path) -> Dict[str, Any]:
    return load_config(path=path, quiet=True, raise_on_error=True)


class ConfigReloader:
    """Return a freshly loaded config only when the file's mtime moves.

    Load errors propagate so the caller can keep its current settings.
    """

    def __init__(
        self,
        path_getter: Callable[[], Optional[Path]] = get_config_path,
        loader: Callable[[Path], Dict[str, Any]] = _strict_load,
        min_interval_s: float = 0.5,
    ):
        self.path_getter = path_getter
        self.loader = loader
        self.min_interval_s = min_interval_s
        self._last_check_ts = float("-inf")
        self._last_state: Optional[tuple[Path, int]] = None

    def _stat(self) -> Optional[tuple[Path, int]]:
        path = self.path_getter()
        if not path:
            return None
        try:
            return path, path.stat().st_mtime_ns
        except OSError:
            return None

    def prime(self) -> None:
        """Remember the current file state so the next poll does not reload it."""
        self._last_state = self._stat()

    def poll(self) -> Optional[Dict[str, Any]]:
        """Return the reloaded config when the file changed, else None."""
        now = time.monotonic()
        if now - self._last_check_ts < self.min_interval_s:
            return None
        self._last_check_ts = now

        state = self._stat()
        if state is None or state == self._last_state:
            return None

        self._last_state = state
        return self.loader(state[0])
