"""Release velocity estimation from pointer samples."""
from typing import List, Tuple

# Seconds of pointer history used to estimate the release velocity.
VELOCITY_WINDOW_S = 0.1


class VelocityTracker:
    """Collect timestamped pointer samples during a drag.

    The velocity is the displacement between the newest sample and the first
    sample older than the window, divided by the elapsed time.
    """

    def __init__(self, window_s: float = VELOCITY_WINDOW_S):
        self.window_s = window_s
        self._samples: List[Tuple[float, float, float]] = []

    def reset(self) -> None:
        """Drop all samples (start of a new gesture)."""
        self._samples.clear()

    def add(self, x: float, y: float, timestamp_s: float) -> None:
        """Record a pointer position at a monotonic timestamp in seconds."""
        self._samples.append((float(x), float(y), float(timestamp_s)))

    def __len__(self) -> int:
        return len(self._samples)

    def velocity(self) -> Tuple[float, float]:
        """Return the (vx, vy) velocity in px/s, or (0, 0) without enough history."""
        if len(self._samples) < 2:
            return 0.0, 0.0

        last_x, last_y, last_t = self._samples[-1]
        index = len(self._samples) - 1
        reference = self._samples[index]
        while index >= 0:
            reference = self._samples[index]
            if last_t - reference[2] > self.window_s:
                break
            index -= 1

        # A stale first sample would flatten a fast release; skip it.
        if (
            reference is self._samples[0]
            and len(self._samples) > 2
            and last_t - reference[2] > self.window_s * 2
        ):
            reference = self._samples[1]

        elapsed = last_t - reference[2]
        if elapsed <= 0:
            return 0.0, 0.0

        return (last_x - reference[0]) / elapsed, (last_y - reference[1]) / elapsed
