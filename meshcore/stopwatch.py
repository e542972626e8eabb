"""A simple stop watch for timing code."""

from __future__ import annotations

import sys
import time


class StopWatch:
    """Measures elapsed wall-clock time, accumulating across resumes."""

    def __init__(self) -> None:
        self._start_time = 0.0
        self._elapsed = 0.0
        self._running = False

    def start(self) -> None:
        """Reset the accumulated time and start measuring."""
        self._elapsed = 0.0
        self.resume()

    def resume(self) -> None:
        """Continue measuring, keeping the time accumulated so far."""
        self._start_time = time.perf_counter()
        self._running = True

    def stop(self) -> StopWatch:
        """Stop measuring and add the time since the last start or resume."""
        self._elapsed += time.perf_counter() - self._start_time
        self._running = False
        return self

    def elapsed(self) -> float:
        """Accumulated time in milliseconds; the watch should be stopped."""
        if self._running:
            print("StopWatch: stop timer before calling elapsed()", file=sys.stderr)
        return 1000.0 * self._elapsed

    def __str__(self) -> str:
        return f"{self.elapsed():g} ms"

    def __enter__(self) -> StopWatch:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()