"""Recent frame times, for showing frame rate and CPU time per frame."""

from __future__ import annotations

import math
from collections import deque


class FrameHistory:
    """Frame times from the last second, at most 300 of them."""

    def __init__(self, max_age: float = 1.0) -> None:
        self.max_age = max_age
        self.max_len = round(max_age * 300.0)
        self._frames: deque[tuple[float, float]] = deque()

    def __len__(self) -> int:
        return len(self._frames)

    def _flush(self, now: float) -> None:
        while len(self._frames) > self.max_len:
            self._frames.popleft()
        while self._frames and self._frames[0][0] < now - self.max_age:
            self._frames.popleft()

    def on_new_frame(self, now: float, previous_frame_time: float | None) -> None:
        """Record a new frame; the previous one's time is now known."""
        if self._frames and now < self._frames[-1][0]:
            raise ValueError("time must not move backwards")
        frame_time = previous_frame_time or 0.0
        if self._frames:
            last_time, _ = self._frames[-1]
            self._frames[-1] = (last_time, frame_time)
        self._frames.append((now, frame_time))
        self._flush(now)

    def mean_frame_time(self) -> float:
        if not self._frames:
            return 0.0
        return sum(value for _, value in self._frames) / len(self._frames)

    def _mean_time_interval(self) -> float:
        if len(self._frames) < 2:
            return 0.0
        duration = self._frames[-1][0] - self._frames[0][0]
        return duration / (len(self._frames) - 1)

    def fps(self) -> float:
        interval = self._mean_time_interval()
        return math.inf if interval == 0 else 1.0 / interval