# galton/sim/scheduler.py
import itertools
from dataclasses import dataclass
from typing import Callable, Dict, Optional

Callback = Callable[[], None]


@dataclass
class _Interval:
    callback: Callback
    delay_ms: float
    due_ms: float


class Scheduler:
    """
    Cooperative stand-in for a browser event loop.

    The owner calls tick(dt_ms) once per display refresh. Due interval
    callbacks run first, each at most once however long the tick was,
    then every frame callback that was requested before this tick. A frame requested from inside a frame callback runs
    on the next tick. Handles are ints; cancelling None or a stale handle
    is a no-op.
    """

    def __init__(self):
        self.now_ms: float = 0.0
        self._ids = itertools.count(1)
        self._frames: Dict[int, Callback] = {}
        self._batch: Dict[int, Callback] = {}   # frames being run by the current tick
        self._intervals: Dict[int, _Interval] = {}

    # ---------------- Animation frames ----------------
    def request_frame(self, callback: Callback) -> int:
        handle = next(self._ids)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: Optional[int]):
        if handle is not None:
            self._frames.pop(handle, None)
            self._batch.pop(handle, None)

    # ---------------- Intervals ----------------
    def set_interval(self, callback: Callback, delay_ms: float) -> int:
        if delay_ms <= 0:
            raise ValueError("interval delay must be positive")
        handle = next(self._ids)
        self._intervals[handle] = _Interval(callback, float(delay_ms), self.now_ms + delay_ms)
        return handle

    def clear_interval(self, handle: Optional[int]):
        if handle is not None:
            self._intervals.pop(handle, None)

    def has_interval(self, handle: Optional[int]) -> bool:
        return handle is not None and handle in self._intervals

    @property
    def idle(self) -> bool:
        return not self._frames and not self._intervals

    # ---------------- Pump ----------------
    def tick(self, dt_ms: float):
        self.now_ms += max(0.0, dt_ms)
        self._run_intervals()
        self._run_frames()

    def _run_intervals(self):
        # at most one run per interval per tick; missed periods are dropped
        due = sorted((iv.due_ms, h) for h, iv in self._intervals.items() if iv.due_ms <= self.now_ms)
        for _, handle in due:
            iv = self._intervals.get(handle)
            if iv is None:
                continue
            iv.due_ms = max(iv.due_ms + iv.delay_ms, self.now_ms + iv.delay_ms)
            # the callback may clear its own interval
            iv.callback()

    def _run_frames(self):
        self._batch, self._frames = self._frames, {}
        while self._batch:
            handle = next(iter(self._batch))
            cb = self._batch.pop(handle)
            cb()
