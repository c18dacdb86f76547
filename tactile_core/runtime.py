from __future__ import annotations

import logging
import time
from typing import Callable

from .scene import SceneNode
from .scheduler import CoroutineScheduler
from .timing import FrameClock, FrameRateController


LOGGER = logging.getLogger(__name__)


class SceneRuntime:
    """Owns the scene root, the frame clock and the per-frame routine scheduler.

    One `step` is one rendered frame: advance the clock, then tick routines. Input
    dispatch happens between steps on the same thread, so handlers never observe a
    half-applied frame.
    """

    def __init__(
        self,
        root: SceneNode | None = None,
        *,
        clock: FrameClock | None = None,
        scheduler: CoroutineScheduler | None = None,
    ) -> None:
        self.root = root if root is not None else SceneNode("Scene")
        self.clock = clock if clock is not None else FrameClock()
        self.scheduler = scheduler if scheduler is not None else CoroutineScheduler()
        self._last_error: Exception | None = None

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    def step(self, unscaled_dt: float) -> None:
        self.clock.advance(unscaled_dt)
        self.scheduler.tick()

    def run(
        self,
        *,
        max_ticks: int,
        target_fps: int = 60,
        realtime: bool = False,
        on_tick: Callable[[int], None] | None = None,
        should_continue: Callable[[], bool] | None = None,
    ) -> int:
        """Drive `max_ticks` frames; fixed-step unless `realtime` measures wall time."""

        if max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")
        rate = FrameRateController(target_fps=target_fps)
        ticks = 0
        last = time.perf_counter()
        try:
            for index in range(max_ticks):
                if should_continue is not None and not should_continue():
                    break
                if on_tick is not None:
                    on_tick(index)
                now = time.perf_counter()
                dt = max(0.0, now - last) if realtime else rate.target_dt
                last = now
                self.step(dt)
                ticks += 1
                if realtime:
                    sleep_for = rate.compute_sleep(now, time.perf_counter())
                    if sleep_for > 0:
                        time.sleep(sleep_for)
        except Exception as exc:  # noqa: BLE001
            self._last_error = exc
            LOGGER.exception("SceneRuntime loop failed: %s", exc)
            raise
        return ticks
