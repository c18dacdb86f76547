from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Sequence

from tactile_core.math3d import Vector3, lerp_unclamped, vec3
from tactile_core.scene import SceneNode
from tactile_core.scheduler import CoroutineScheduler, Routine, TaskHandle
from tactile_core.timing import FrameClock

from .easing import Easing


LOGGER = logging.getLogger(__name__)


@dataclass
class AnimationRun:
    """One in-flight ease of a scale vector from `start` to `end`."""

    start: Vector3
    end: Vector3
    duration: float
    easing: Easing | None = None
    elapsed: float = field(default=0.0)

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, self.elapsed / self.duration))

    @property
    def finished(self) -> bool:
        return self.progress >= 1.0

    def advance(self, dt: float) -> Vector3:
        """Add `dt` seconds and return the scale for the new elapsed time."""

        self.elapsed += dt
        progress = self.progress
        if progress >= 1.0:
            return self.end.copy()
        k = self.easing(progress) if self.easing is not None else progress
        return lerp_unclamped(self.start, self.end, k)


class ScaleAnimator:
    """Eases one node's `local_scale` on the frame scheduler, one run at a time.

    Every new request cancels the in-flight routine and starts from the node's
    current scale. Time comes from `clock.unscaled_delta_time` so `time_scale`
    never stretches the feedback. With no usable target every request is a no-op.
    """

    def __init__(
        self,
        target: SceneNode | None,
        scheduler: CoroutineScheduler,
        clock: FrameClock,
        *,
        easing: Easing | None = None,
    ) -> None:
        self.target = target
        self.scheduler = scheduler
        self.clock = clock
        self.easing = easing
        self._task: TaskHandle | None = None
        self._run: AnimationRun | None = None

    @property
    def has_target(self) -> bool:
        return self.target is not None and not self.target.destroyed

    @property
    def is_running(self) -> bool:
        return self._task is not None and self._task.running

    @property
    def current_run(self) -> AnimationRun | None:
        return self._run if self.is_running else None

    def animate_to(self, end: Iterable[float] | Vector3, duration: float) -> TaskHandle | None:
        return self.play_sequence([(vec3(end), duration)])

    def play_sequence(self, legs: Sequence[tuple[Vector3, float]]) -> TaskHandle | None:
        """Run legs back to back; each leg starts once the previous one has snapped."""

        self.cancel()
        if not self.has_target:
            return None
        task = self.scheduler.start(self._sequence_routine(list(legs)), name="scale-animation")
        if task.running:
            self._task = task
            return task
        return None

    def cancel(self) -> bool:
        task = self._task
        self._task = None
        self._run = None
        if task is None:
            return False
        return self.scheduler.stop(task)

    def snap_to(self, scale: Iterable[float] | Vector3) -> None:
        self.cancel()
        if self.has_target:
            self.target.local_scale = vec3(scale)

    def _sequence_routine(self, legs: list[tuple[Vector3, float]]) -> Routine:
        for end, duration in legs:
            yield from self._ease_routine(end, duration)

    def _ease_routine(self, end: Vector3, duration: float) -> Routine:
        target = self.target
        if target is None or target.destroyed:
            return
        if duration <= 0:
            target.local_scale = end
            return
        run = AnimationRun(start=target.local_scale.copy(), end=vec3(end), duration=duration, easing=self.easing)
        self._run = run
        try:
            while not run.finished:
                yield
                if target.destroyed:
                    LOGGER.debug("scale target `%s` destroyed mid-animation", target.name)
                    return
                target.local_scale = run.advance(self.clock.unscaled_delta_time)
        finally:
            if self._run is run:
                self._run = None
