from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameClock:
    """Per-frame time source with separate scaled and unscaled deltas.

    Simulation code reads `delta_time`, which follows `time_scale`. Cosmetic
    feedback (press pulses, hover fades) reads `unscaled_delta_time` so pausing or
    slowing the simulation does not freeze it.
    """

    time_scale: float = 1.0
    frame_count: int = 0
    unscaled_delta_time: float = 0.0
    unscaled_time: float = 0.0
    delta_time: float = 0.0
    time: float = 0.0

    def __post_init__(self) -> None:
        if self.time_scale < 0:
            raise ValueError("time_scale must be >= 0")

    def advance(self, unscaled_dt: float) -> None:
        if unscaled_dt < 0:
            raise ValueError("unscaled_dt must be >= 0")
        if self.time_scale < 0:
            raise ValueError("time_scale must be >= 0")
        self.frame_count += 1
        self.unscaled_delta_time = float(unscaled_dt)
        self.unscaled_time += self.unscaled_delta_time
        self.delta_time = self.unscaled_delta_time * self.time_scale
        self.time += self.delta_time


@dataclass
class FrameRateController:
    """Fixed frame cadence for the headless runtime loop."""

    target_fps: int

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be > 0")

    @property
    def target_dt(self) -> float:
        return 1.0 / float(self.target_fps)

    def compute_sleep(self, loop_started_at: float, loop_finished_at: float) -> float:
        elapsed = max(0.0, loop_finished_at - loop_started_at)
        return max(0.0, self.target_dt - elapsed)
