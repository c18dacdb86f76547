from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, TypeAlias


Easing: TypeAlias = Callable[[float], float]


def linear(progress: float) -> float:
    return progress


@dataclass(frozen=True)
class Keyframe:
    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


class EasingCurve:
    """Keyframed curve evaluated with cubic Hermite segments.

    Outside the key range the curve holds the first/last value. The default
    `ease_in_out` curve (two keys, flat tangents) is the classic smoothstep.
    """

    def __init__(self, keys: Iterable[Keyframe]) -> None:
        ordered = sorted(keys, key=lambda k: k.time)
        if not ordered:
            raise ValueError("EasingCurve needs at least one keyframe")
        for a, b in zip(ordered, ordered[1:]):
            if b.time == a.time:
                raise ValueError(f"duplicate keyframe time: {a.time}")
        self._keys: tuple[Keyframe, ...] = tuple(ordered)

    def __repr__(self) -> str:
        return f"EasingCurve({list(self._keys)!r})"

    @property
    def keys(self) -> tuple[Keyframe, ...]:
        return self._keys

    @classmethod
    def ease_in_out(
        cls,
        time_start: float = 0.0,
        value_start: float = 0.0,
        time_end: float = 1.0,
        value_end: float = 1.0,
    ) -> EasingCurve:
        return cls([Keyframe(time_start, value_start), Keyframe(time_end, value_end)])

    @classmethod
    def linear(
        cls,
        time_start: float = 0.0,
        value_start: float = 0.0,
        time_end: float = 1.0,
        value_end: float = 1.0,
    ) -> EasingCurve:
        if time_end == time_start:
            return cls([Keyframe(time_start, value_start)])
        slope = (value_end - value_start) / (time_end - time_start)
        return cls(
            [
                Keyframe(time_start, value_start, slope, slope),
                Keyframe(time_end, value_end, slope, slope),
            ]
        )

    def __call__(self, t: float) -> float:
        return self.evaluate(t)

    def evaluate(self, t: float) -> float:
        keys = self._keys
        if t <= keys[0].time:
            return keys[0].value
        if t >= keys[-1].time:
            return keys[-1].value
        for k0, k1 in zip(keys, keys[1:]):
            if t <= k1.time:
                return _hermite(k0, k1, t)
        return keys[-1].value


def _hermite(k0: Keyframe, k1: Keyframe, t: float) -> float:
    dt = k1.time - k0.time
    s = (t - k0.time) / dt
    s2 = s * s
    s3 = s2 * s
    h00 = 2.0 * s3 - 3.0 * s2 + 1.0
    h10 = s3 - 2.0 * s2 + s
    h01 = -2.0 * s3 + 3.0 * s2
    h11 = s3 - s2
    return h00 * k0.value + h10 * dt * k0.out_tangent + h01 * k1.value + h11 * dt * k1.in_tangent


NAMED_EASINGS: dict[str, Callable[[], Easing]] = {
    "linear": lambda: linear,
    "ease_in_out": EasingCurve.ease_in_out,
}


def resolve_easing(name: str) -> Easing:
    factory = NAMED_EASINGS.get(name.strip().lower())
    if factory is None:
        raise ValueError(f"unknown easing `{name}`; expected one of: {', '.join(sorted(NAMED_EASINGS))}")
    return factory()
