from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PressPhase = Literal[
    "down",
    "repeat",
    "hold_start",
    "hold_tick",
    "up",
    "hold_end",
    "single",
    "double",
    "cancel",
]

_PRESS_PHASES = frozenset(
    {"down", "repeat", "hold_start", "hold_tick", "up", "hold_end", "single", "double", "cancel"}
)


@dataclass(frozen=True)
class PressEvent:
    """Minimal normalized press event consumed by controls."""

    phase: PressPhase
    key: str
    active_keys: tuple[str, ...]

    @property
    def begins_press(self) -> bool:
        return self.phase == "down"

    @property
    def ends_press(self) -> bool:
        return self.phase in ("up", "cancel")


def parse_press_event(event_type: str, payload: object) -> PressEvent | None:
    """Parse a normalized `press` event into a typed control event.

    Anything that is not a `press` event with a known phase yields `None`; controls
    only care whether a press/release-like transition happened.
    """

    if event_type != "press" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PRESS_PHASES:
        return None
    key = str(payload.get("key", ""))
    raw_active_keys = payload.get("active_keys", ())
    if not isinstance(raw_active_keys, (list, tuple)):
        raw_active_keys = ()
    active_keys = tuple(str(k) for k in raw_active_keys)
    return PressEvent(phase=phase, key=key, active_keys=active_keys)
