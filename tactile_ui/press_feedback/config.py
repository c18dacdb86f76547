from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any

from tactile_core.scene import SceneNode

from .easing import Easing, linear, resolve_easing


PRESSED_SCALE_RANGE = (0.6, 1.0)
STEP_DURATION_RANGE = (0.01, 0.25)

DEFAULT_VISUAL_TARGET_NAMES: tuple[str, ...] = (
    "Frontplate",
    "FrontPlate",
    "Front",
    "Backplate",
    "BackPlate",
    "AnimatedContent",
    "Icon",
    "RawImage",
    "Backglow",
    "Label",
    "Text",
)

DEFAULT_INTERACTABLE_TYPES: tuple[str, ...] = ("mixedreality.toolkit.ux.StatefulInteractable",)


@dataclass
class PressFeedbackConfig:
    """Tunables for `PressFeedback`.

    `pressed_scale` and `step_duration` are clamped into their visually sane ranges
    rather than rejected, so a bad value never disables the feedback outright.
    """

    target: SceneNode | None = None
    auto_pick_target: bool = True
    pressed_scale: float = 0.94
    step_duration: float = 0.06
    easing: Easing = field(default=linear)
    visual_target_names: tuple[str, ...] = DEFAULT_VISUAL_TARGET_NAMES
    interactable_types: tuple[str, ...] = DEFAULT_INTERACTABLE_TYPES

    def __post_init__(self) -> None:
        self.pressed_scale = _clamp_number(self.pressed_scale, PRESSED_SCALE_RANGE, "pressed_scale")
        self.step_duration = _clamp_number(self.step_duration, STEP_DURATION_RANGE, "step_duration")
        if self.easing is None:
            self.easing = linear
        elif not callable(self.easing):
            raise ValueError("easing must be callable")
        self.visual_target_names = tuple(_coerce_string_list(self.visual_target_names, "visual_target_names"))
        self.interactable_types = tuple(_coerce_string_list(self.interactable_types, "interactable_types"))


def load_press_feedback_config(path: str | Path) -> PressFeedbackConfig:
    """Read the `[press_feedback]` table of a TOML file; absent keys keep defaults."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"press feedback config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    return press_feedback_config_from_mapping(raw.get("press_feedback", {}))


def press_feedback_config_from_mapping(table: object) -> PressFeedbackConfig:
    if not isinstance(table, dict):
        raise ValueError("press_feedback must be a table")
    kwargs: dict[str, Any] = {}
    if "pressed_scale" in table:
        kwargs["pressed_scale"] = _coerce_number(table["pressed_scale"], "pressed_scale")
    if "step_duration" in table:
        kwargs["step_duration"] = _coerce_number(table["step_duration"], "step_duration")
    if "auto_pick_target" in table:
        value = table["auto_pick_target"]
        if not isinstance(value, bool):
            raise ValueError("auto_pick_target must be a boolean")
        kwargs["auto_pick_target"] = value
    if "easing" in table:
        value = table["easing"]
        if not isinstance(value, str):
            raise ValueError("easing must be a string")
        kwargs["easing"] = resolve_easing(value)
    if "visual_target_names" in table:
        kwargs["visual_target_names"] = _coerce_string_list(table["visual_target_names"], "visual_target_names")
    if "interactable_types" in table:
        kwargs["interactable_types"] = _coerce_string_list(table["interactable_types"], "interactable_types")
    return PressFeedbackConfig(**kwargs)


def _coerce_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _clamp_number(value: object, bounds: tuple[float, float], field_name: str) -> float:
    number = _coerce_number(value, field_name)
    if number != number:
        raise ValueError(f"{field_name} must not be NaN")
    lo, hi = bounds
    return min(hi, max(lo, number))


def _coerce_string_list(value: object, field_name: str) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{field_name} must be a list of strings")
    out: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"{field_name} entries must be strings")
        out.append(item)
    return out
