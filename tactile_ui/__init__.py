"""First-party UI components for Tactile scenes."""

from .controls.button import Button, ButtonModel, ButtonState
from .controls.interaction import PressEvent, PressPhase, parse_press_event
from .press_feedback import (
    EasingCurve,
    PressFeedback,
    PressFeedbackConfig,
    load_press_feedback_config,
    resolve_visual_target,
)

__all__ = [
    "Button",
    "ButtonModel",
    "ButtonState",
    "EasingCurve",
    "PressEvent",
    "PressFeedback",
    "PressFeedbackConfig",
    "PressPhase",
    "load_press_feedback_config",
    "parse_press_event",
    "resolve_visual_target",
]
