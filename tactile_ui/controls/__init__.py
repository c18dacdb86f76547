"""Pressable controls and the press-event contract they consume."""

from .button import Button, ButtonModel, ButtonState
from .interaction import PressEvent, PressPhase, parse_press_event

__all__ = [
    "Button",
    "ButtonModel",
    "ButtonState",
    "PressEvent",
    "PressPhase",
    "parse_press_event",
]
