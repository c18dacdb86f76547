from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tactile_core.scene import Component
from tactile_core.signals import Signal

from .interaction import PressEvent


ButtonState = Literal["idle", "hover", "press_down", "press_hold", "disabled"]
_PRESSED_STATES = ("press_down", "press_hold")


@dataclass
class ButtonModel:
    """Button state machine driven by hover and press signals."""

    disabled: bool = False
    hovered: bool = False
    state: ButtonState = "idle"

    def __post_init__(self) -> None:
        self._sync_state()

    @property
    def pressed(self) -> bool:
        return self.state in _PRESSED_STATES

    def set_disabled(self, disabled: bool) -> ButtonState:
        self.disabled = disabled
        self._sync_state()
        return self.state

    def set_hovered(self, hovered: bool) -> ButtonState:
        self.hovered = hovered
        if not self.disabled and not hovered and self.pressed:
            self.state = "idle"
            return self.state
        if not self.pressed:
            self._sync_state()
        return self.state

    def on_press(self, press: PressEvent) -> ButtonState:
        if self.disabled:
            self.state = "disabled"
            return self.state
        if press.begins_press:
            if self.hovered:
                self.state = "press_down"
            return self.state
        if press.phase in ("hold_start", "hold_tick"):
            if self.pressed:
                self.state = "press_hold"
            return self.state
        if press.ends_press:
            self._sync_state()
        return self.state

    def _sync_state(self) -> None:
        if self.disabled:
            self.state = "disabled"
        elif self.hovered:
            self.state = "hover"
        else:
            self.state = "idle"


class Button(Component):
    """Conventional pressable control.

    `on_click` fires when an `up` press ends a press that started inside the
    button and the pointer is still inside. `cancel` and drag-outs end the press
    without a click.
    """

    def __init__(self, *, interactable: bool = True) -> None:
        super().__init__()
        self.on_click = Signal()
        self.model = ButtonModel(disabled=not interactable)

    @property
    def interactable(self) -> bool:
        return not self.model.disabled

    @interactable.setter
    def interactable(self, value: bool) -> None:
        self.model.set_disabled(not value)

    @property
    def state(self) -> ButtonState:
        return self.model.state

    def handle_press(self, press: PressEvent, *, inside: bool | None = None) -> bool:
        """Feed one press event; returns True when it produced a click."""

        if inside is not None:
            self.model.set_hovered(inside)
        was_pressed = self.model.pressed
        self.model.on_press(press)
        if was_pressed and press.phase == "up" and self.model.hovered:
            return self.click()
        return False

    def click(self) -> bool:
        if self.model.disabled:
            return False
        self.on_click.invoke()
        return True
