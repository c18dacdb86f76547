from __future__ import annotations

import logging

from tactile_core.math3d import Vector3, vec3
from tactile_core.scene import Behaviour, SceneNode
from tactile_core.scheduler import CoroutineScheduler
from tactile_core.timing import FrameClock

from .animation import ScaleAnimator
from .binder import (
    ACTION_PRESS_DOWN,
    ACTION_PULSE,
    ACTION_RELEASE_UP,
    Binding,
    CapabilityAdapterBinder,
)
from .config import PressFeedbackConfig
from .target_resolver import resolve_visual_target


LOGGER = logging.getLogger(__name__)


class PressFeedback(Behaviour):
    """Scale-pulse feedback for whatever press sources the node carries.

    On enable the scaled target is resolved (first time only), its resting scale
    captured, and every available press source bound. On disable every binding is
    released, any in-flight animation cancelled and the target snapped back to its
    resting scale. `press_down`, `release_up` and `pulse` can also be called
    directly while enabled; with no target they do nothing.
    """

    def __init__(
        self,
        scheduler: CoroutineScheduler,
        clock: FrameClock,
        config: PressFeedbackConfig | None = None,
        *,
        binder: CapabilityAdapterBinder | None = None,
        enabled: bool = True,
    ) -> None:
        self.config = config if config is not None else PressFeedbackConfig()
        self.binder = binder if binder is not None else CapabilityAdapterBinder(
            interactable_types=self.config.interactable_types
        )
        self._animator = ScaleAnimator(None, scheduler, clock, easing=self.config.easing)
        self._resolved = False
        self._resting_scale: Vector3 = vec3(1.0)
        self._bindings: list[Binding] = []
        super().__init__(enabled=enabled)

    @property
    def target(self) -> SceneNode | None:
        return self._animator.target

    @property
    def resting_scale(self) -> Vector3:
        return self._resting_scale.copy()

    @property
    def pressed_scale(self) -> Vector3:
        return self._resting_scale * self.config.pressed_scale

    @property
    def bindings(self) -> tuple[Binding, ...]:
        return tuple(self._bindings)

    @property
    def is_animating(self) -> bool:
        return self._animator.is_running

    def on_enable(self) -> None:
        node = self.node
        if node is None:
            return
        if not self._resolved:
            self._resolve_target(node)
        if self._bindings:
            return
        self._bindings = self.binder.bind(
            node,
            {
                ACTION_PULSE: self.pulse,
                ACTION_PRESS_DOWN: self.press_down,
                ACTION_RELEASE_UP: self.release_up,
            },
        )
        LOGGER.debug("PressFeedback on `%s`: %d binding(s)", node.name, len(self._bindings))

    def on_disable(self) -> None:
        bindings, self._bindings = self._bindings, []
        for binding in bindings:
            try:
                binding.release()
            except Exception as exc:  # noqa: BLE001
                LOGGER.warning("failed to release %r: %s", binding, exc)
        self._animator.snap_to(self._resting_scale)

    def press_down(self) -> None:
        if not self.is_live:
            return
        self._animator.animate_to(self.pressed_scale, self.config.step_duration)

    def release_up(self) -> None:
        if not self.is_live:
            return
        self._animator.animate_to(self._resting_scale, self.config.step_duration)

    def pulse(self) -> None:
        if not self.is_live:
            return
        step = self.config.step_duration
        self._animator.play_sequence([(self.pressed_scale, step), (self.resting_scale, step)])

    def _resolve_target(self, node: SceneNode) -> None:
        target = self.config.target
        if target is None:
            if self.config.auto_pick_target:
                target = resolve_visual_target(node, self.config.visual_target_names)
            else:
                target = node
        self._animator.target = target
        if target is not None and not target.destroyed:
            self._resting_scale = target.local_scale.copy()
        self._resolved = True
        LOGGER.debug("PressFeedback on `%s` scales `%s`", node.name, getattr(target, "name", None))
