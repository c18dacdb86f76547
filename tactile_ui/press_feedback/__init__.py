"""Adaptive press feedback: scale pulses driven by whichever press sources exist."""

from .animation import AnimationRun, ScaleAnimator
from .binder import (
    ACTION_PRESS_DOWN,
    ACTION_PULSE,
    ACTION_RELEASE_UP,
    CLICKED_CHANNEL_NAMES,
    DEFAULT_CHANNEL_ROUTES,
    SELECT_ENTERED_CHANNEL_NAMES,
    SELECT_EXITED_CHANNEL_NAMES,
    Binding,
    CapabilityAdapterBinder,
    ChannelRoute,
    ErasedPayloadHandler,
    bind_channel,
    bind_first_channel,
    channel_listener_arity,
)
from .config import (
    DEFAULT_INTERACTABLE_TYPES,
    DEFAULT_VISUAL_TARGET_NAMES,
    PRESSED_SCALE_RANGE,
    STEP_DURATION_RANGE,
    PressFeedbackConfig,
    load_press_feedback_config,
    press_feedback_config_from_mapping,
)
from .controller import PressFeedback
from .easing import Easing, EasingCurve, Keyframe, linear, resolve_easing
from .target_resolver import find_descendant_by_names, find_first_graphic, resolve_visual_target

__all__ = [
    "ACTION_PRESS_DOWN",
    "ACTION_PULSE",
    "ACTION_RELEASE_UP",
    "AnimationRun",
    "Binding",
    "CLICKED_CHANNEL_NAMES",
    "CapabilityAdapterBinder",
    "ChannelRoute",
    "DEFAULT_CHANNEL_ROUTES",
    "DEFAULT_INTERACTABLE_TYPES",
    "DEFAULT_VISUAL_TARGET_NAMES",
    "Easing",
    "EasingCurve",
    "ErasedPayloadHandler",
    "Keyframe",
    "PRESSED_SCALE_RANGE",
    "PressFeedback",
    "PressFeedbackConfig",
    "SELECT_ENTERED_CHANNEL_NAMES",
    "SELECT_EXITED_CHANNEL_NAMES",
    "STEP_DURATION_RANGE",
    "ScaleAnimator",
    "bind_channel",
    "bind_first_channel",
    "channel_listener_arity",
    "find_descendant_by_names",
    "find_first_graphic",
    "linear",
    "load_press_feedback_config",
    "press_feedback_config_from_mapping",
    "resolve_easing",
    "resolve_visual_target",
]
