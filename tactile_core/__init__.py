from .capabilities import find_loaded_type, try_get_capability
from .math3d import (
    IDENTITY_QUATERNION,
    Quaternion,
    Vector3,
    lerp_unclamped,
    quat,
    quat_from_axis_angle,
    vec3,
)
from .presets import DEFAULT_PRESET_NAME, ObjectPose, PoseData, PosePresetStore, PresetPayload
from .runtime import SceneRuntime
from .scene import Behaviour, Component, Graphic, SceneNode
from .scheduler import CoroutineScheduler, Routine, TaskHandle
from .signals import PayloadSignal, Signal
from .timing import FrameClock, FrameRateController

__all__ = [
    "Behaviour",
    "Component",
    "CoroutineScheduler",
    "DEFAULT_PRESET_NAME",
    "FrameClock",
    "FrameRateController",
    "Graphic",
    "IDENTITY_QUATERNION",
    "ObjectPose",
    "PayloadSignal",
    "PoseData",
    "PosePresetStore",
    "PresetPayload",
    "Quaternion",
    "Routine",
    "SceneNode",
    "SceneRuntime",
    "Signal",
    "TaskHandle",
    "Vector3",
    "find_loaded_type",
    "lerp_unclamped",
    "quat",
    "quat_from_axis_angle",
    "try_get_capability",
    "vec3",
]
