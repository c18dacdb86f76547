from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
from typing import Any, Iterable

import numpy as np

from .math3d import Quaternion, Vector3, quat, vec3
from .scene import SceneNode


LOGGER = logging.getLogger(__name__)
DEFAULT_PRESET_NAME = "default"


@dataclass(frozen=True)
class PoseData:
    """World-space position and rotation plus local scale of one node."""

    pos: Vector3
    rot: Quaternion
    scale: Vector3

    @classmethod
    def capture(cls, node: SceneNode) -> PoseData:
        return cls(pos=node.world_position, rot=node.world_rotation, scale=node.local_scale.copy())

    def apply(self, node: SceneNode) -> None:
        node.world_position = self.pos
        node.world_rotation = self.rot
        node.local_scale = self.scale

    def to_dict(self) -> dict[str, list[float]]:
        return {
            "pos": [float(v) for v in self.pos],
            "rot": [float(v) for v in self.rot],
            "scale": [float(v) for v in self.scale],
        }

    @classmethod
    def from_dict(cls, raw: object) -> PoseData:
        if not isinstance(raw, dict):
            raise ValueError("pose must be an object")
        try:
            return cls(pos=vec3(raw["pos"]), rot=quat(raw["rot"]), scale=vec3(raw["scale"]))
        except KeyError as exc:
            raise ValueError(f"pose missing required field: {exc.args[0]}") from exc
        except TypeError as exc:
            raise ValueError(f"pose field has wrong type: {exc}") from exc


@dataclass(frozen=True)
class ObjectPose:
    name: str
    world: PoseData | None


@dataclass
class PresetPayload:
    name: str = DEFAULT_PRESET_NAME
    objects: list[ObjectPose] = field(default_factory=list)

    def to_json(self) -> str:
        body = {
            "name": self.name,
            "objects": [
                {"name": op.name, "world": None if op.world is None else op.world.to_dict()}
                for op in self.objects
            ],
        }
        return json.dumps(body, indent=2)

    @classmethod
    def from_json(cls, text: str) -> PresetPayload:
        raw = json.loads(text)
        if not isinstance(raw, dict):
            raise ValueError("preset payload must be a JSON object")
        raw_objects = raw.get("objects", [])
        if not isinstance(raw_objects, list):
            raise ValueError("preset `objects` must be a list")
        objects: list[ObjectPose] = []
        for entry in raw_objects:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                raise ValueError("preset object entries need a string `name`")
            world = entry.get("world")
            objects.append(
                ObjectPose(name=entry["name"], world=None if world is None else PoseData.from_dict(world))
            )
        return cls(name=str(raw.get("name", DEFAULT_PRESET_NAME)), objects=objects)


class PosePresetStore:
    """Saves, loads and resets the world pose of a fixed list of named nodes.

    Presets live in `<preset_dir>/<name>.json`. Loading matches nodes by name;
    entries for unknown names are ignored. Reset restores the poses recorded by
    `capture_scene_defaults`.
    """

    def __init__(self, targets: Iterable[SceneNode | None], preset_dir: str | Path) -> None:
        self.targets: list[SceneNode | None] = list(targets)
        self.preset_dir = Path(preset_dir)
        self._scene_defaults: dict[int, tuple[SceneNode, PoseData]] = {}

    def preset_path(self, name: str = DEFAULT_PRESET_NAME) -> Path:
        if not name or "/" in name or "\\" in name:
            raise ValueError(f"invalid preset name: {name!r}")
        return self.preset_dir / f"{name}.json"

    def list_presets(self) -> list[str]:
        if not self.preset_dir.is_dir():
            return []
        return sorted(p.stem for p in self.preset_dir.glob("*.json"))

    def capture_scene_defaults(self) -> int:
        self._scene_defaults.clear()
        for node in self._live_targets():
            self._scene_defaults[id(node)] = (node, PoseData.capture(node))
        return len(self._scene_defaults)

    def save_preset(self, name: str = DEFAULT_PRESET_NAME) -> Path:
        payload = PresetPayload(
            name=name,
            objects=[ObjectPose(name=node.name, world=PoseData.capture(node)) for node in self._live_targets()],
        )
        path = self.preset_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload.to_json(), encoding="utf-8")
        LOGGER.info("Preset saved: %s", path)
        return path

    def read_preset(self, name: str = DEFAULT_PRESET_NAME) -> PresetPayload | None:
        path = self.preset_path(name)
        if not path.exists():
            return None
        return PresetPayload.from_json(path.read_text(encoding="utf-8"))

    def load_preset(self, name: str = DEFAULT_PRESET_NAME) -> bool:
        path = self.preset_path(name)
        payload = self.read_preset(name)
        if payload is None:
            LOGGER.warning("Preset not found: %s", path)
            return False
        by_name: dict[str, SceneNode] = {}
        for node in self._live_targets():
            by_name.setdefault(node.name, node)
        for op in payload.objects:
            node = by_name.get(op.name)
            if node is None:
                continue
            if op.world is None:
                LOGGER.warning("Preset object '%s' has no world pose. Please re-save the preset.", op.name)
                continue
            op.world.apply(node)
        LOGGER.info("Preset loaded: %s", path)
        return True

    def reset_to_scene_defaults(self) -> int:
        restored = 0
        for node, pose in self._scene_defaults.values():
            if node.destroyed:
                continue
            pose.apply(node)
            restored += 1
        LOGGER.info("Preset reset to scene defaults.")
        return restored

    def save_button(self) -> None:
        self.save_preset(DEFAULT_PRESET_NAME)

    def load_button(self) -> None:
        self.load_preset(DEFAULT_PRESET_NAME)

    def reset_button(self) -> None:
        self.reset_to_scene_defaults()

    def _live_targets(self) -> list[SceneNode]:
        return [node for node in self.targets if node is not None and not node.destroyed]


def summarize_preset(payload: PresetPayload) -> dict[str, Any]:
    """Flatten a payload for CLI display."""

    rows = []
    for op in payload.objects:
        if op.world is None:
            rows.append({"name": op.name, "world": None})
            continue
        rows.append(
            {
                "name": op.name,
                "pos": np.round(op.world.pos, 4).tolist(),
                "rot": np.round(op.world.rot, 4).tolist(),
                "scale": np.round(op.world.scale, 4).tolist(),
            }
        )
    return {"name": payload.name, "count": len(payload.objects), "objects": rows}
