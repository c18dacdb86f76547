from __future__ import annotations

import json
import math
from pathlib import Path
import tempfile
import unittest

import numpy as np

from tactile_core.math3d import quat_from_axis_angle
from tactile_core.presets import PosePresetStore, PresetPayload, summarize_preset
from tactile_core.scene import SceneNode


def _scene() -> tuple[SceneNode, SceneNode, SceneNode]:
    root = SceneNode("Room", position=(0.0, 1.0, 0.0), rotation=quat_from_axis_angle((0, 1, 0), math.pi / 4))
    mannequin = SceneNode("Mannequin", parent=root, position=(1.0, 0.0, 2.0))
    pad = SceneNode("Pad", parent=root, position=(-1.0, 0.0, 0.5), local_scale=(0.5, 0.5, 0.5))
    return root, mannequin, pad


class PosePresetStoreTests(unittest.TestCase):
    def test_save_then_load_restores_world_pose(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _, mannequin, pad = _scene()
            store = PosePresetStore([mannequin, pad], Path(tmp) / "Presets")
            saved_pos = mannequin.world_position
            saved_rot = mannequin.world_rotation
            path = store.save_preset("session")
            self.assertEqual(path.name, "session.json")

            mannequin.world_position = (9.0, 9.0, 9.0)
            mannequin.rotation = quat_from_axis_angle((1, 0, 0), 1.0)
            pad.local_scale = 2.0

            self.assertTrue(store.load_preset("session"))
            np.testing.assert_allclose(mannequin.world_position, saved_pos, atol=1e-9)
            np.testing.assert_allclose(mannequin.world_rotation, saved_rot, atol=1e-9)
            np.testing.assert_allclose(pad.local_scale, [0.5, 0.5, 0.5])
            self.assertEqual(store.list_presets(), ["session"])

    def test_file_layout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _, mannequin, _ = _scene()
            store = PosePresetStore([mannequin, None], tmp)
            raw = json.loads(store.save_preset().read_text(encoding="utf-8"))
            self.assertEqual(raw["name"], "default")
            self.assertEqual([o["name"] for o in raw["objects"]], ["Mannequin"])
            self.assertEqual(sorted(raw["objects"][0]["world"]), ["pos", "rot", "scale"])
            self.assertEqual(len(raw["objects"][0]["world"]["rot"]), 4)

    def test_missing_preset_warns_and_returns_false(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = PosePresetStore([], tmp)
            with self.assertLogs("tactile_core.presets", level="WARNING"):
                self.assertFalse(store.load_preset("nope"))
            self.assertIsNone(store.read_preset("nope"))

    def test_load_skips_unknown_names_and_missing_world(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _, mannequin, pad = _scene()
            before = mannequin.world_position
            payload = {
                "name": "partial",
                "objects": [
                    {"name": "Ghost", "world": {"pos": [0, 0, 0], "rot": [0, 0, 0, 1], "scale": [1, 1, 1]}},
                    {"name": "Mannequin", "world": None},
                    {"name": "Pad", "world": {"pos": [3, 0, 0], "rot": [0, 0, 0, 1], "scale": [1, 2, 3]}},
                ],
            }
            Path(tmp, "partial.json").write_text(json.dumps(payload), encoding="utf-8")
            store = PosePresetStore([mannequin, pad], tmp)
            with self.assertLogs("tactile_core.presets", level="WARNING") as logs:
                self.assertTrue(store.load_preset("partial"))
            self.assertTrue(any("no world pose" in line for line in logs.output))
            np.testing.assert_allclose(mannequin.world_position, before)
            np.testing.assert_allclose(pad.world_position, [3.0, 0.0, 0.0], atol=1e-9)
            np.testing.assert_allclose(pad.local_scale, [1.0, 2.0, 3.0])

    def test_reset_restores_captured_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _, mannequin, pad = _scene()
            store = PosePresetStore([mannequin, pad], tmp)
            self.assertEqual(store.capture_scene_defaults(), 2)
            original = mannequin.world_position
            mannequin.world_position = (4.0, 4.0, 4.0)
            pad.local_scale = 3.0
            pad.destroy()
            self.assertEqual(store.reset_to_scene_defaults(), 1)
            np.testing.assert_allclose(mannequin.world_position, original, atol=1e-9)

    def test_button_wrappers_use_default_preset(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            _, mannequin, _ = _scene()
            store = PosePresetStore([mannequin], tmp)
            store.capture_scene_defaults()
            store.save_button()
            mannequin.world_position = (0.0, 0.0, 0.0)
            store.load_button()
            self.assertFalse(np.allclose(mannequin.world_position, [0.0, 0.0, 0.0]))
            mannequin.world_position = (0.0, 0.0, 0.0)
            store.reset_button()
            self.assertFalse(np.allclose(mannequin.world_position, [0.0, 0.0, 0.0]))
            self.assertEqual(store.list_presets(), ["default"])

    def test_rejects_path_like_names(self) -> None:
        store = PosePresetStore([], "presets")
        with self.assertRaises(ValueError):
            store.preset_path("../escape")
        with self.assertRaises(ValueError):
            store.preset_path("")

    def test_malformed_payload_raises_value_error(self) -> None:
        with self.assertRaises(ValueError):
            PresetPayload.from_json('{"objects": [{"name": "A", "world": {"pos": [0, 0, 0]}}]}')
        with self.assertRaises(ValueError):
            PresetPayload.from_json("[]")

    def test_summarize_preset(self) -> None:
        payload = PresetPayload.from_json(
            '{"name": "s", "objects": [{"name": "A", "world": null},'
            ' {"name": "B", "world": {"pos": [1, 2, 3], "rot": [0, 0, 0, 2], "scale": [1, 1, 1]}}]}'
        )
        summary = summarize_preset(payload)
        self.assertEqual(summary["count"], 2)
        self.assertEqual(summary["objects"][1]["rot"], [0.0, 0.0, 0.0, 1.0])


if __name__ == "__main__":
    unittest.main()
