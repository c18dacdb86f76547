from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from main import main, run_press_demo
from tactile_core.presets import PosePresetStore
from tactile_core.scene import SceneNode
from tactile_ui.press_feedback.config import PressFeedbackConfig


def _run(argv: list[str]) -> str:
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        main(argv)
    return out.getvalue()


class RunPressDemoTests(unittest.TestCase):
    def test_release_pulses_backplate_and_returns_to_rest(self) -> None:
        trace = run_press_demo(PressFeedbackConfig(), fps=60, frames=24, press_frame=2, release_frame=8)
        self.assertEqual(len(trace), 24)
        self.assertTrue(all(row["target"] == "Backplate" for row in trace))
        self.assertEqual([row["frame"] for row in trace if row["clicked"]], [8])
        for row in trace[:8]:
            self.assertEqual(row["scale"], [1.0, 1.0, 1.0])
            self.assertFalse(row["animating"])
        self.assertLess(trace[8]["scale"][0], 1.0)
        self.assertIn([0.94, 0.94, 0.94], [row["scale"] for row in trace])
        self.assertEqual(trace[-1]["scale"], [1.0, 1.0, 1.0])
        self.assertFalse(trace[-1]["animating"])

    def test_time_scale_does_not_change_trace(self) -> None:
        normal = run_press_demo(PressFeedbackConfig(), frames=20)
        frozen = run_press_demo(PressFeedbackConfig(), frames=20, time_scale=0.0)
        self.assertEqual(normal, frozen)

    def test_rejects_empty_run(self) -> None:
        with self.assertRaises(ValueError):
            run_press_demo(PressFeedbackConfig(), frames=0)


class MainCommandTests(unittest.TestCase):
    def test_demo_press_prints_json_lines(self) -> None:
        lines = _run(["demo-press", "--frames", "12"]).splitlines()
        self.assertEqual(len(lines), 12)
        rows = [json.loads(line) for line in lines]
        self.assertEqual(rows[0]["frame"], 0)
        self.assertTrue(rows[8]["clicked"])

    def test_demo_press_reads_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tactile.toml"
            path.write_text("[press_feedback]\npressed_scale = 0.8\nstep_duration = 0.01\n", encoding="utf-8")
            lines = _run(["demo-press", "--frames", "10", "--config", str(path)]).splitlines()
        scales = [json.loads(line)["scale"][0] for line in lines]
        self.assertIn(0.8, scales)
        self.assertEqual(scales[-1], 1.0)

    def test_preset_list_and_show(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            preset_dir = Path(tmp) / "Presets"
            node = SceneNode("Mannequin", position=(1.0, 2.0, 3.0))
            store = PosePresetStore([node], preset_dir)
            store.save_preset("alpha")
            store.save_preset("beta")

            self.assertEqual(_run(["preset-list", "--dir", str(preset_dir)]).split(), ["alpha", "beta"])
            shown = json.loads(_run(["preset-show", "beta", "--dir", str(preset_dir)]))
            self.assertEqual(shown["name"], "beta")
            self.assertEqual(shown["count"], 1)
            self.assertEqual(shown["objects"][0]["pos"], [1.0, 2.0, 3.0])

            with self.assertRaises(SystemExit):
                _run(["preset-show", "missing", "--dir", str(preset_dir)])

    def test_preset_list_on_missing_directory_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(_run(["preset-list", "--dir", str(Path(tmp) / "none")]), "")


if __name__ == "__main__":
    unittest.main()
