from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from tactile_core import FrameClock, FrameRateController, Graphic, PosePresetStore, SceneNode, SceneRuntime
from tactile_core.presets import summarize_preset
from tactile_ui.controls import Button, parse_press_event
from tactile_ui.press_feedback import (
    PressFeedback,
    PressFeedbackConfig,
    load_press_feedback_config,
)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="tactile")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo-press", help="Simulate one press on a headless button and print the scale trace.")
    demo.add_argument("--fps", type=int, default=60)
    demo.add_argument("--frames", type=int, default=24)
    demo.add_argument("--press-frame", type=int, default=2, help="Frame that delivers the press `down`.")
    demo.add_argument("--release-frame", type=int, default=8, help="Frame that delivers the press `up`.")
    demo.add_argument(
        "--time-scale",
        type=float,
        default=1.0,
        help="Simulation time scale; press feedback runs on unscaled time and ignores it.",
    )
    demo.add_argument("--config", type=Path, default=None, help="TOML file with a [press_feedback] table.")

    listing = sub.add_parser("preset-list", help="List saved pose presets.")
    listing.add_argument("--dir", type=Path, required=True)

    show = sub.add_parser("preset-show", help="Print a saved pose preset.")
    show.add_argument("name", nargs="?", default="default")
    show.add_argument("--dir", type=Path, required=True)
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "demo-press":
        config = load_press_feedback_config(args.config) if args.config is not None else PressFeedbackConfig()
        for row in run_press_demo(
            config,
            fps=args.fps,
            frames=args.frames,
            press_frame=args.press_frame,
            release_frame=args.release_frame,
            time_scale=args.time_scale,
        ):
            print(json.dumps(row, sort_keys=True))
        return

    if args.command == "preset-list":
        for name in PosePresetStore([], args.dir).list_presets():
            print(name)
        return

    if args.command == "preset-show":
        payload = PosePresetStore([], args.dir).read_preset(args.name)
        if payload is None:
            raise SystemExit(f"preset not found: {args.name}")
        print(json.dumps(summarize_preset(payload), indent=2, sort_keys=True))
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def build_demo_button(runtime: SceneRuntime, config: PressFeedbackConfig) -> tuple[Button, PressFeedback]:
    root = SceneNode("PressableButton", parent=runtime.root)
    SceneNode("Collider", parent=root, local_scale=(1.2, 1.2, 1.0))
    backplate = SceneNode("Backplate", parent=root)
    backplate.add_component(Graphic())
    label = SceneNode("Label", parent=backplate)
    label.add_component(Graphic())
    button = root.add_component(Button())
    feedback = root.add_component(PressFeedback(runtime.scheduler, runtime.clock, config))
    return button, feedback


def run_press_demo(
    config: PressFeedbackConfig,
    *,
    fps: int = 60,
    frames: int = 24,
    press_frame: int = 2,
    release_frame: int = 8,
    time_scale: float = 1.0,
) -> list[dict[str, object]]:
    if frames <= 0:
        raise ValueError("frames must be > 0")
    runtime = SceneRuntime(clock=FrameClock(time_scale=time_scale))
    rate = FrameRateController(target_fps=fps)
    button, feedback = build_demo_button(runtime, config)
    down = parse_press_event("press", {"phase": "down", "key": "mouse_left", "active_keys": ["mouse_left"]})
    up = parse_press_event("press", {"phase": "up", "key": "mouse_left", "active_keys": []})
    assert down is not None and up is not None
    target_name = feedback.target.name if feedback.target is not None else None
    trace: list[dict[str, object]] = []
    for index in range(frames):
        clicked = False
        if index == press_frame:
            button.handle_press(down, inside=True)
        elif index == release_frame:
            clicked = button.handle_press(up, inside=True)
        runtime.step(rate.target_dt)
        scale = feedback.target.local_scale if feedback.target is not None else None
        trace.append(
            {
                "frame": index,
                "target": target_name,
                "clicked": clicked,
                "animating": feedback.is_animating,
                "scale": None if scale is None else [round(float(v), 5) for v in scale],
            }
        )
    return trace


if __name__ == "__main__":
    main()
