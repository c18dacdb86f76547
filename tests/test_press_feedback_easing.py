from __future__ import annotations

import unittest

from tactile_ui.press_feedback.easing import EasingCurve, Keyframe, linear, resolve_easing


class EasingCurveTests(unittest.TestCase):
    def test_ease_in_out_is_smoothstep(self) -> None:
        curve = EasingCurve.ease_in_out()
        for t in (0.0, 0.1, 0.25, 0.5, 0.8, 1.0):
            self.assertAlmostEqual(curve(t), 3 * t * t - 2 * t * t * t, places=12)

    def test_linear_curve_matches_identity(self) -> None:
        curve = EasingCurve.linear()
        for t in (0.0, 0.3, 0.5, 0.9, 1.0):
            self.assertAlmostEqual(curve(t), t, places=12)
        self.assertEqual(linear(0.37), 0.37)

    def test_holds_end_values_outside_key_range(self) -> None:
        curve = EasingCurve.ease_in_out(0.0, 2.0, 1.0, 5.0)
        self.assertEqual(curve(-1.0), 2.0)
        self.assertEqual(curve(3.0), 5.0)

    def test_multi_key_curve_passes_through_keys(self) -> None:
        curve = EasingCurve([Keyframe(1.0, 1.0), Keyframe(0.0, 0.0), Keyframe(0.5, 1.2, 0.0, 0.0)])
        self.assertEqual([k.time for k in curve.keys], [0.0, 0.5, 1.0])
        self.assertAlmostEqual(curve(0.5), 1.2)
        self.assertGreater(curve(0.75), 1.0)

    def test_single_key_is_constant(self) -> None:
        curve = EasingCurve([Keyframe(0.0, 0.4)])
        self.assertEqual(curve(0.0), 0.4)
        self.assertEqual(curve(0.7), 0.4)

    def test_rejects_empty_and_duplicate_keys(self) -> None:
        with self.assertRaises(ValueError):
            EasingCurve([])
        with self.assertRaises(ValueError):
            EasingCurve([Keyframe(0.5, 0.0), Keyframe(0.5, 1.0)])

    def test_resolve_easing_by_name(self) -> None:
        self.assertIs(resolve_easing("linear"), linear)
        self.assertIsInstance(resolve_easing(" Ease_In_Out "), EasingCurve)
        with self.assertRaises(ValueError):
            resolve_easing("bounce")


if __name__ == "__main__":
    unittest.main()
