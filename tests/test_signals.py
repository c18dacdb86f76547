from __future__ import annotations

import unittest

from tactile_core.signals import PayloadSignal, Signal


class SignalTests(unittest.TestCase):
    def test_listeners_run_in_subscription_order(self) -> None:
        signal = Signal()
        log: list[str] = []
        signal.add_listener(lambda: log.append("a"))
        signal.add_listener(lambda: log.append("b"))
        signal.invoke()
        self.assertEqual(log, ["a", "b"])
        self.assertEqual(signal.listener_arity, 0)

    def test_remove_listener_drops_one_subscription(self) -> None:
        signal = Signal()
        log: list[str] = []

        def listener() -> None:
            log.append("x")

        signal.add_listener(listener)
        signal.add_listener(listener)
        self.assertTrue(signal.remove_listener(listener))
        signal.invoke()
        self.assertEqual(log, ["x"])
        self.assertTrue(signal.remove_listener(listener))
        self.assertFalse(signal.remove_listener(listener))
        self.assertEqual(len(signal), 0)

    def test_bound_methods_unsubscribe_by_equality(self) -> None:
        class Owner:
            def __init__(self) -> None:
                self.hits = 0

            def hit(self) -> None:
                self.hits += 1

        owner = Owner()
        signal = Signal()
        signal.add_listener(owner.hit)
        self.assertTrue(signal.remove_listener(owner.hit))
        signal.invoke()
        self.assertEqual(owner.hits, 0)

    def test_listener_may_unsubscribe_during_dispatch(self) -> None:
        signal = Signal()
        log: list[str] = []

        def once() -> None:
            log.append("once")
            signal.remove_listener(once)

        signal.add_listener(once)
        signal.add_listener(lambda: log.append("always"))
        signal.invoke()
        signal.invoke()
        self.assertEqual(log, ["once", "always", "always"])

    def test_rejects_non_callable(self) -> None:
        with self.assertRaises(TypeError):
            Signal().add_listener("nope")  # type: ignore[arg-type]


class PayloadSignalTests(unittest.TestCase):
    def test_payload_reaches_listeners(self) -> None:
        signal: PayloadSignal[dict[str, int]] = PayloadSignal()
        seen: list[dict[str, int]] = []
        signal.add_listener(seen.append)
        signal.invoke({"pointer": 1})
        self.assertEqual(seen, [{"pointer": 1}])
        self.assertEqual(signal.listener_arity, 1)
        signal.remove_all_listeners()
        self.assertEqual(len(signal), 0)


if __name__ == "__main__":
    unittest.main()
