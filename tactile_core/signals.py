from __future__ import annotations

from typing import Callable, Generic, TypeVar


T = TypeVar("T")


class Signal:
    """Event channel whose listeners take no arguments.

    Listeners run synchronously in subscription order. Adding the same listener
    twice subscribes it twice; `remove_listener` drops one subscription.
    """

    listener_arity = 0

    def __init__(self) -> None:
        self._listeners: list[Callable[[], object]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: Callable[[], object]) -> None:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], object]) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    def invoke(self) -> None:
        # Snapshot so listeners may unsubscribe themselves mid-dispatch.
        for listener in list(self._listeners):
            listener()


class PayloadSignal(Generic[T]):
    """Event channel whose listeners take exactly one payload argument."""

    listener_arity = 1

    def __init__(self) -> None:
        self._listeners: list[Callable[[T], object]] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: Callable[[T], object]) -> None:
        if not callable(listener):
            raise TypeError("listener must be callable")
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[T], object]) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    def invoke(self, payload: T) -> None:
        for listener in list(self._listeners):
            listener(payload)
