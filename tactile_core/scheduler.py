from __future__ import annotations

import logging
from typing import Generator, TypeAlias


LOGGER = logging.getLogger(__name__)

Routine: TypeAlias = Generator[None, None, None]


class TaskHandle:
    """Handle for one cooperative routine started on a `CoroutineScheduler`."""

    def __init__(self, task_id: int, routine: Routine, name: str) -> None:
        self.task_id = task_id
        self.name = name
        self._routine = routine
        self._done = False
        self._cancelled = False
        self._error: Exception | None = None

    def __repr__(self) -> str:
        return f"TaskHandle(id={self.task_id}, name={self.name!r}, state={self.state})"

    @property
    def done(self) -> bool:
        return self._done

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def running(self) -> bool:
        return not (self._done or self._cancelled)

    @property
    def error(self) -> Exception | None:
        return self._error

    @property
    def state(self) -> str:
        if self._cancelled:
            return "cancelled"
        if self._done:
            return "failed" if self._error is not None else "done"
        return "running"


class CoroutineScheduler:
    """Frame-synchronous runner for generator routines.

    A routine is a generator that yields once per frame. `start` advances it to
    its first `yield` immediately; each `tick` then advances every running routine
    once, in start order. Routines started while a tick is in progress are first
    advanced on the following tick. `stop` only stops scheduling: it closes the
    generator and performs no other side effect.
    """

    def __init__(self) -> None:
        self._tasks: list[TaskHandle] = []
        self._next_id = 1
        self._executing: list[TaskHandle] = []

    @property
    def active_count(self) -> int:
        return sum(1 for handle in self._tasks if handle.running)

    def start(self, routine: Routine, *, name: str = "") -> TaskHandle:
        handle = TaskHandle(self._next_id, routine, name or getattr(routine, "__name__", "routine"))
        self._next_id += 1
        self._tasks.append(handle)
        self._step(handle)
        if not handle.running:
            self._tasks.remove(handle)
        return handle

    def stop(self, handle: TaskHandle | None) -> bool:
        if handle is None or not handle.running:
            return False
        handle._cancelled = True
        if handle not in self._executing:
            handle._routine.close()
        return True

    def stop_all(self) -> int:
        stopped = 0
        for handle in list(self._tasks):
            if self.stop(handle):
                stopped += 1
        self._prune()
        return stopped

    def tick(self) -> int:
        """Advance every routine that was running when the tick began."""

        advanced = 0
        for handle in list(self._tasks):
            if not handle.running:
                continue
            self._step(handle)
            advanced += 1
        self._prune()
        return advanced

    def _step(self, handle: TaskHandle) -> None:
        self._executing.append(handle)
        try:
            next(handle._routine)
        except StopIteration:
            handle._done = True
        except Exception as exc:  # noqa: BLE001
            handle._done = True
            handle._error = exc
            LOGGER.exception("scheduled routine `%s` failed: %s", handle.name, exc)
        finally:
            self._executing.pop()
            if handle._cancelled:
                # Stopped from inside its own step; close now that it is suspended.
                handle._routine.close()

    def _prune(self) -> None:
        self._tasks = [handle for handle in self._tasks if handle.running]
