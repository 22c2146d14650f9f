"""Objects with a start/stop/finish life cycle, and a repeating timer."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Callable, ClassVar

from typinganalyzer.namedobject import Signal


class State(IntEnum):
    NOT_STARTED = 0
    STOPPED = 1
    STARTED = 2
    FINISHED = 3


_STATE_LABELS = {
    State.NOT_STARTED: "NotStarted",
    State.STOPPED: "Stopped",
    State.STARTED: "Started",
    State.FINISHED: "Finished",
}


class Timer:
    """Calls ``callback`` every ``interval`` milliseconds on a background thread."""

    def __init__(self, callback: Callable[[], object], interval: int = 1000) -> None:
        if interval < 0:
            raise ValueError("interval must not be negative")
        self._callback = callback
        self._interval = interval
        self._stop_event: threading.Event | None = None

    @property
    def interval(self) -> int:
        return self._interval

    @interval.setter
    def interval(self, value: int) -> None:
        if value < 0:
            raise ValueError("interval must not be negative")
        self._interval = value
        if self.active:
            self.start()

    @property
    def active(self) -> bool:
        return self._stop_event is not None

    def start(self, interval: int | None = None) -> None:
        """(Re)start the timer, optionally with a new interval."""
        if interval is not None:
            if interval < 0:
                raise ValueError("interval must not be negative")
            self._interval = interval
        self.stop()
        stop_event = threading.Event()
        self._stop_event = stop_event
        thread = threading.Thread(
            target=self._run, args=(stop_event, self._interval / 1000), daemon=True
        )
        thread.start()

    def stop(self) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
            self._stop_event = None

    def _run(self, stop_event: threading.Event, seconds: float) -> None:
        while not stop_event.wait(seconds):
            self._callback()


class Executable:
    """Something that can be started, stopped and finished."""

    def __init__(self) -> None:
        self._state = State.NOT_STARTED
        self.state_changed = Signal()

    @property
    def state(self) -> State:
        return self._state

    def state_to_string(self) -> str:
        return _STATE_LABELS[self._state]

    def start(self) -> None:
        self._set_state(State.STARTED)

    def stop(self) -> None:
        self._set_state(State.STOPPED)

    def finish(self) -> None:
        self._set_state(State.FINISHED)

    def _set_state(self, other: State) -> None:
        if other == self._state:
            return
        self._state = other
        self.state_changed.emit()


class ComplexExecutable(Executable):
    """Forwards life-cycle calls to all of its components."""

    def __init__(self) -> None:
        super().__init__()
        self._components: list[Executable] = []
        self.components_changed = Signal()

    @property
    def components(self) -> list[Executable]:
        return list(self._components)

    def add_component(self, other: Executable) -> None:
        self._components.append(other)
        self.components_changed.emit()

    def start(self) -> None:
        for component in self._components:
            component.start()

    def stop(self) -> None:
        for component in self._components:
            component.stop()

    def finish(self) -> None:
        for component in self._components:
            component.finish()


class ExecutableHolder:
    """Holds the one executable that is currently active."""

    _instance: ClassVar[ExecutableHolder | None] = None

    def __init__(self) -> None:
        self._active: Executable | None = None
        self.active_executable_changed = Signal()

    @classmethod
    def instance(cls) -> ExecutableHolder:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def active_executable(self) -> Executable | None:
        return self._active

    @active_executable.setter
    def active_executable(self, other: Executable | None) -> None:
        self.set_active_executable(other)

    def set_active_executable(
        self, other: Executable | None, new_state: State = State.FINISHED
    ) -> None:
        """Make ``other`` active; a running predecessor is stopped."""
        if other is self._active:
            return
        if self._active is not None and self._active.state == State.STARTED:
            self._active.stop()
        self._active = other
        self.active_executable_changed.emit()