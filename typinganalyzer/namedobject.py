"""Lightweight signals and objects that carry a display name."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """A list of callables that are invoked together when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot`` to be called on every emission."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove a previously connected ``slot``."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"{slot!r} is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class NamedObject:
    """An object with a name that announces its changes."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self.name_changed = Signal()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, other: str) -> None:
        if other != self._name:
            self._name = other
            self.name_changed.emit()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"