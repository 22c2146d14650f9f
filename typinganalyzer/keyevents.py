"""Keyboard events and the interceptor that distributes them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from typinganalyzer.namedobject import Signal


class InteractionType(Enum):
    """Whether a key went down or came up."""

    PRESS = 0
    RELEASE = 1


class Key(IntEnum):
    """Key codes with special meaning to the analyzer."""

    SPACE = 0x20
    ESCAPE = 0x01000000
    TAB = 0x01000001
    BACKSPACE = 0x01000003
    RETURN = 0x01000004
    ENTER = 0x01000005
    UNKNOWN = 0x01FFFFFF


@dataclass(frozen=True)
class KeyEvent:
    """One interaction with the keyboard."""

    type: InteractionType
    key: int = Key.UNKNOWN
    text: str = ""
    is_repeating: bool = False


class KeyboardInterceptor:
    """Source of keyboard events; listeners connect to ``key_interacted``."""

    def __init__(self) -> None:
        self.key_interacted = Signal()
        self._watching = False

    @property
    def is_watching(self) -> bool:
        return self._watching

    def start_watching(self) -> None:
        self._watching = True

    def stop_watching(self) -> None:
        self._watching = False

    def emit_key(self, event: KeyEvent) -> None:
        """Deliver ``event`` to every listener."""
        self.key_interacted.emit(event)