"""Counting characters and words as they are typed."""

from __future__ import annotations

from enum import Enum

from typinganalyzer.namedobject import Signal


class CounterState(Enum):
    NO_LAST = 0
    LAST_IS_LETTER = 1
    LAST_IS_SEPARATOR = 2


class WordCounter:
    """Incremental character and word counter fed one character at a time."""

    def __init__(self) -> None:
        self.word_count_changed = Signal()
        self.char_count_changed = Signal()
        self.state_changed = Signal()
        self._word_count = 0
        self._char_count = 0
        self._state = CounterState.NO_LAST

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def char_count(self) -> int:
        return self._char_count

    @property
    def state(self) -> CounterState:
        return self._state

    def clear(self) -> None:
        self._set_word_count(0)
        self._set_char_count(0)
        self._set_state(CounterState.NO_LAST)

    def push_text(self, text: str) -> None:
        for char in text:
            self.push_char(char)

    def push_char(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError("push_char expects exactly one character")
        self._set_char_count(self._char_count + 1)
        if self._state == CounterState.LAST_IS_SEPARATOR:
            return
        if self._state == CounterState.NO_LAST:
            self._set_word_count(self._word_count + 1)
        if self._is_separator(char):
            if self._state == CounterState.LAST_IS_LETTER:
                self._set_word_count(self._word_count + 1)
                self._set_state(CounterState.LAST_IS_SEPARATOR)
            else:
                self._set_state(CounterState.LAST_IS_LETTER)

    @staticmethod
    def _is_separator(char: str) -> bool:
        return char.isspace()

    def _set_word_count(self, value: int) -> None:
        if value != self._word_count:
            self._word_count = value
            self.word_count_changed.emit()

    def _set_char_count(self, value: int) -> None:
        if value != self._char_count:
            self._char_count = value
            self.char_count_changed.emit()

    def _set_state(self, value: CounterState) -> None:
        if value != self._state:
            self._state = value
            self.state_changed.emit()