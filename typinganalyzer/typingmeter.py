"""Measuring typing speed from keyboard events."""

from __future__ import annotations

import time

from typinganalyzer.executable import Executable, State, Timer
from typinganalyzer.keyevents import InteractionType, Key, KeyboardInterceptor, KeyEvent
from typinganalyzer.namedobject import Signal
from typinganalyzer.typingrate import TypingRate
from typinganalyzer.wordcounter import WordCounter

_SPECIAL_CHARS = {Key.SPACE: " ", Key.TAB: "\t", Key.ENTER: "\n"}


class TypingMeter(Executable):
    """Counts released keys and records a :class:`TypingRate` at each update."""

    def __init__(self, interceptor: KeyboardInterceptor | None = None) -> None:
        super().__init__()
        self._interceptor = interceptor if interceptor is not None else KeyboardInterceptor()
        self._word_counter = WordCounter()
        self._rates: list[TypingRate] = []
        self.rates_changed = Signal()
        self.updating_interval_changed = Signal()
        self._updating_interval = 3000
        self._timer = Timer(self.update, self._updating_interval)
        self._interceptor.key_interacted.connect(self.handle_key_event)

    @property
    def rates(self) -> list[TypingRate]:
        return list(self._rates)

    @property
    def updating_interval(self) -> int:
        return self._updating_interval

    @updating_interval.setter
    def updating_interval(self, other: int) -> None:
        if other == self._updating_interval:
            return
        if other <= 0:
            raise ValueError("updating interval must be positive")
        self._updating_interval = other
        self._timer.interval = other
        self.updating_interval_changed.emit()

    def start(self) -> None:
        if self.state == State.STARTED:
            return
        if self.state == State.FINISHED:
            self._rates.clear()
            self._word_counter.clear()
            self.rates_changed.emit()
        self._timer.start()
        self._set_state(State.STARTED)

    def stop(self) -> None:
        if self.state == State.STARTED:
            self._timer.stop()
            self._set_state(State.STOPPED)

    def finish(self) -> None:
        if self.state != State.FINISHED:
            self._timer.stop()
            self._set_state(State.FINISHED)

    def calc_rate(self) -> TypingRate:
        """Compute the rate since the previous update and on average."""
        words = self._word_counter.word_count
        chars = self._word_counter.char_count
        interval = self._updating_interval
        rate = TypingRate(time=time.time_ns() // 1_000_000)
        if self._rates:
            last, first = self._rates[-1], self._rates[0]
            elapsed = rate.time - first.time
            rate.wpm = (words - last.word_count) * 60000 // interval
            rate.cpm = (chars - last.char_count) * 60000 // interval
            rate.avg_cpm = chars * 60000 // elapsed
            rate.avg_wpm = words * 60000 // elapsed
        else:
            rate.wpm = words * 60000 // interval
            rate.cpm = chars * 60000 // interval
            rate.avg_cpm = rate.cpm
            rate.avg_wpm = rate.wpm
        rate.word_count = words
        rate.char_count = chars
        return rate

    def update(self) -> None:
        self._rates.append(self.calc_rate())
        self.rates_changed.emit()

    def handle_key_event(self, event: KeyEvent) -> None:
        """Count a released key while the meter is running."""
        if self.state != State.STARTED or event.type != InteractionType.RELEASE:
            return
        char = _SPECIAL_CHARS.get(event.key)
        if char is None:
            if not event.text:
                return
            char = event.text[0]
        self._word_counter.push_char(char)