"""A snapshot of typing speed."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TypingRate:
    """Words and characters per minute at one moment, with running totals."""

    wpm: int = 0
    cpm: int = 0
    avg_wpm: int = 0
    avg_cpm: int = 0
    word_count: int = 0
    char_count: int = 0
    time: int = 0  # milliseconds since the epoch

    def reset(self) -> None:
        """Zero every counter; the timestamp is kept."""
        self.wpm = 0
        self.cpm = 0
        self.avg_wpm = 0
        self.avg_cpm = 0
        self.word_count = 0
        self.char_count = 0


RateList = list[TypingRate]