"""A list model of time-focus sections: work and break periods with timers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from typinganalyzer.namedobject import Signal
from typinganalyzer.sound import PeriodType
from typinganalyzer.typingrate import TypingRate

_USER_ROLE = 0x0100


class Role(IntEnum):
    DURATION = _USER_ROLE
    REMAINING_TIME = _USER_ROLE + 1
    COMPLETED = _USER_ROLE + 2
    RATES = _USER_ROLE + 3
    TYPE = _USER_ROLE + 4


_ROLE_NAMES = {
    Role.DURATION: "duration",
    Role.TYPE: "type",
    Role.REMAINING_TIME: "remainingTime",
    Role.COMPLETED: "completed",
    Role.RATES: "rates",
}


@dataclass
class TimeFocusData:
    """One section; durations are in milliseconds."""

    duration: int = 0
    remaining_time: int = 0
    completed: bool = False
    type: PeriodType = PeriodType.STOPPED
    rates: list[TypingRate] = field(default_factory=list)


def _to_milliseconds(value: Any) -> int | None:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 0 else None


class TimeFocusModel:
    """Ordered sections with per-role access, announcing every change."""

    def __init__(self) -> None:
        self._data: list[TimeFocusData] = []
        self.data_changed = Signal()
        self.rows_inserted = Signal()
        self.rows_removed = Signal()

    def __len__(self) -> int:
        return len(self._data)

    def row_count(self) -> int:
        return len(self._data)

    def role_names(self) -> dict[Role, str]:
        return dict(_ROLE_NAMES)

    def _valid(self, row: int) -> bool:
        return 0 <= row < len(self._data)

    def data(self, row: int, role: Role) -> Any:
        """The value of ``role`` in ``row``, or None for an invalid row or role."""
        if not self._valid(row):
            return None
        item = self._data[row]
        if role == Role.DURATION:
            return item.duration
        if role == Role.REMAINING_TIME:
            return item.remaining_time
        if role == Role.COMPLETED:
            return item.completed
        if role == Role.TYPE:
            return item.type
        if role == Role.RATES:
            return list(item.rates)
        return None

    def set_data(self, row: int, value: Any, role: Role) -> bool:
        """Store ``value``; False when the row is invalid or the value does not fit."""
        if not self._valid(row):
            return False
        item = self._data[row]
        if role in (Role.DURATION, Role.REMAINING_TIME):
            millis = _to_milliseconds(value)
            if millis is None:
                return False
            if role == Role.DURATION:
                item.duration = millis
            else:
                item.remaining_time = millis
        elif role == Role.COMPLETED:
            if not isinstance(value, (bool, int, float)):
                return False
            item.completed = bool(value)
        elif role == Role.TYPE:
            try:
                item.type = PeriodType(value)
            except ValueError:
                return False
        elif role == Role.RATES:
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(rate, TypingRate) for rate in value
            ):
                return False
            item.rates = list(value)
        else:
            return False
        self.data_changed.emit(row)
        return True

    def insert_rows(self, row: int, count: int) -> bool:
        if count == 0:
            return True
        if row < 0 or row > len(self._data) or count < 0:
            return False
        self._data[row:row] = [TimeFocusData() for _ in range(count)]
        self.rows_inserted.emit(row, row + count - 1)
        return True

    def remove_rows(self, row: int, count: int) -> bool:
        if count == 0:
            return True
        if row < 0 or count < 0 or row + count > len(self._data):
            return False
        del self._data[row : row + count]
        self.rows_removed.emit(row, row + count - 1)
        return True

    def clear(self) -> bool:
        return self.remove_rows(0, len(self._data))