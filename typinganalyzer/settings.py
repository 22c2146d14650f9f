"""User-adjustable settings and the persistent application settings store."""

from __future__ import annotations

import configparser
import os
from abc import abstractmethod
from pathlib import Path
from typing import Any

from typinganalyzer.namedobject import NamedObject, Signal

_SECTION = "General"


class AbstractAppSetting(NamedObject):
    """A named setting holding one value that announces its changes."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.value_changed = Signal()

    @abstractmethod
    def set_value(self, other: Any) -> bool:
        """Try to take ``other`` as the new value; True when it was accepted."""

    @abstractmethod
    def value(self) -> Any:
        """The current value."""


class ListSetting(AbstractAppSetting):
    """A choice among named options; the first option added is selected."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._options: dict[str, Any] = {}
        self._current: str = ""

    @property
    def current_name(self) -> str:
        return self._current

    def add_option(self, option_name: str, value: Any) -> None:
        """Register ``value`` under ``option_name``, replacing an earlier one."""
        self._options[option_name] = value
        if len(self._options) == 1:
            self._current = option_name

    def add_named(self, obj: NamedObject) -> None:
        """Register a named object under its own name."""
        self.add_option(obj.name, obj)

    def options(self) -> list[str]:
        return list(self._options)

    def set_value(self, other: Any) -> bool:
        """Select the option called ``other``; False when there is none."""
        if other is None:
            return False
        key = other if isinstance(other, str) else str(other)
        if key not in self._options:
            return False
        self._current = key
        self.value_changed.emit()
        return True

    def value(self) -> Any:
        return self._options.get(self._current)


class SliderSetting(AbstractAppSetting):
    """A number with integer bounds, as shown on a slider."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._value = 0.0
        self._min = 0
        self._max = 1
        self.min_changed = Signal()
        self.max_changed = Signal()

    @property
    def min(self) -> int:
        return self._min

    @min.setter
    def min(self, other: int) -> None:
        if other != self._min:
            self._min = other
            self.min_changed.emit()

    @property
    def max(self) -> int:
        return self._max

    @max.setter
    def max(self, other: int) -> None:
        self._max = other
        self.max_changed.emit()

    def set_value(self, other: Any) -> bool:
        """Take ``other`` as a number; False when it is not one or is unchanged."""
        try:
            number = float(other)
        except (TypeError, ValueError):
            return False
        if number == self._value:
            return False
        self._value = number
        self.value_changed.emit()
        return True

    def value(self) -> float:
        return self._value


def _default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    directory = Path(base) if base else Path.home() / ".config"
    return directory / "config.ini"


class ApplicationSettings:
    """Application preferences kept in an INI file, plus registered settings views."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else _default_config_path()
        self._parser = configparser.ConfigParser(interpolation=None)
        self._parser.optionxform = str  # keep key case as written
        if self._path.exists():
            self._parser.read(self._path, encoding="utf-8")
        if not self._parser.has_section(_SECTION):
            self._parser.add_section(_SECTION)
        self._settings_content: dict[str, Any] = {}
        self.language_changed = Signal()
        self.kb_sound_producer_name_changed = Signal()
        self.period_sound_producer_name_changed = Signal()

    @property
    def path(self) -> Path:
        return self._path

    def value(self, key: str, default: str | None = None) -> str | None:
        return self._parser.get(_SECTION, key, fallback=default)

    def set_value(self, key: str, val: str) -> None:
        """Store ``val`` under ``key`` and write the file."""
        self._parser.set(_SECTION, key, str(val))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle)

    def _update(self, key: str, current: str, other: str, signal: Signal) -> None:
        if current != other:
            self.set_value(key, other)
            signal.emit()

    @property
    def default_language(self) -> str:
        return "en"

    @property
    def language(self) -> str:
        return self.value("language", self.default_language)

    @language.setter
    def language(self, other: str) -> None:
        self._update("language", self.language, other, self.language_changed)

    @property
    def default_kb_sound_producer_name(self) -> str:
        return "empty"

    @property
    def kb_sound_producer_name(self) -> str:
        return self.value("KBSoundProducerName", self.default_kb_sound_producer_name)

    @kb_sound_producer_name.setter
    def kb_sound_producer_name(self, other: str) -> None:
        self._update(
            "KBSoundProducerName",
            self.kb_sound_producer_name,
            other,
            self.kb_sound_producer_name_changed,
        )

    @property
    def default_period_sound_producer_name(self) -> str:
        return "empty"

    @property
    def period_sound_producer_name(self) -> str:
        return self.value("periodSoundProducerName", self.default_period_sound_producer_name)

    @period_sound_producer_name.setter
    def period_sound_producer_name(self, other: str) -> None:
        self._update(
            "periodSoundProducerName",
            self.period_sound_producer_name,
            other,
            self.period_sound_producer_name_changed,
        )

    def add_settings_content(self, name: str, content: Any) -> None:
        self._settings_content[name] = content

    def settings_names(self) -> list[str]:
        return list(self._settings_content)

    def settings_content(self, name: str) -> Any:
        return self._settings_content.get(name)