"""Key/value configuration and the interface of configurable objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Config:
    """A mapping of setting names to values."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set_value(self, key: str, val: Any) -> None:
        self._values[key] = val

    def value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)


class Configurable(ABC):
    """Something whose behaviour is controlled by a :class:`Config`."""

    @property
    @abstractmethod
    def config(self) -> Config | None:
        """The current configuration."""

    @config.setter
    @abstractmethod
    def config(self, value: Config | None) -> None:
        """Replace the configuration."""