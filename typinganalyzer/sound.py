"""Sound effects and the producers that play them for keys and periods."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import count
from pathlib import Path
from typing import Callable, Iterable

from typinganalyzer.config import Config, Configurable
from typinganalyzer.keyevents import InteractionType, Key, KeyEvent
from typinganalyzer.namedobject import Signal

Player = Callable[[str, float], object]


class PeriodType(Enum):
    """Kinds of section in a time-focus session."""

    BREAK = 0
    WORK = 1
    FINAL = 2
    STOPPED = 3


class SoundEffect:
    """A sound source that is handed to ``player`` with its volume when played."""

    def __init__(self, source: str | Path, player: Player | None = None) -> None:
        self.source = str(source)
        self.volume = 1.0
        self.play_count = 0
        self._player = player

    def play(self) -> None:
        self.play_count += 1
        if self._player is not None:
            self._player(self.source, self.volume)

    def __repr__(self) -> str:
        return f"SoundEffect({self.source!r}, volume={self.volume})"


class KBSoundProducer(ABC):
    """Plays sounds in answer to keyboard events."""

    @abstractmethod
    def produce_sound(self, event: KeyEvent) -> bool:
        """React to ``event``; returns True when the event was handled."""

    @property
    @abstractmethod
    def volume(self) -> float:
        """Playback volume between 0 and 1."""


class PeriodSoundProducer(ABC):
    """Plays sounds when a time-focus period begins or ends."""

    @abstractmethod
    def produce_sound(self, period: PeriodType) -> bool:
        """React to the start of ``period``; returns True when handled."""

    @property
    @abstractmethod
    def volume(self) -> float:
        """Playback volume between 0 and 1."""


@dataclass(frozen=True)
class KeyInfo:
    """A key together with the kind of interaction, used as a lookup key."""

    key: int
    type: InteractionType

    @classmethod
    def from_event(cls, event: KeyEvent) -> KeyInfo:
        return cls(event.key, event.type)


def _set_effects_volume(effects: Iterable[SoundEffect], volume: float) -> None:
    for effect in effects:
        effect.volume = volume


class TypeWriterSP(KBSoundProducer):
    """Typewriter sounds: numbered key clicks plus dedicated space and enter sounds."""

    def __init__(self, sound_dir: str | Path = "sounds", player: Player | None = None) -> None:
        directory = Path(sound_dir)
        self._player = player
        self._volume = 1.0
        self.volume_changed = Signal()
        self._key_sounds: list[SoundEffect] = []
        for number in count(1):
            path = directory / f"{number}.wav"
            if not path.exists():
                break
            self._key_sounds.append(SoundEffect(path, player))
        self._space_sound = SoundEffect(directory / "space.wav", player)
        self._enter_sound = SoundEffect(directory / "enter.wav", player)

    @property
    def key_sounds(self) -> tuple[SoundEffect, ...]:
        return tuple(self._key_sounds)

    @property
    def space_sound(self) -> SoundEffect:
        return self._space_sound

    @property
    def enter_sound(self) -> SoundEffect:
        return self._enter_sound

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, other: float) -> None:
        if other == self._volume:
            return
        self._volume = other
        _set_effects_volume([*self._key_sounds, self._space_sound, self._enter_sound], other)
        self.volume_changed.emit()

    def produce_sound(self, event: KeyEvent) -> bool:
        if event.type == InteractionType.PRESS and not event.is_repeating:
            if event.key == Key.SPACE:
                self._space_sound.play()
            elif event.key == Key.ENTER:
                self._enter_sound.play()
            elif self._key_sounds:
                random.choice(self._key_sounds).play()
        return True


class CustomKBProducer(KBSoundProducer, Configurable):
    """Keyboard sounds assigned per key, with random sounds for all other presses."""

    def __init__(self, player: Player | None = None) -> None:
        self._player = player
        self._volume = 1.0
        self._config: Config | None = None
        self._spec_keys: dict[KeyInfo, SoundEffect] = {}
        self._random: list[SoundEffect] = []
        self.volume_changed = Signal()

    @property
    def config(self) -> Config | None:
        return self._config

    @config.setter
    def config(self, value: Config | None) -> None:
        self._config = value

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, other: float) -> None:
        if other == self._volume:
            return
        self._volume = other
        _set_effects_volume([*self._spec_keys.values(), *self._random], other)
        self.volume_changed.emit()

    @property
    def random_effects(self) -> tuple[SoundEffect, ...]:
        return tuple(self._random)

    def key_effect(self, info: KeyInfo) -> SoundEffect | None:
        return self._spec_keys.get(info)

    def _make_effect(self, source: str | Path) -> SoundEffect:
        effect = SoundEffect(source, self._player)
        effect.volume = self._volume
        return effect

    def set_key_effect(self, info: KeyInfo, source: str | Path) -> None:
        self._spec_keys[info] = self._make_effect(source)

    def set_random_effects(self, sources: Iterable[str | Path]) -> None:
        self._random = [self._make_effect(source) for source in sources]

    def produce_sound(self, event: KeyEvent) -> bool:
        effect = self._spec_keys.get(KeyInfo.from_event(event))
        if effect is not None:
            effect.play()
        elif self._random and event.type == InteractionType.PRESS and not event.is_repeating:
            random.choice(self._random).play()
        return True


_UNIVERSAL_PERIODS = (PeriodType.BREAK, PeriodType.WORK, PeriodType.FINAL)


class CustomPeriodProducer(PeriodSoundProducer, Configurable):
    """Plays a random sound from the list registered for each period."""

    def __init__(self, player: Player | None = None) -> None:
        self._player = player
        self._volume = 1.0
        self._config: Config | None = None
        self._sounds: dict[PeriodType, list[SoundEffect]] = {}
        self.volume_changed = Signal()

    @property
    def config(self) -> Config:
        return self._config if self._config is not None else Config()

    @config.setter
    def config(self, value: Config | None) -> None:
        self._config = value

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, other: float) -> None:
        if other == self._volume:
            return
        self._volume = other
        for effects in self._sounds.values():
            _set_effects_volume(effects, other)
        self.volume_changed.emit()

    def sounds(self, period: PeriodType) -> tuple[SoundEffect, ...]:
        return tuple(self._sounds.get(period, ()))

    def _make_effect(self, source: str | Path) -> SoundEffect:
        effect = SoundEffect(source, self._player)
        effect.volume = self._volume
        return effect

    def add_universal_sound(self, sources: Iterable[str | Path]) -> None:
        """Register each source for the break, work and final periods alike."""
        for source in sources:
            effect = self._make_effect(source)
            for period in _UNIVERSAL_PERIODS:
                self._sounds.setdefault(period, []).append(effect)

    def set_sounds(self, period: PeriodType, sources: Iterable[str | Path]) -> None:
        self._sounds[period] = [self._make_effect(source) for source in sources]

    def produce_sound(self, period: PeriodType) -> bool:
        effects = self._sounds.get(period)
        if effects:
            random.choice(effects).play()
        return True