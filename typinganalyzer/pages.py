"""Pages of the application: settings, free typing and time-focus sessions."""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Protocol

from typinganalyzer.executable import ComplexExecutable, Executable
from typinganalyzer.executablekbproducer import ExecutableKBProducer
from typinganalyzer.keyevents import KeyboardInterceptor
from typinganalyzer.namedobject import NamedObject, Signal
from typinganalyzer.settings import AbstractAppSetting, ListSetting, SliderSetting
from typinganalyzer.sound import CustomPeriodProducer, KBSoundProducer, Player
from typinganalyzer.timefocusexecutable import TimeFocusExecutable
from typinganalyzer.timefocusmodel import TimeFocusModel
from typinganalyzer.typingmeter import TypingMeter
from typinganalyzer.typingrate import TypingRate

RING_SOUND = Path("sounds") / "ring.wav"


class _KBProducerSource(Protocol):
    """What a page needs from the application: the current keyboard sound producer."""

    kb_prod_changed: Signal

    @property
    def kb_prod(self) -> KBSoundProducer | None: ...


class AppPage(NamedObject):
    """A named page of the application with an optional icon."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._icon_source = ""
        self.icon_source_changed = Signal()

    @property
    def icon_source(self) -> str:
        return self._icon_source

    @icon_source.setter
    def icon_source(self, other: str) -> None:
        if other != self._icon_source:
            self._icon_source = other
            self.icon_source_changed.emit()

    def settings(self) -> list[AbstractAppSetting]:
        """Settings this page contributes to the settings page; none by default."""
        return []


class ExecutableAppPage(AppPage):
    """A page whose work is driven by an :class:`Executable`."""

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.executable_changed = Signal()

    @property
    @abstractmethod
    def executable(self) -> Executable:
        """The executable that runs this page's activity."""


class SettingsPage(AppPage):
    """Collects settings grouped under headers, in the order headers first appear."""

    def __init__(self) -> None:
        super().__init__("Settings")
        self._headers: list[str] = []
        self._added: dict[str, list[AbstractAppSetting]] = {}
        self.headers_changed = Signal()

    @property
    def headers(self) -> list[str]:
        return list(self._headers)

    def add_setting(self, setting: AbstractAppSetting, header: str) -> None:
        group = self._added.get(header)
        if group is None:
            self._added[header] = [setting]
            self._headers.append(header)
            self.headers_changed.emit()
        else:
            group.append(setting)

    def added_settings(self, header: str) -> list[AbstractAppSetting]:
        return list(self._added.get(header, ()))


class FreeModePage(ExecutableAppPage):
    """Free typing: keyboard sounds and a typing meter started together."""

    def __init__(
        self, app: _KBProducerSource, interceptor: KeyboardInterceptor | None = None
    ) -> None:
        super().__init__("Free Mode")
        if interceptor is None:
            interceptor = KeyboardInterceptor()
        self._app = app
        self._kb_producer = ExecutableKBProducer(app.kb_prod, interceptor)
        self._meter = TypingMeter(interceptor)
        self._executable = ComplexExecutable()
        self._executable.add_component(self._kb_producer)
        self._executable.add_component(self._meter)
        self.rates_changed = Signal()
        self._meter.rates_changed.connect(self.rates_changed.emit)
        app.kb_prod_changed.connect(self._follow_kb_prod)

    def _follow_kb_prod(self) -> None:
        self._kb_producer.set_kb_sound_producer(self._app.kb_prod)

    @property
    def rates(self) -> list[TypingRate]:
        return self._meter.rates

    @property
    def executable(self) -> ComplexExecutable:
        return self._executable


class TimeFocusPage(ExecutableAppPage):
    """Work and break periods counted down one after another."""

    def __init__(
        self,
        app: _KBProducerSource,
        interceptor: KeyboardInterceptor | None = None,
        player: Player | None = None,
    ) -> None:
        super().__init__("Time Focus")
        if interceptor is None:
            interceptor = KeyboardInterceptor()
        self._app = app
        self._model = TimeFocusModel()
        self.model_changed = Signal()
        self.active_index_changed = Signal()
        self._period_setting = ListSetting("Period Sounds")
        self._volume_setting = SliderSetting("Periods volume")

        ring = CustomPeriodProducer(player)
        ring.add_universal_sound([RING_SOUND])
        self._period_setting.add_option("Ring", ring)

        self._executable = TimeFocusExecutable(
            self._model, app.kb_prod, self._period_setting.value(), interceptor
        )
        self._executable.top_index_changed.connect(self.active_index_changed.emit)
        self._volume_setting.set_value(ring.volume * self._volume_setting.max)

        self._period_setting.value_changed.connect(self._on_period_producer_chosen)
        self._volume_setting.value_changed.connect(self._apply_volume)
        app.kb_prod_changed.connect(self._follow_kb_prod)

    def _on_period_producer_chosen(self) -> None:
        self._executable.period_producer = self._period_setting.value()
        self._apply_volume()

    def _apply_volume(self) -> None:
        producer = self._executable.period_producer
        if producer is not None:
            producer.volume = self._volume_setting.value() / self._volume_setting.max

    def _follow_kb_prod(self) -> None:
        self._executable.set_kb_prod(self._app.kb_prod)

    @property
    def model(self) -> TimeFocusModel:
        return self._model

    @model.setter
    def model(self, other: TimeFocusModel) -> None:
        if other is not self._model:
            self._model = other
            self.model_changed.emit()

    @property
    def executable(self) -> TimeFocusExecutable:
        return self._executable

    @property
    def active_index(self) -> int:
        return self._executable.top_index

    def settings(self) -> list[AbstractAppSetting]:
        return [self._period_setting, self._volume_setting]