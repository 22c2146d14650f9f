"""The application: its pages, settings and keyboard sound producer."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from typing import Sequence

from typinganalyzer.keyevents import KeyboardInterceptor
from typinganalyzer.namedobject import Signal
from typinganalyzer.pages import AppPage, FreeModePage, SettingsPage, TimeFocusPage
from typinganalyzer.settings import ApplicationSettings, ListSetting, SliderSetting
from typinganalyzer.sound import KBSoundProducer, Player, TypeWriterSP

_GENERAL = "General"


class Application(ABC):
    """Holds the keyboard sound producer shared by all pages."""

    def __init__(self, settings: ApplicationSettings | None = None) -> None:
        self._kb_prod: KBSoundProducer | None = None
        self._settings = settings
        self.kb_prod_changed = Signal()

    @property
    def settings(self) -> ApplicationSettings | None:
        return self._settings

    @property
    def kb_prod(self) -> KBSoundProducer | None:
        return self._kb_prod

    @kb_prod.setter
    def kb_prod(self, other: KBSoundProducer | None) -> None:
        if other is self._kb_prod:
            return
        self._kb_prod = other
        self.kb_prod_changed.emit()

    @abstractmethod
    def exec_(self) -> int:
        """Run until the application quits; returns the exit code."""


class PageApplication(Application):
    """An application made of a time-focus page, a free-mode page and settings."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        interceptor: KeyboardInterceptor | None = None,
        player: Player | None = None,
    ) -> None:
        super().__init__()
        self._argv = list(argv) if argv is not None else []
        self._interceptor = interceptor if interceptor is not None else KeyboardInterceptor()
        self._player = player
        self._pages: list[AppPage] = []
        self.pages_changed = Signal()
        self._quit_event = threading.Event()

        self.kb_prod = TypeWriterSP(player=player)
        self.add_page(TimeFocusPage(self, self._interceptor, player))
        self.add_page(FreeModePage(self, self._interceptor))
        self._setup_settings()

    @property
    def argv(self) -> list[str]:
        return list(self._argv)

    @property
    def interceptor(self) -> KeyboardInterceptor:
        return self._interceptor

    @property
    def pages(self) -> list[AppPage]:
        return list(self._pages)

    def add_page(self, other: AppPage) -> None:
        self._pages.append(other)
        self.pages_changed.emit()

    def remove_page(self, index: int) -> bool:
        """Remove the page at ``index``; False when there is no such page."""
        if not 0 <= index < len(self._pages):
            return False
        del self._pages[index]
        self.pages_changed.emit()
        return True

    def _setup_settings(self) -> None:
        settings_page = SettingsPage()

        kb_setting = ListSetting("Keyboard sounds")
        kb_setting.add_option("Typewriter", TypeWriterSP(player=self._player))

        def choose_kb_producer() -> None:
            self.kb_prod = kb_setting.value()

        kb_setting.value_changed.connect(choose_kb_producer)
        settings_page.add_setting(kb_setting, _GENERAL)

        volume_setting = SliderSetting("Keyboard sounds volume")
        volume_setting.set_value(self.kb_prod.volume * volume_setting.max)

        def apply_volume() -> None:
            if self.kb_prod is not None:
                self.kb_prod.volume = volume_setting.value() / volume_setting.max

        volume_setting.value_changed.connect(apply_volume)
        settings_page.add_setting(volume_setting, _GENERAL)

        for page in self._pages:
            for setting in page.settings():
                settings_page.add_setting(setting, page.name)
        self.add_page(settings_page)

    def exec_(self) -> int:
        """Watch the keyboard until :meth:`quit` is called or the user interrupts."""
        self._interceptor.start_watching()
        try:
            while not self._quit_event.wait(0.1):
                pass
        except KeyboardInterrupt:
            pass
        finally:
            self._interceptor.stop_watching()
            self._quit_event.clear()
        return 0

    def quit(self) -> None:
        """Ask a running :meth:`exec_` to return."""
        self._quit_event.set()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the application and run it until it quits."""
    if argv is None:
        argv = sys.argv[1:]
    app = PageApplication(argv)
    return app.exec_()