"""Playing keyboard sounds only while an executable is running."""

from __future__ import annotations

from typinganalyzer.executable import Executable, State
from typinganalyzer.keyevents import KeyboardInterceptor, KeyEvent
from typinganalyzer.sound import KBSoundProducer


class ExecutableKBProducer(Executable):
    """Forwards intercepted keys to a sound producer while started."""

    def __init__(
        self,
        kb_prod: KBSoundProducer | None,
        interceptor: KeyboardInterceptor | None = None,
    ) -> None:
        super().__init__()
        self._kb_prod = kb_prod
        self._interceptor = interceptor if interceptor is not None else KeyboardInterceptor()
        self._interceptor.key_interacted.connect(self._on_key)

    @property
    def kb_sound_producer(self) -> KBSoundProducer | None:
        return self._kb_prod

    @property
    def interceptor(self) -> KeyboardInterceptor:
        return self._interceptor

    def set_kb_sound_producer(self, kb_prod: KBSoundProducer | None) -> None:
        self._kb_prod = kb_prod

    def _on_key(self, event: KeyEvent) -> None:
        if self.state == State.STARTED and self._kb_prod is not None:
            self._kb_prod.produce_sound(event)