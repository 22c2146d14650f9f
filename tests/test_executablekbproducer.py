from typinganalyzer.executable import State
from typinganalyzer.executablekbproducer import ExecutableKBProducer
from typinganalyzer.keyevents import InteractionType, Key, KeyboardInterceptor, KeyEvent
from typinganalyzer.sound import KBSoundProducer


class RecordingProducer(KBSoundProducer):
    def __init__(self):
        self.events = []

    def produce_sound(self, event):
        self.events.append(event)
        return True

    @property
    def volume(self):
        return 1.0


EVENT = KeyEvent(InteractionType.PRESS, Key.SPACE, " ")


def test_silent_until_started():
    interceptor = KeyboardInterceptor()
    producer = RecordingProducer()
    exe = ExecutableKBProducer(producer, interceptor)
    interceptor.emit_key(EVENT)
    assert producer.events == []
    exe.start()
    interceptor.emit_key(EVENT)
    assert producer.events == [EVENT]


def test_silent_after_stop():
    interceptor = KeyboardInterceptor()
    producer = RecordingProducer()
    exe = ExecutableKBProducer(producer, interceptor)
    exe.start()
    exe.stop()
    interceptor.emit_key(EVENT)
    assert exe.state == State.STOPPED
    assert producer.events == []


def test_swap_producer():
    interceptor = KeyboardInterceptor()
    first, second = RecordingProducer(), RecordingProducer()
    exe = ExecutableKBProducer(first, interceptor)
    exe.start()
    exe.set_kb_sound_producer(second)
    interceptor.emit_key(EVENT)
    assert exe.kb_sound_producer is second
    assert first.events == []
    assert second.events == [EVENT]


def test_own_interceptor_created():
    producer = RecordingProducer()
    exe = ExecutableKBProducer(producer)
    exe.start()
    exe.interceptor.emit_key(EVENT)
    assert producer.events == [EVENT]