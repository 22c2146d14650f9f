import dataclasses

import pytest

from typinganalyzer.keyevents import (
    InteractionType,
    Key,
    KeyboardInterceptor,
    KeyEvent,
)


def test_key_event_defaults():
    event = KeyEvent(InteractionType.PRESS)
    assert event.text == ""
    assert event.is_repeating is False
    assert event.key == Key.UNKNOWN


def test_key_event_is_immutable():
    event = KeyEvent(InteractionType.RELEASE, Key.SPACE, " ")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.text = "a"
    assert event.text == " "
    assert event.type == InteractionType.RELEASE


def test_space_key_event_carries_space_code():
    event = KeyEvent(InteractionType.PRESS, Key.SPACE, " ")
    assert event.key == 0x20


def test_interceptor_delivers_events():
    interceptor = KeyboardInterceptor()
    received = []
    interceptor.key_interacted.connect(received.append)
    event = KeyEvent(InteractionType.PRESS, ord("A"), "a")
    interceptor.emit_key(event)
    assert received == [event]


def test_watching_flag_toggles():
    interceptor = KeyboardInterceptor()
    assert interceptor.is_watching is False
    interceptor.start_watching()
    assert interceptor.is_watching is True
    interceptor.stop_watching()
    assert interceptor.is_watching is False