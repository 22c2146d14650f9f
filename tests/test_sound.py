import pytest

from typinganalyzer.config import Config
from typinganalyzer.keyevents import InteractionType, Key, KeyEvent
from typinganalyzer.sound import (
    CustomKBProducer,
    CustomPeriodProducer,
    KeyInfo,
    PeriodType,
    SoundEffect,
    TypeWriterSP,
)


@pytest.fixture
def played():
    return []


@pytest.fixture
def player(played):
    def _play(source, volume):
        played.append((source, volume))

    return _play


@pytest.fixture
def sound_dir(tmp_path):
    for name in ("1.wav", "2.wav", "space.wav", "enter.wav"):
        (tmp_path / name).write_bytes(b"")
    return tmp_path


def press(key, text="", repeating=False):
    return KeyEvent(InteractionType.PRESS, key, text, repeating)


def release(key, text=""):
    return KeyEvent(InteractionType.RELEASE, key, text)


def test_sound_effect_play_calls_player(player, played):
    effect = SoundEffect("click.wav", player)
    effect.volume = 0.5
    effect.play()
    assert played == [("click.wav", 0.5)]
    assert effect.play_count == 1


def test_typewriter_loads_numbered_sounds(sound_dir, player):
    producer = TypeWriterSP(sound_dir, player)
    sources = [effect.source for effect in producer.key_sounds]
    assert sources == [str(sound_dir / "1.wav"), str(sound_dir / "2.wav")]


def test_typewriter_space_and_enter(sound_dir, player, played):
    producer = TypeWriterSP(sound_dir, player)
    assert producer.produce_sound(press(Key.SPACE)) is True
    producer.produce_sound(press(Key.ENTER))
    assert [source for source, _ in played] == [
        str(sound_dir / "space.wav"),
        str(sound_dir / "enter.wav"),
    ]


def test_typewriter_other_key_plays_numbered_sound(sound_dir, player, played):
    producer = TypeWriterSP(sound_dir, player)
    producer.produce_sound(press(ord("A"), "a"))
    assert len(played) == 1
    assert played[0][0] in {effect.source for effect in producer.key_sounds}


def test_typewriter_ignores_release_and_repeat(sound_dir, player, played):
    producer = TypeWriterSP(sound_dir, player)
    assert producer.produce_sound(release(Key.SPACE)) is True
    producer.produce_sound(press(Key.SPACE, repeating=True))
    assert played == []


def test_typewriter_without_key_sounds_is_silent(tmp_path, player, played):
    producer = TypeWriterSP(tmp_path, player)
    producer.produce_sound(press(ord("A"), "a"))
    assert producer.key_sounds == ()
    assert played == []


def test_typewriter_volume_propagates(sound_dir, player):
    producer = TypeWriterSP(sound_dir, player)
    changes = []
    producer.volume_changed.connect(lambda: changes.append(producer.volume))
    producer.volume = 0.25
    producer.volume = 0.25
    assert changes == [0.25]
    assert all(effect.volume == 0.25 for effect in producer.key_sounds)
    assert producer.space_sound.volume == 0.25
    assert producer.enter_sound.volume == 0.25


def test_key_info_from_event():
    event = press(Key.TAB)
    assert KeyInfo.from_event(event) == KeyInfo(Key.TAB, InteractionType.PRESS)
    assert KeyInfo.from_event(event) != KeyInfo(Key.TAB, InteractionType.RELEASE)


def test_custom_kb_specific_key(player, played):
    producer = CustomKBProducer(player)
    info = KeyInfo(Key.SPACE, InteractionType.RELEASE)
    producer.set_key_effect(info, "up.wav")
    assert producer.produce_sound(release(Key.SPACE)) is True
    assert producer.key_effect(info).play_count == 1
    assert played == [("up.wav", 1.0)]


def test_custom_kb_random_only_for_fresh_presses(player, played):
    producer = CustomKBProducer(player)
    producer.set_random_effects(["a.wav", "b.wav"])
    assert producer.produce_sound(release(ord("A"))) is True
    assert producer.produce_sound(press(ord("A"), repeating=True)) is True
    assert sum(effect.play_count for effect in producer.random_effects) == 0
    assert producer.produce_sound(press(ord("A"))) is True
    assert sum(effect.play_count for effect in producer.random_effects) == 1
    assert len(played) == 1
    assert played[0][0] in {"a.wav", "b.wav"}


def test_custom_kb_random_effects_replaced(player):
    producer = CustomKBProducer(player)
    producer.set_random_effects(["a.wav", "b.wav"])
    producer.set_random_effects(["c.wav"])
    assert [effect.source for effect in producer.random_effects] == ["c.wav"]


def test_custom_kb_volume_applies_to_all(player):
    producer = CustomKBProducer(player)
    info = KeyInfo(Key.ENTER, InteractionType.PRESS)
    producer.set_key_effect(info, "enter.wav")
    producer.set_random_effects(["a.wav"])
    producer.volume = 0.5
    assert producer.key_effect(info).volume == 0.5
    assert producer.random_effects[0].volume == 0.5


def test_custom_kb_config_stored():
    producer = CustomKBProducer()
    config = Config()
    producer.config = config
    assert producer.config is config


def test_period_universal_sound(player, played):
    producer = CustomPeriodProducer(player)
    producer.add_universal_sound(["ring.wav"])
    for period in (PeriodType.BREAK, PeriodType.WORK, PeriodType.FINAL):
        assert producer.produce_sound(period) is True
    producer.produce_sound(PeriodType.STOPPED)
    assert [source for source, _ in played] == ["ring.wav"] * 3


def test_period_set_sounds_replaces_one_period(player, played):
    producer = CustomPeriodProducer(player)
    producer.add_universal_sound(["ring.wav"])
    producer.set_sounds(PeriodType.WORK, ["work.wav"])
    assert producer.produce_sound(PeriodType.WORK) is True
    assert producer.produce_sound(PeriodType.BREAK) is True
    work_sounds = producer.sounds(PeriodType.WORK)
    break_sounds = producer.sounds(PeriodType.BREAK)
    assert [effect.source for effect in work_sounds] == ["work.wav"]
    assert [effect.source for effect in break_sounds] == ["ring.wav"]
    assert work_sounds[0].play_count == 1
    assert break_sounds[0].play_count == 1
    assert [source for source, _ in played] == ["work.wav", "ring.wav"]


def test_period_volume(player):
    producer = CustomPeriodProducer(player)
    producer.add_universal_sound(["ring.wav"])
    changes = []
    producer.volume_changed.connect(lambda: changes.append(True))
    producer.volume = 0.3
    assert producer.volume == 0.3
    assert producer.sounds(PeriodType.FINAL)[0].volume == 0.3
    assert changes == [True]


def test_period_config_defaults_to_empty():
    producer = CustomPeriodProducer()
    assert producer.config.value("anything", "fallback") == "fallback"