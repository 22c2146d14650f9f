# typinganalyzer

Measures typing speed from keyboard events. It runs timed focus sessions made
of work and break periods, and it picks typewriter-style sounds to play while
you type.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
typinganalyzer
```

This builds a `PageApplication` with three pages: **Time Focus**, **Free
Mode** and **Settings**. It then calls `exec_()`, which starts the keyboard
interceptor and waits. It stops when `quit()` is called or when you press
Ctrl-C, and then exits with status 0.

## What the package does not do

- **No system-wide keyboard capture.** `KeyboardInterceptor` only passes on the
  events handed to it through `emit_key(event)`. Nothing feeds it keys from the
  operating system.
- **No audio output of its own.** A `SoundEffect` counts its plays. It hands
  `(source, volume)` to a *player* callable only when you supply one. The
  command supplies none, so it is silent.
- **No graphical interface.** Pages, settings and the model are plain Python
  objects that announce their changes through `Signal`s.

## Modules

- `typinganalyzer.namedobject`
  - `Signal` has `connect`, `disconnect` and `emit`.
  - `NamedObject` has a `name` and a `name_changed` signal.
- `typinganalyzer.keyevents`
  - `KeyEvent` has a type (`InteractionType.PRESS` or `RELEASE`), a key, text and `is_repeating`.
  - `Key` holds codes for space, tab, enter and similar keys.
  - `KeyboardInterceptor` distributes events.
- `typinganalyzer.wordcounter`
  - `WordCounter` counts characters and words as they arrive through `push_char` or `push_text`.
  - `clear()` resets the counter.
- `typinganalyzer.typingrate`
  - `TypingRate` is a dataclass with `wpm`, `cpm`, `avg_wpm`, `avg_cpm`, `word_count`, `char_count` and `time` (milliseconds since the epoch).
- `typinganalyzer.typingmeter`
  - `TypingMeter` counts *released* keys while it is started.
  - At each update it appends a `TypingRate`: every `updating_interval` milliseconds (3000 by default), or when you call `update()` yourself.
- `typinganalyzer.executable`
  - `Executable` has `start()`, `stop()` and `finish()`.
  - Its `state` is one of `NOT_STARTED`, `STOPPED`, `STARTED` and `FINISHED`, shown by `state_to_string()` as `NotStarted`, `Stopped`, `Started` and `Finished`.
  - `ComplexExecutable` forwards these calls to its components.
  - `ExecutableHolder.instance()` keeps one active executable.
  - `Timer` calls back repeatedly on a background thread.
- `typinganalyzer.sound`
  - Keyboard sound producers:
    - `TypeWriterSP` uses numbered `1.wav`, `2.wav`, … plus `space.wav` and `enter.wav` from a sound directory, `sounds` by default.
    - `CustomKBProducer` plays sounds assigned per key, with random sounds for other presses.
  - Period sound producer: `CustomPeriodProducer`.
  - `PeriodType`: `BREAK`, `WORK`, `FINAL`, `STOPPED`.
- `typinganalyzer.executablekbproducer`
  - `ExecutableKBProducer` forwards key events to a keyboard sound producer only while it is started.
- `typinganalyzer.timefocusmodel`
  - `TimeFocusModel` is a list of `TimeFocusData` sections.
  - `insert_rows`, `remove_rows` and `clear` change the list.
  - `data` and `set_data` read and write by `Role`: `DURATION`, `REMAINING_TIME`, `COMPLETED`, `RATES`, `TYPE`.
- `typinganalyzer.timefocusexecutable`
  - `TimeFocusExecutable` counts the sections down by `decrement_interval` milliseconds, 1000 by default.
  - It measures typing during work periods and stores the rates in the model.
  - It plays the period sound when a section ends.
  - `finish()` resets the model.
- `typinganalyzer.settings`
  - `ListSetting` is a choice among named options. The first option added is selected.
  - `SliderSetting` holds a number between `min` and `max`.
  - `ApplicationSettings` keeps `language` (default `en`), `kb_sound_producer_name` and `period_sound_producer_name` (default `empty`) in the `General` section of an INI file. The file is `$XDG_CONFIG_HOME/config.ini`, or `~/.config/config.ini` when that variable is unset.
- `typinganalyzer.pages`
  - Pages: `AppPage`, `SettingsPage`, `FreeModePage`, `TimeFocusPage`.
  - The time-focus page uses a ring sound at `sounds/ring.wav`.
- `typinganalyzer.application`
  - `Application` and `PageApplication`.
  - `main(argv=None)` starts the command.

## Example

```python
from typinganalyzer.keyevents import InteractionType, KeyboardInterceptor, KeyEvent
from typinganalyzer.typingmeter import TypingMeter

keys = KeyboardInterceptor()
meter = TypingMeter(keys)
meter.start()
for char in "hi":
    keys.emit_key(KeyEvent(InteractionType.RELEASE, ord(char.upper()), char))
meter.update()
meter.finish()
print(meter.rates[-1].char_count)
```