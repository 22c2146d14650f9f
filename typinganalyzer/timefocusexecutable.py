"""Running a time-focus session: counting down sections one after another."""

from __future__ import annotations

from typinganalyzer.executable import ComplexExecutable, Executable, State, Timer
from typinganalyzer.executablekbproducer import ExecutableKBProducer
from typinganalyzer.keyevents import KeyboardInterceptor
from typinganalyzer.namedobject import Signal
from typinganalyzer.sound import KBSoundProducer, PeriodSoundProducer, PeriodType
from typinganalyzer.timefocusmodel import Role, TimeFocusModel
from typinganalyzer.typingmeter import TypingMeter


class TimeFocusExecutable(Executable):
    """Counts down the sections of a model, measuring typing during work periods."""

    def __init__(
        self,
        model: TimeFocusModel,
        kb_prod: KBSoundProducer | None,
        period_prod: PeriodSoundProducer | None,
        interceptor: KeyboardInterceptor | None = None,
    ) -> None:
        super().__init__()
        interceptor = interceptor if interceptor is not None else KeyboardInterceptor()
        self._model = model
        self._interval = 1000
        self._top_index = 0
        self._period_prod = period_prod
        self._kb_producer = ExecutableKBProducer(kb_prod, interceptor)
        self._meter = TypingMeter(interceptor)
        self._kb_and_meter = ComplexExecutable()
        self._kb_and_meter.add_component(self._kb_producer)
        self._kb_and_meter.add_component(self._meter)
        self._timer = Timer(self.decrement, self._interval)
        self.decrement_interval_changed = Signal()
        self.period_producer_changed = Signal()
        self.top_index_changed = Signal()

    @property
    def model(self) -> TimeFocusModel:
        return self._model

    @property
    def typing_meter(self) -> TypingMeter:
        return self._meter

    @property
    def top_index(self) -> int:
        return self._top_index

    def _set_top_index(self, other: int) -> None:
        if other == self._top_index:
            return
        self._top_index = other
        self.top_index_changed.emit()

    @property
    def decrement_interval(self) -> int:
        return self._interval

    @decrement_interval.setter
    def decrement_interval(self, other: int) -> None:
        if other == self._interval:
            return
        if other <= 0:
            raise ValueError("decrement interval must be positive")
        self._interval = other
        self.decrement_interval_changed.emit()
        if self.state == State.STARTED:
            self._timer.start(other)

    @property
    def period_producer(self) -> PeriodSoundProducer | None:
        return self._period_prod

    @period_producer.setter
    def period_producer(self, other: PeriodSoundProducer | None) -> None:
        if other is self._period_prod:
            return
        self._period_prod = other
        self.period_producer_changed.emit()

    def set_kb_prod(self, other: KBSoundProducer | None) -> None:
        self._kb_producer.set_kb_sound_producer(other)

    def _play(self, period: PeriodType) -> None:
        if self._period_prod is not None:
            self._period_prod.produce_sound(period)

    def start(self) -> None:
        if self.state == State.STARTED:
            return
        self._timer.start(self._interval)
        self._kb_and_meter.start()
        self._set_state(State.STARTED)

    def stop(self) -> None:
        if self.state != State.STARTED:
            return
        self._timer.stop()
        self._kb_and_meter.stop()
        self._set_state(State.STOPPED)

    def finish(self) -> None:
        if self.state == State.FINISHED:
            return
        self._kb_and_meter.finish()
        self._set_top_index(0)
        self._timer.stop()
        self.reset_model()
        self._set_state(State.FINISHED)

    def reset_model(self) -> None:
        """Mark every section incomplete with its full duration remaining."""
        for row in range(self._model.row_count()):
            self._model.set_data(row, False, Role.COMPLETED)
            self._model.set_data(row, self._model.data(row, Role.DURATION), Role.REMAINING_TIME)

    def decrement(self) -> None:
        """Advance the countdown of the current section by one interval."""
        model = self._model
        rows = model.row_count()
        if rows == 0:
            self.finish()
            return
        while self._top_index < rows and model.data(self._top_index, Role.REMAINING_TIME) <= 0:
            self._set_top_index(self._top_index + 1)
        if self._top_index >= rows:
            self._timer.stop()
            return

        top = self._top_index
        remaining = max(model.data(top, Role.REMAINING_TIME) - self._interval, 0)
        model.set_data(top, remaining, Role.REMAINING_TIME)
        if remaining:
            return

        if model.data(top, Role.TYPE) == PeriodType.WORK:
            model.set_data(top, self._meter.rates, Role.RATES)
            self._kb_and_meter.finish()
        model.set_data(top, True, Role.COMPLETED)
        if top == rows - 1:
            self._timer.stop()
            self._play(PeriodType.FINAL)
        else:
            self._set_top_index(top + 1)
            new_period = model.data(self._top_index, Role.TYPE)
            if new_period == PeriodType.WORK:
                self._kb_and_meter.start()
            self._play(new_period)