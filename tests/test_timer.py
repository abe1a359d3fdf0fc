import pendulum
import pytest

from timegrid.errors import ValidationError
from timegrid.model.timer import TimerState
from timegrid.service.timer import ManualTicker, SessionTimer, SleepTicker

TODAY = pendulum.date(2024, 1, 10)


@pytest.fixture
def ticker():
    return ManualTicker()


@pytest.fixture
def emitted():
    return []


@pytest.fixture
def timer(ticker, emitted):
    return SessionTimer(ticker, sink=emitted.append, today=lambda: TODAY)


def test_start_without_task_fails_without_transition(timer, ticker):
    with pytest.raises(ValidationError):
        timer.start()
    assert timer.state == TimerState.IDLE
    assert not ticker.active


def test_ticks_accumulate_only_while_running(timer, ticker):
    timer.start(1)
    ticker.advance(5)
    assert timer.elapsed_seconds == 5

    timer.pause()
    assert timer.state == TimerState.PAUSED
    assert not ticker.active
    ticker.advance(10)
    timer.tick()
    assert timer.elapsed_seconds == 5

    timer.start()
    ticker.advance(3)
    assert timer.state == TimerState.RUNNING
    assert timer.elapsed_seconds == 8


def test_pause_is_noop_when_idle(timer):
    timer.pause()
    assert timer.state == TimerState.IDLE


def test_stop_with_zero_elapsed_emits_nothing(timer, emitted):
    timer.start(1)
    assert timer.stop() is None
    assert timer.state == TimerState.IDLE
    assert emitted == []
    assert timer.sessions == []


def test_stop_emits_session_for_today(timer, ticker, emitted):
    timer.start(7)
    ticker.advance(90)
    session = timer.stop()

    assert session == {"task_id": 7, "date": TODAY, "seconds": 90}
    assert emitted == [session]
    assert timer.sessions == [session]
    assert timer.state == TimerState.IDLE
    assert timer.elapsed_seconds == 0
    assert timer.task_id is None
    assert not ticker.active


def test_stop_from_paused(timer, ticker, emitted):
    timer.start(2)
    ticker.advance(4)
    timer.pause()
    session = timer.stop()
    assert session is not None
    assert session["seconds"] == 4


def test_task_cannot_change_while_running(timer):
    timer.start(1)
    with pytest.raises(ValidationError):
        timer.select(2)
    assert timer.task_id == 1


def test_closed_timer_ignores_ticks(ticker, emitted):
    with SessionTimer(ticker, sink=emitted.append, today=lambda: TODAY) as timer:
        timer.start(1)
        ticker.advance(2)
    assert not ticker.active
    timer.tick()
    assert timer.elapsed_seconds == 2
    with pytest.raises(ValidationError):
        timer.start()


def test_timer_feeds_entry_repository(repository, ticker, wednesday):
    entry = repository.add(
        {"summary": "Task", "start": "09:00", "end": "10:00", "day": wednesday}
    )

    def save(session):
        repository.add_worklog_seconds(
            session["task_id"], session["date"], session["seconds"]
        )

    timer = SessionTimer(ticker, sink=save, today=lambda: wednesday)
    for seconds in (60, 30):
        timer.start(entry["id"])
        ticker.advance(seconds)
        timer.stop()

    worklog = repository.get_worklog(entry["id"], wednesday)
    assert worklog is not None
    assert worklog["duration_seconds"] == 90


def test_sleep_ticker_runs_until_cancelled():
    sleeps = []

    def pause_after_three():
        if timer.elapsed_seconds == 3:
            timer.pause()

    ticker = SleepTicker(sleep=sleeps.append, on_tick=pause_after_three)
    timer = SessionTimer(ticker, today=lambda: TODAY)
    timer.start(1)
    ticker.run()

    assert timer.elapsed_seconds == 3
    assert timer.state == TimerState.PAUSED
    assert sleeps == [1.0, 1.0, 1.0]
    assert not ticker.active


def test_sleep_ticker_stops_on_keyboard_interrupt():
    calls = []

    def interrupt(_):
        calls.append(1)
        if len(calls) == 2:
            raise KeyboardInterrupt

    ticker = SleepTicker(sleep=interrupt)
    timer = SessionTimer(ticker, today=lambda: TODAY)
    timer.start(1)
    ticker.run()

    assert timer.elapsed_seconds == 1
    assert not ticker.active
    assert timer.stop()["seconds"] == 1
