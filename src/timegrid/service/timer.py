# SPDX-License-Identifier: MIT

import logging
import time
from typing import Callable, Optional, Protocol

import pendulum

from timegrid.errors import ValidationError
from timegrid.model.entity_id import EntityId
from timegrid.model.timer import TimerSession, TimerState
from timegrid.time import today_local

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]
SessionSink = Callable[[TimerSession], None]


class Ticker(Protocol):
    """A source of one-second ticks that can be started and cancelled."""

    def start(self, callback: TickCallback) -> None: ...

    def cancel(self) -> None: ...


class ManualTicker:
    """Ticker driven by explicit advance() calls instead of the wall clock."""

    def __init__(self) -> None:
        self._callback: Optional[TickCallback] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def advance(self, seconds: int = 1) -> None:
        for _ in range(seconds):
            # A tick may cancel the ticker, so look the callback up each time
            if self._callback is None:
                return
            self._callback()


class SleepTicker:
    """
    Ticker that sleeps on the calling thread between ticks.

    start() only arms the ticker; run() blocks and delivers ticks until the
    ticker is cancelled. KeyboardInterrupt ends run() and cancels the ticker.
    """

    def __init__(
        self,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[TickCallback] = None,
    ) -> None:
        self._interval = interval
        self._sleep = sleep
        self._on_tick = on_tick
        self._callback: Optional[TickCallback] = None

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def cancel(self) -> None:
        self._callback = None

    def run(self) -> None:
        try:
            while self._callback is not None:
                self._sleep(self._interval)
                callback = self._callback
                if callback is None:
                    break
                callback()
                if self._on_tick is not None:
                    self._on_tick()
        except KeyboardInterrupt:
            self.cancel()


class SessionTimer:
    """
    Start/pause/stop stopwatch for logging work against one entry.

    Elapsed seconds grow by one per tick while running and are frozen while
    paused. Stopping a non-empty session hands a TimerSession to the sink
    and resets the timer.
    """

    def __init__(
        self,
        ticker: Ticker,
        sink: Optional[SessionSink] = None,
        today: Callable[[], pendulum.Date] = today_local,
    ) -> None:
        self._ticker = ticker
        self._sink = sink
        self._today = today
        self._closed = False
        self.state = TimerState.IDLE
        self.elapsed_seconds = 0
        self.task_id: Optional[EntityId] = None
        self.sessions: list[TimerSession] = []

    def __enter__(self) -> "SessionTimer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_running(self) -> bool:
        return self.state == TimerState.RUNNING

    def select(self, task_id: Optional[EntityId]) -> None:
        if self.state == TimerState.RUNNING:
            raise ValidationError("Cannot change the task while the timer is running")
        self.task_id = task_id

    def start(self, task_id: Optional[EntityId] = None) -> None:
        if self._closed:
            raise ValidationError("Timer has been closed")
        if task_id is not None:
            self.select(task_id)
        if self.task_id is None:
            raise ValidationError("Please select a task to start tracking.")
        if self.state == TimerState.RUNNING:
            return

        self.state = TimerState.RUNNING
        self._ticker.start(self.tick)
        logger.debug("Timer started for task %s", self.task_id)

    def tick(self) -> None:
        if self._closed or self.state != TimerState.RUNNING:
            return
        self.elapsed_seconds += 1

    def pause(self) -> None:
        if self.state != TimerState.RUNNING:
            return
        self._ticker.cancel()
        self.state = TimerState.PAUSED
        logger.debug("Timer paused at %ss", self.elapsed_seconds)

    def stop(self) -> Optional[TimerSession]:
        self._ticker.cancel()

        if self.elapsed_seconds == 0 or self.task_id is None:
            self.state = TimerState.IDLE
            self.elapsed_seconds = 0
            return None

        session: TimerSession = {
            "task_id": self.task_id,
            "date": self._today(),
            "seconds": self.elapsed_seconds,
        }
        self.state = TimerState.IDLE
        self.elapsed_seconds = 0
        self.task_id = None
        self.sessions.append(session)
        logger.debug(
            "Timer stopped for task %s after %ss", session["task_id"], session["seconds"]
        )

        if self._sink is not None:
            self._sink(session)
        return session

    def close(self) -> None:
        self._ticker.cancel()
        self._closed = True
