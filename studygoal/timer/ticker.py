"""Pulse sources shared by every StudyGoal engine.

``Ticker`` wraps a single ``QTimer`` and delivers one pulse per interval
to an optional handler.  ``Countdown`` builds on it: decrement once per
pulse, then report completion.  The subject countdown and the
preparation interstitial of ``SequenceTimer`` are both ``Countdown``
instances, so they share one decrement-to-zero rule.

Pulses are delivered by the Qt event loop of the owning thread, so two
handlers never run at the same time against the same engine.
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


# ── ticker ────────────────────────────────────────────────────────────────


class Ticker(QObject):
    """One cancellable repeating pulse stream.

    Signals
    -------
    pulse()
        Emitted once per interval while active, before the handler runs.
    """

    pulse = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._active: bool = False
        self._handler: Callable[[], None] | None = None

        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    def start(
        self,
        interval_ms: int | None = None,
        on_tick: Callable[[], None] | None = None,
    ) -> None:
        """Begin pulsing.  Any stream already running is stopped first."""
        self.stop()
        if interval_ms is not None:
            self._qt_timer.setInterval(interval_ms)
        self._handler = on_tick
        self._active = True
        self._qt_timer.start()
        logger.debug("Ticker started (%d ms)", self._qt_timer.interval())

    def stop(self) -> None:
        """Halt delivery.  Safe to call when not running."""
        if not self._active:
            return
        self._active = False
        self._handler = None
        self._qt_timer.stop()
        logger.debug("Ticker stopped")

    def _on_timeout(self) -> None:
        # A timeout already queued when stop() ran must not leak through.
        if not self._active:
            return
        handler = self._handler
        self.pulse.emit()
        if handler is not None:
            handler()


# ── countdown ─────────────────────────────────────────────────────────────


class Countdown(QObject):
    """Count whole seconds down to zero, then finish.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted after every decrement.
    finished()
        Emitted on the pulse where ``remaining`` reaches zero.  A countdown
        started at zero finishes on its first pulse.
    """

    tick = pyqtSignal(int)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        seconds: int = 0,
        on_complete: Callable[[], None] | None = None,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._remaining: int = max(0, seconds)
        self._ticker = Ticker(self, interval_ms=interval_ms)
        if on_complete is not None:
            self.finished.connect(on_complete)

    @property
    def remaining(self) -> int:
        return self._remaining

    @remaining.setter
    def remaining(self, seconds: int) -> None:
        self._remaining = max(0, seconds)

    @property
    def is_running(self) -> bool:
        return self._ticker.is_active

    def start(self, seconds: int | None = None) -> None:
        if seconds is not None:
            self.remaining = seconds
        self._ticker.start(on_tick=self._on_tick)

    def stop(self) -> None:
        """Stop ticking; ``remaining`` is kept so the countdown can resume."""
        self._ticker.stop()

    def clear(self) -> None:
        self._ticker.stop()
        self._remaining = 0

    def _on_tick(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1
            self.tick.emit(self._remaining)
        if self._remaining <= 0:
            self._ticker.stop()
            self.finished.emit()
