"""Multi-subject study sequence.

States
------
IDLE        Not counting, not preparing.  Index may point anywhere.
COUNTING    Current subject counting down.
PREPARING   Fixed interstitial between subjects; index not yet advanced.
EXHAUSTED   Index past the last subject.  Terminal until ``reset()``.

Transitions
-----------
IDLE → COUNTING                     (start)
COUNTING → IDLE                     (pause: remaining kept / stop: discarded)
COUNTING → PREPARING                (countdown reaches 0, or next_subject)
IDLE → PREPARING                    (next_subject)
PREPARING → COUNTING                (interstitial done, next subject exists)
PREPARING → EXHAUSTED               (interstitial done, list finished)
PREPARING → IDLE                    (pause: parks on the next subject /
                                     stop: cancels the interstitial)
Any → IDLE at index 0               (reset)

Expiry is handled on the same pulse that brings the countdown to zero,
and raises ``alert_pending``.  The flag is level-triggered: it stays set
until a consumer clears it, and a second expiry before that is not
queued separately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .ticker import Countdown, TICK_INTERVAL_MS


logger = logging.getLogger(__name__)

PREPARATION_SECONDS = 10


class SequencePhase(Enum):
    IDLE = "idle"
    COUNTING = "counting"
    PREPARING = "preparing"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Subject:
    name: str
    duration_seconds: int


@dataclass(frozen=True)
class SequenceSnapshot:
    """Read-only view of a ``SequenceTimer`` at one instant."""

    subjects: tuple[Subject, ...]
    current_index: int
    remaining_seconds: int
    running: bool
    preparing: bool
    alert_pending: bool
    preparation_remaining: int

    @property
    def phase(self) -> SequencePhase:
        if self.preparing:
            return SequencePhase.PREPARING
        if self.running:
            return SequencePhase.COUNTING
        if self.subjects and self.current_index >= len(self.subjects):
            return SequencePhase.EXHAUSTED
        return SequencePhase.IDLE

    @property
    def current_subject(self) -> Subject | None:
        if 0 <= self.current_index < len(self.subjects):
            return self.subjects[self.current_index]
        return None


class SequenceTimer(QObject):
    """Counts down an ordered list of subjects with a pause between each.

    Signals
    -------
    changed(snapshot: SequenceSnapshot)
        Emitted after every command that alters state and after every
        pulse of either countdown.
    alert(subject: Subject)
        Emitted when a subject's countdown reaches zero, alongside
        ``alert_pending`` being raised.
    subject_started(index: int, subject: Subject)
        Emitted when a subject begins counting from its full duration.
    preparation_started(seconds: int)
        Emitted on entering the interstitial.
    exhausted()
        Emitted when the interstitial after the last subject finishes.
    """

    changed = pyqtSignal(object)
    alert = pyqtSignal(object)
    subject_started = pyqtSignal(int, object)
    preparation_started = pyqtSignal(int)
    exhausted = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        preparation_seconds: int = PREPARATION_SECONDS,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        self._subjects: list[Subject] = []
        self._index: int = 0
        self._running: bool = False
        self._preparing: bool = False
        self._alert_pending: bool = False
        self._fresh: bool = False  # countdown loaded from full duration
        self._preparation_seconds: int = max(0, preparation_seconds)

        # Never both running: _advance() stops the countdown before the
        # preparation starts, and _on_prepared() runs after it stopped.
        self._countdown = Countdown(
            self, on_complete=self._on_expired, interval_ms=interval_ms,
        )
        self._countdown.tick.connect(self._emit_changed)
        self._preparation = Countdown(
            self, on_complete=self._on_prepared, interval_ms=interval_ms,
        )
        self._preparation.tick.connect(self._emit_changed)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return tuple(self._subjects)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_subject(self) -> Subject | None:
        if 0 <= self._index < len(self._subjects):
            return self._subjects[self._index]
        return None

    @property
    def remaining_seconds(self) -> int:
        return self._countdown.remaining

    @property
    def preparation_remaining(self) -> int:
        return self._preparation.remaining if self._preparing else 0

    @property
    def preparation_seconds(self) -> int:
        return self._preparation_seconds

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_preparing(self) -> bool:
        return self._preparing

    @property
    def alert_pending(self) -> bool:
        return self._alert_pending

    @property
    def is_exhausted(self) -> bool:
        return bool(self._subjects) and self._index >= len(self._subjects)

    @property
    def phase(self) -> SequencePhase:
        return self.snapshot().phase

    def snapshot(self) -> SequenceSnapshot:
        return SequenceSnapshot(
            subjects=tuple(self._subjects),
            current_index=self._index,
            remaining_seconds=self._countdown.remaining,
            running=self._running,
            preparing=self._preparing,
            alert_pending=self._alert_pending,
            preparation_remaining=self.preparation_remaining,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def add_subject(self, name: str, minutes: int) -> Subject:
        """Append a subject.  Input is expected to be validated already.

        A zero-length subject is accepted and expires on its first pulse.
        """
        subject = Subject(name=name, duration_seconds=max(0, minutes * 60))
        self._subjects.append(subject)
        logger.info(
            "Added subject %r (%d s) at position %d",
            subject.name, subject.duration_seconds, len(self._subjects) - 1,
        )
        self._emit_changed()
        return subject

    def start(self) -> None:
        """Count down the current subject.

        No-op while running or preparing, with no subjects, or once the
        list is exhausted.
        """
        if self._running or self._preparing:
            return
        subject = self.current_subject
        if subject is None:
            return

        self._running = True
        if self._countdown.remaining == 0:
            self._countdown.remaining = subject.duration_seconds
            self._fresh = True
        self._countdown.start()
        logger.info(
            "Counting %r from %d s", subject.name, self._countdown.remaining,
        )
        if self._fresh:
            self._fresh = False
            self.subject_started.emit(self._index, subject)
        self._emit_changed()

    def pause(self) -> None:
        """Stop counting; ``start()`` resumes from the same second.

        During the interstitial, pausing finishes it early: the index
        advances and the next subject is loaded but not started.  The
        interstitial itself cannot be held, since ``start()`` is a no-op
        while preparing and a held interstitial could never resume.
        """
        if self._preparing:
            self._preparation.clear()
            self._finish_preparation(auto_start=False)
            return
        if not self._running:
            return
        self._running = False
        self._countdown.stop()
        logger.info("Sequence paused with %d s left", self._countdown.remaining)
        self._emit_changed()

    def stop(self) -> None:
        """Stop and discard the countdown.  The next start is from full."""
        if self._preparing:
            self._preparation.clear()
            self._preparing = False
        self._running = False
        self._countdown.clear()
        logger.info("Sequence stopped at index %d", self._index)
        self._emit_changed()

    def next_subject(self) -> None:
        """Skip ahead through the same interstitial an expiry goes through."""
        if self._preparing or self.current_subject is None:
            return
        logger.info("Skipping subject %r", self.current_subject.name)
        self._advance()

    def reset(self) -> None:
        """Back to the first subject, idle.  The subject list is kept."""
        self.stop()
        self._index = 0
        self._alert_pending = False
        self._emit_changed()

    def clear_alert(self) -> None:
        if not self._alert_pending:
            return
        self._alert_pending = False
        self._emit_changed()

    def consume_alert(self) -> bool:
        """Return whether an alert was pending, clearing it."""
        pending = self._alert_pending
        self.clear_alert()
        return pending

    def close(self) -> None:
        """Cancel both countdowns before the engine is discarded."""
        self._countdown.stop()
        self._preparation.stop()
        self._running = False
        self._preparing = False

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — transitions
    # ══════════════════════════════════════════════════════════════════

    def _on_expired(self) -> None:
        subject = self.current_subject
        self._alert_pending = True
        logger.info("Subject %r finished", subject.name if subject else None)
        if subject is not None:
            self.alert.emit(subject)
        self._advance()

    def _advance(self) -> None:
        self._running = False
        self._countdown.clear()
        self._preparing = True
        self._preparation.start(self._preparation_seconds)
        self.preparation_started.emit(self._preparation_seconds)
        self._emit_changed()

    def _on_prepared(self) -> None:
        self._finish_preparation(auto_start=True)

    def _finish_preparation(self, *, auto_start: bool) -> None:
        self._preparing = False
        self._index += 1
        subject = self.current_subject
        if subject is None:
            logger.info("Sequence exhausted after %d subjects", self._index)
            self._emit_changed()
            self.exhausted.emit()
            return

        self._countdown.remaining = subject.duration_seconds
        self._fresh = True
        if auto_start:
            self.start()
        else:
            self._emit_changed()

    def _emit_changed(self, *_args) -> None:
        self.changed.emit(self.snapshot())
