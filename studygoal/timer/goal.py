"""Daily-goal stopwatch.

The engine accumulates study time in whole seconds.  Every tick adds to
``total_seconds``; ticks that land while *focus* is on also add to
``focused_seconds``.  Progress is always measured on focused time
against the configured goal.

States
------
PAUSED   Ticker stopped, counters frozen (initial state).
RUNNING  Ticker active, one second accrued per pulse.

The focus flag is independent of the running state and is read on each
tick, never latched at start.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal

from .formatting import progress_ratio
from .ticker import Ticker, TICK_INTERVAL_MS


logger = logging.getLogger(__name__)

DEFAULT_GOAL_MINUTES = 2 * 60


@dataclass(frozen=True)
class GoalSnapshot:
    """Read-only view of a ``GoalTimer`` at one instant."""

    running: bool
    focused: bool
    total_seconds: int
    focused_seconds: int
    goal_seconds: int

    @property
    def progress(self) -> float:
        """0.0 → 1.0 focused time against the goal (0.0 without a goal)."""
        return progress_ratio(self.focused_seconds, self.goal_seconds)

    @property
    def percent(self) -> int:
        return int(self.progress * 100)

    @property
    def remaining_seconds(self) -> int:
        return max(0, self.goal_seconds - self.focused_seconds)

    @property
    def goal_reached(self) -> bool:
        return self.goal_seconds > 0 and self.remaining_seconds == 0


class GoalTimer(QObject):
    """Stopwatch with a focused sub-counter and a target goal.

    Signals
    -------
    changed(snapshot: GoalSnapshot)
        Emitted after every command that alters state and after every tick.
    goal_reached()
        Emitted once when focused time first meets the goal.  Fires again
        only after the goal is raised or the counters are reset.
    """

    changed = pyqtSignal(object)
    goal_reached = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        goal_minutes: int = DEFAULT_GOAL_MINUTES,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        self._running: bool = False
        self._focused: bool = False
        self._total_seconds: int = 0
        self._focused_seconds: int = 0
        self._goal_seconds: int = max(0, goal_minutes * 60)
        self._goal_announced: bool = False

        self._ticker = Ticker(self, interval_ms=interval_ms)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_focused(self) -> bool:
        return self._focused

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def focused_seconds(self) -> int:
        return self._focused_seconds

    @property
    def goal_seconds(self) -> int:
        return self._goal_seconds

    @property
    def progress(self) -> float:
        return self.snapshot().progress

    @property
    def remaining_seconds(self) -> int:
        """Focused seconds still needed to meet the goal."""
        return self.snapshot().remaining_seconds

    @property
    def is_goal_reached(self) -> bool:
        return self.snapshot().goal_reached

    def snapshot(self) -> GoalSnapshot:
        return GoalSnapshot(
            running=self._running,
            focused=self._focused,
            total_seconds=self._total_seconds,
            focused_seconds=self._focused_seconds,
            goal_seconds=self._goal_seconds,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def set_goal_minutes(self, minutes: int) -> None:
        """Set the goal.  Negative values clamp to zero; allowed mid-run."""
        self._goal_seconds = max(0, minutes * 60)
        logger.info("Goal set to %d s", self._goal_seconds)
        self._emit_changed()
        self._check_goal()

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._ticker.start(on_tick=self._on_tick)
        logger.info("Goal timer started")
        self._emit_changed()

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        self._ticker.stop()
        logger.info(
            "Goal timer paused at %d s (%d s focused)",
            self._total_seconds, self._focused_seconds,
        )
        self._emit_changed()

    def toggle_running(self) -> None:
        if self._running:
            self.pause()
        else:
            self.start()

    def toggle_focus(self) -> None:
        """Flip focus.  Counters are untouched until the next tick."""
        self._focused = not self._focused
        self._emit_changed()

    def reset(self) -> None:
        """Pause and clear both counters.  The goal is kept."""
        self.pause()
        self._focused = False
        self._total_seconds = 0
        self._focused_seconds = 0
        logger.info("Goal timer reset")
        self._emit_changed()
        self._check_goal()

    def close(self) -> None:
        """Stop the ticker for good before the engine is discarded."""
        self._running = False
        self._ticker.stop()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if not self._running:
            return
        self._total_seconds += 1
        if self._focused:
            self._focused_seconds += 1
        self._emit_changed()
        self._check_goal()

    def _check_goal(self) -> None:
        """Announce the goal once per crossing; re-arm when it is unmet."""
        if not self.is_goal_reached:
            self._goal_announced = False
            return
        if self._goal_announced:
            return
        self._goal_announced = True
        logger.info("Goal of %d s reached", self._goal_seconds)
        self.goal_reached.emit()

    def _emit_changed(self) -> None:
        self.changed.emit(self.snapshot())
