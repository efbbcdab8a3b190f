"""Timer package."""

from .ticker import Ticker, Countdown, TICK_INTERVAL_MS
from .goal import GoalTimer, GoalSnapshot, DEFAULT_GOAL_MINUTES
from .sequence import (
    SequenceTimer,
    SequenceSnapshot,
    SequencePhase,
    Subject,
    PREPARATION_SECONDS,
)
from .formatting import format_seconds, progress_text, suggestion_text

__all__ = [
    "Ticker",
    "Countdown",
    "TICK_INTERVAL_MS",
    "GoalTimer",
    "GoalSnapshot",
    "DEFAULT_GOAL_MINUTES",
    "SequenceTimer",
    "SequenceSnapshot",
    "SequencePhase",
    "Subject",
    "PREPARATION_SECONDS",
    "format_seconds",
    "progress_text",
    "suggestion_text",
]
