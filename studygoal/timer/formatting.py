"""Text helpers for rendering engine state."""

from __future__ import annotations


def format_seconds(seconds: int) -> str:
    """``"01h 02m 03s"`` with hours present, else ``"02m 03s"``."""
    seconds = max(0, seconds)
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    if h > 0:
        return f"{h:02d}h {m:02d}m {s:02d}s"
    return f"{m:02d}m {s:02d}s"


def progress_ratio(focused_seconds: int, goal_seconds: int) -> float:
    if goal_seconds <= 0:
        return 0.0
    return max(0.0, min(1.0, focused_seconds / goal_seconds))


def progress_text(focused_seconds: int, goal_seconds: int) -> str:
    percent = int(progress_ratio(focused_seconds, goal_seconds) * 100)
    return (
        f"Progress: {percent}%  "
        f"({format_seconds(focused_seconds)} / {format_seconds(goal_seconds)})"
    )


def suggestion_text(focused_seconds: int, goal_seconds: int) -> str:
    remaining = max(0, goal_seconds - focused_seconds)
    if remaining <= 0:
        return "Goal reached"
    return f"Focus time remaining: {format_seconds(remaining)}"
