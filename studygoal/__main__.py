"""Allow running StudyGoal as a module: python -m studygoal.

Headless console session on a Qt event loop::

    python -m studygoal goal --minutes 90 --focus
    python -m studygoal sequence Math:25 History:30
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from PyQt6.QtCore import QCoreApplication

from .errors import StudyGoalError
from .settings import Settings, load_settings
from .timer import (
    GoalTimer, GoalSnapshot, SequenceTimer, SequenceSnapshot, SequencePhase,
    format_seconds, progress_text, suggestion_text,
)
from .validation import parse_subject_spec


logger = logging.getLogger("studygoal")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studygoal")
    parser.add_argument(
        "--interval-ms", type=int, default=None,
        help="tick interval override (default from settings, 1000)",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    goal = sub.add_parser("goal", help="count study time against a daily goal")
    goal.add_argument("--minutes", type=int, default=None, help="goal in minutes")
    goal.add_argument("--focus", action="store_true", help="start in focus")

    seq = sub.add_parser("sequence", help="count down subjects one after another")
    seq.add_argument("subjects", nargs="+", metavar="NAME:MINUTES")
    return parser


# ── renderers ─────────────────────────────────────────────────────────────


def _render_goal(snap: GoalSnapshot) -> None:
    state = "focus" if snap.focused else "study"
    print(
        f"\r[{state}] total {format_seconds(snap.total_seconds)}  "
        f"{progress_text(snap.focused_seconds, snap.goal_seconds)}  "
        f"{suggestion_text(snap.focused_seconds, snap.goal_seconds)}   ",
        end="", flush=True,
    )


def _render_sequence(snap: SequenceSnapshot) -> None:
    subject = snap.current_subject
    if snap.phase is SequencePhase.PREPARING:
        line = f"get ready… {snap.preparation_remaining}s"
    elif subject is not None:
        line = f"{subject.name}: {format_seconds(snap.remaining_seconds)}"
    else:
        line = "all subjects done"
    position = min(snap.current_index + 1, len(snap.subjects))
    print(
        f"\r[{position}/{len(snap.subjects)}] {line}      ",
        end="", flush=True,
    )


# ── sessions ──────────────────────────────────────────────────────────────


def _run_goal(app: QCoreApplication, args, settings: Settings, interval_ms: int) -> None:
    minutes = args.minutes if args.minutes is not None else settings.goal_minutes
    timer = GoalTimer(app, goal_minutes=minutes, interval_ms=interval_ms)
    timer.changed.connect(_render_goal)
    timer.goal_reached.connect(app.quit)
    if args.focus:
        timer.toggle_focus()
    timer.start()
    app.aboutToQuit.connect(timer.close)


def _run_sequence(app: QCoreApplication, args, settings: Settings, interval_ms: int) -> None:
    timer = SequenceTimer(
        app,
        preparation_seconds=settings.preparation_seconds,
        interval_ms=interval_ms,
    )
    for spec in args.subjects:
        name, minutes = parse_subject_spec(spec)
        timer.add_subject(name, minutes)

    def on_alert(subject) -> None:
        # Single consumer: act on the alert, then clear it.
        if timer.consume_alert():
            print(f"\n\a{subject.name} finished")

    timer.changed.connect(_render_sequence)
    timer.alert.connect(on_alert)
    timer.exhausted.connect(app.quit)
    timer.start()
    app.aboutToQuit.connect(timer.close)


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    interval_ms = args.interval_ms or settings.tick_interval_ms

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("StudyGoal")
    app.setOrganizationName("StudyGoal")
    # Qt's loop does not return to Python for SIGINT; use the default handler.
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    try:
        if args.mode == "goal":
            _run_goal(app, args, settings, interval_ms)
        else:
            _run_sequence(app, args, settings, interval_ms)
    except StudyGoalError as exc:
        logger.error("%s", exc)
        sys.exit(2)

    code = app.exec()
    print()
    sys.exit(code)


if __name__ == "__main__":
    main()
