"""Input checks applied before commands reach an engine.

The engines clamp rather than reject, so anything a user types goes
through here first.
"""

from __future__ import annotations

from .errors import InvalidGoalError, InvalidSubjectError


def parse_goal_minutes(text: str) -> int:
    """Parse a goal entry field.  Empty input means no goal (0)."""
    text = text.strip()
    if not text:
        return 0
    if not text.isdecimal():
        raise InvalidGoalError(f"Goal must be a whole number of minutes: {text!r}")
    return int(text)


def validate_subject(name: str, minutes: int | str) -> tuple[str, int]:
    """Return a cleaned ``(name, minutes)`` pair for ``add_subject``."""
    name = name.strip()
    if not name:
        raise InvalidSubjectError("Subject name must not be blank")

    if isinstance(minutes, str):
        try:
            minutes = int(minutes.strip())
        except ValueError:
            raise InvalidSubjectError(
                f"Minutes for {name!r} must be a number: {minutes!r}"
            ) from None
    if minutes <= 0:
        raise InvalidSubjectError(f"Minutes for {name!r} must be positive")
    return name, minutes


def parse_subject_spec(spec: str) -> tuple[str, int]:
    """Parse ``"NAME:MINUTES"`` as used on the command line."""
    name, sep, minutes = spec.rpartition(":")
    if not sep:
        raise InvalidSubjectError(f"Expected NAME:MINUTES, got {spec!r}")
    return validate_subject(name, minutes)
