"""Exceptions raised by StudyGoal.

Engine commands never raise: invalid preconditions (already running,
empty list, exhausted sequence) are silent no-ops.  These errors come
only from the input-validation layer that sits in front of the engines.
"""


class StudyGoalError(Exception):
    """Base class for all StudyGoal errors."""


class InvalidGoalError(StudyGoalError, ValueError):
    """Goal input is not a whole number of minutes."""


class InvalidSubjectError(StudyGoalError, ValueError):
    """Subject input has a blank name or a non-positive duration."""
