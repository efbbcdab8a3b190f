"""StudyGoal — study-time tracking engines."""

__version__ = "0.1.0"
