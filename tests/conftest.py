"""Shared pytest fixtures for StudyGoal tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from studygoal.timer.goal import GoalTimer
from studygoal.timer.sequence import SequenceTimer


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture
def goal_timer(qapp):
    """Fresh GoalTimer with a 10-minute goal."""
    timer = GoalTimer(parent=None, goal_minutes=10)
    yield timer
    timer.close()


@pytest.fixture
def sequence(qapp):
    """Fresh SequenceTimer with the default 10 s preparation."""
    timer = SequenceTimer(parent=None)
    yield timer
    timer.close()


@pytest.fixture
def two_subjects(sequence):
    """Sequence holding A (1 min) then B (1 min)."""
    sequence.add_subject("A", 1)
    sequence.add_subject("B", 1)
    return sequence
