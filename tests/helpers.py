"""Shared test helpers for StudyGoal."""

from PyQt6.QtCore import QObject

from studygoal.timer.ticker import Ticker


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def active_ticker(engine):
    """The engine's ticker that is currently pulsing, if any."""
    for child in engine.findChildren(QObject):
        if isinstance(child, Ticker) and child.is_active:
            return child
    return None


def advance(engine, ticks: int = 1) -> None:
    """Deliver *ticks* pulses without waiting on the clock.

    Each pulse goes to whichever ticker is active at that moment, so a
    run can cross from a subject countdown into the preparation phase.
    Pulses with nothing active are dropped, as on a stopped engine.
    """
    for _ in range(ticks):
        ticker = active_ticker(engine)
        if ticker is None:
            continue
        ticker._on_timeout()
