import os

import pytest

from tictactoe_solo.session import GameSession


class ManualHandle:
    def __init__(self, delay_ms, callback):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self):
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Records call_later requests; tests fire them by hand."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay_ms, callback):
        handle = ManualHandle(delay_ms, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if h.active]

    def fire(self, handle):
        handle.fired = True
        handle.callback()

    def run_pending(self):
        ran = 0
        for handle in self.pending:
            self.fire(handle)
            ran += 1
        return ran


class FirstChoice:
    """Deterministic stand-in for random.Random: always the first option."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def session(scheduler):
    return GameSession(scheduler, rng=FirstChoice())


@pytest.fixture
def events(session):
    seen = []
    session.add_listener(seen.append)
    return seen


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def spin(qapp):
    """Run the Qt event loop for `ms` milliseconds."""
    from PySide6.QtCore import QEventLoop, QTimer

    def _spin(ms):
        loop = QEventLoop()
        QTimer.singleShot(ms, loop.quit)
        loop.exec()
    return _spin
