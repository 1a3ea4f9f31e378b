from PySide6.QtCore import QTimer


class TimerHandle:
    """
    one-shot QTimer wrapper, cancel() is safe to call any number of times
    """
    def __init__(self, timer):
        self._timer = timer
        self._fired = False
        self._cancelled = False

    @property
    def active(self):
        return not (self._fired or self._cancelled)

    def cancel(self):
        if self.active:
            self._cancelled = True
            self._timer.stop()
            self._timer.deleteLater()

    def _mark_fired(self):
        self._fired = True


class QtScheduler:
    """
    runs callbacks later on the qt event loop
    """
    def __init__(self, parent=None):
        self._parent = parent  # owner of the timers, keeps them alive with the window

    def call_later(self, delay_ms, callback):
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = TimerHandle(timer)

        def _fire():
            # stop() races with a queued timeout; cancelled wins
            if not handle.active:
                return
            handle._mark_fired()
            timer.deleteLater()
            callback()

        timer.timeout.connect(_fire)
        timer.start(int(delay_ms))
        return handle
