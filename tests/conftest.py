import pytest

from plotnav.axis import Axis
from plotnav.backends.headless import HeadlessBackend
from plotnav.core.geometry import Rect


class ManualTimer:
    """Stand-in for a single-shot QTimer that only fires when told to."""

    def __init__(self, delay: float, callback):
        self.delay = delay
        self.callback = callback
        self.running = False
        self.deleted = False

    def start(self):
        self.running = True

    def stop(self):
        self.running = False

    def deleteLater(self):
        self.deleted = True

    def fire(self):
        if self.running:
            self.running = False
            self.callback()


class TimerRecorder:
    def __init__(self):
        self.timers: list[ManualTimer] = []

    def __call__(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def running(self):
        return [t for t in self.timers if t.running]

    def fire_all(self):
        for timer in list(self.timers):
            timer.fire()


@pytest.fixture
def timers():
    return TimerRecorder()


@pytest.fixture
def backend():
    # 100 x 100 px over 10 x 10 data units -> 10 px per unit
    return HeadlessBackend(size=(100.0, 100.0), tick_space=(20.0, 40.0))


@pytest.fixture
def axis(backend, timers):
    return Axis(backend, limits=Rect((0.0, 0.0), (10.0, 10.0)), timer_factory=timers)
