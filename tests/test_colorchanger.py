import random
import threading
import time
from types import SimpleNamespace

from daylab.colorchanger import ColorChanger
from daylab.colormaker import Color


def _channels(color):
    return (color.red, color.green, color.blue)


def test_tick_sets_target_color():
    target = SimpleNamespace(color=None)
    changer = ColorChanger(target, interval=3600, rng=random.Random(3))
    changer.stop()
    color = changer.tick()
    assert target.color == color
    assert all(0 <= value <= 255 for value in _channels(color))


def test_random_color_deterministic_for_seed():
    first = ColorChanger(SimpleNamespace(), interval=3600, rng=random.Random(9))
    second = ColorChanger(SimpleNamespace(), interval=3600, rng=random.Random(9))
    first.stop()
    second.stop()
    assert [first.random_color() for _ in range(3)] == [second.random_color() for _ in range(3)]


def test_timer_starts_on_creation():
    class Target:
        def __init__(self):
            self.changed = threading.Event()
            self._color = None

        @property
        def color(self):
            return self._color

        @color.setter
        def color(self, value):
            self._color = value
            self.changed.set()

    target = Target()
    changer = ColorChanger(target, interval=0.01)
    try:
        assert target.changed.wait(5)
    finally:
        changer.stop()
    assert isinstance(target.color, Color)


def test_stop_halts_updates():
    target = SimpleNamespace(color=None)
    changer = ColorChanger(target, interval=0.01)
    deadline = time.monotonic() + 5
    while target.color is None and time.monotonic() < deadline:
        time.sleep(0.01)
    changer.stop()
    snapshot = target.color
    time.sleep(0.1)
    assert target.color == snapshot
    assert snapshot is not None