"""A colour source that changes its colour on a timer using a chosen algorithm."""

from __future__ import annotations

import datetime
import random
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import IntEnum

TIME_FORMAT = "%Y-%m-%d %H:%M::%S"


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with channels in the range 0..255."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")


class GenerateAlgorithm(IntEnum):
    """How the next colour is produced on each tick."""

    RANDOM_RGB = 0
    RANDOM_RED = 1
    RANDOM_GREEN = 2
    RANDOM_BLUE = 3
    LINEAR_INCREASE = 4


def time_color(now: datetime.time | datetime.datetime | None = None) -> Color:
    """Return a colour derived from a time of day (the current one by default)."""
    if now is None:
        now = datetime.datetime.now()
    return Color(now.hour, now.minute * 2, now.second * 4)


class ColorMaker:
    """Holds a colour and regenerates it every *interval* seconds once started.

    *on_color_changed* receives the new colour and *on_current_time* a
    timestamp string each time the colour is regenerated.
    """

    def __init__(
        self,
        on_color_changed: Callable[[Color], None] | None = None,
        on_current_time: Callable[[str], None] | None = None,
        interval: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        self._on_color_changed = on_color_changed
        self._on_current_time = on_current_time
        self._interval = interval
        self._rng = rng if rng is not None else random.Random()
        self._algorithm = GenerateAlgorithm.RANDOM_RGB
        self._color = Color()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stop_event: threading.Event | None = None

    @property
    def color(self) -> Color:
        """The current colour."""
        return self._color

    def set_color(self, color: Color) -> None:
        """Replace the current colour and report the change."""
        with self._lock:
            self._color = color
        self._emit_color(color)

    @property
    def time_color(self) -> Color:
        """A colour derived from the current time of day."""
        return time_color()

    @property
    def algorithm(self) -> GenerateAlgorithm:
        """The algorithm used to produce the next colour."""
        return self._algorithm

    def set_algorithm(self, algorithm: GenerateAlgorithm | int) -> None:
        """Choose the algorithm used from the next tick on."""
        self._algorithm = GenerateAlgorithm(algorithm)

    def _random_channel(self) -> int:
        return self._rng.randint(0, 255)

    def step(self) -> Color:
        """Produce the next colour, report it with a timestamp and return it."""
        with self._lock:
            current = self._color
            algorithm = self._algorithm
            if algorithm is GenerateAlgorithm.RANDOM_RGB:
                current = Color(
                    self._random_channel(),
                    self._random_channel(),
                    self._random_channel(),
                )
            elif algorithm is GenerateAlgorithm.RANDOM_RED:
                current = replace(current, red=self._random_channel())
            elif algorithm is GenerateAlgorithm.RANDOM_GREEN:
                current = replace(current, green=self._random_channel())
            elif algorithm is GenerateAlgorithm.RANDOM_BLUE:
                current = replace(current, blue=self._random_channel())
            elif algorithm is GenerateAlgorithm.LINEAR_INCREASE:
                current = Color(
                    (current.red + 10) % 255,
                    (current.green + 10) % 255,
                    (current.blue + 10) % 255,
                )
            self._color = current
        self._emit_color(current)
        if self._on_current_time is not None:
            self._on_current_time(datetime.datetime.now().strftime(TIME_FORMAT))
        return current

    def start(self) -> None:
        """Start regenerating the colour periodically; does nothing if running."""
        if self._thread is not None:
            return
        stop_event = threading.Event()
        thread = threading.Thread(target=self._loop, args=(stop_event,), daemon=True)
        self._stop_event = stop_event
        self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Stop the periodic regeneration; does nothing if not running."""
        thread, stop_event = self._thread, self._stop_event
        if thread is None or stop_event is None:
            return
        stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        self._stop_event = None

    @property
    def running(self) -> bool:
        """Whether the periodic regeneration is active."""
        return self._thread is not None

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self.step()

    def _emit_color(self, color: Color) -> None:
        if self._on_color_changed is not None:
            self._on_color_changed(color)