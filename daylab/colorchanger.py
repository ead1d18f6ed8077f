"""Periodically assigns a random colour to a target object."""

from __future__ import annotations

import random
import threading

from .colormaker import Color


class ColorChanger:
    """Sets ``target.color`` to a random colour every *interval* seconds.

    The timer starts as soon as the changer is created.
    """

    def __init__(
        self,
        target: object,
        interval: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        self._target = target
        self._interval = interval
        self._rng = rng if rng is not None else random.Random()
        self._thread: threading.Thread | None = None
        self._stop_event: threading.Event | None = None
        self.start()

    def random_color(self) -> Color:
        """Return a colour with three random channels."""
        return Color(
            self._rng.randint(0, 255),
            self._rng.randint(0, 255),
            self._rng.randint(0, 255),
        )

    def tick(self) -> Color:
        """Assign a new random colour to the target and return it."""
        color = self.random_color()
        setattr(self._target, "color", color)
        return color

    def start(self) -> None:
        """Start the timer; does nothing if it is already running."""
        if self._thread is not None:
            return
        stop_event = threading.Event()
        thread = threading.Thread(target=self._loop, args=(stop_event,), daemon=True)
        self._stop_event = stop_event
        self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Stop the timer; does nothing if it is not running."""
        thread, stop_event = self._thread, self._stop_event
        if thread is None or stop_event is None:
            return
        stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        self._stop_event = None

    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            self.tick()