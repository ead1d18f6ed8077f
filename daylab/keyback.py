"""An event filter that quits the application when the Back key is released."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum


class EventType(IntEnum):
    """Kinds of events seen by the filter."""

    NONE = 0
    KEY_PRESS = 6
    KEY_RELEASE = 7
    FOCUS_IN = 8
    FOCUS_OUT = 9


class Key(IntEnum):
    """Key codes."""

    ESCAPE = 0x01000000
    RETURN = 0x01000004
    BACK = 0x01000061


@dataclass
class KeyEvent:
    """An input event with a key code and an accepted flag."""

    type: EventType
    key: int = 0
    accepted: bool = False

    def accept(self) -> None:
        """Mark the event as handled."""
        self.accepted = True


class KeyBackQuit:
    """Consumes Back key events and calls *quit* when Back is released."""

    def __init__(self, quit: Callable[[], None]) -> None:
        self._quit = quit

    def event_filter(self, event: KeyEvent) -> bool:
        """Return True if *event* was consumed, False to let it pass on."""
        if event.key != Key.BACK:
            return False
        if event.type == EventType.KEY_PRESS:
            event.accept()
            return True
        if event.type == EventType.KEY_RELEASE:
            event.accept()
            self._quit()
            return True
        return False