"""
Directional input for question navigation.

A KeySource is an explicit subscription point: the exam session subscribes
while it is active and unsubscribes when it is deactivated, so several
sessions can share one source without duplicate or leaked handlers.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from loguru import logger


class Key(str, Enum):
    """Navigation keys."""
    LEFT = "left"
    RIGHT = "right"


KeyHandler = Callable[[Key], None]

# Terminal tokens accepted for each key, including raw ANSI arrow sequences
KEY_ALIASES: dict[str, Key] = {
    "left": Key.LEFT,
    "arrowleft": Key.LEFT,
    "<": Key.LEFT,
    "h": Key.LEFT,
    "\x1b[d": Key.LEFT,
    "right": Key.RIGHT,
    "arrowright": Key.RIGHT,
    ">": Key.RIGHT,
    "l": Key.RIGHT,
    "\x1b[c": Key.RIGHT,
}


def parse_key(text: str | None) -> Key | None:
    """Map a terminal input token to a navigation key, or None."""
    if text is None:
        return None
    return KEY_ALIASES.get(text.strip().lower())


class KeySource:
    """Fan-out of navigation keys to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: list[KeyHandler] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: KeyHandler) -> None:
        """Add a handler. Subscribing the same handler twice is a no-op."""
        if handler in self._handlers:
            return
        self._handlers.append(handler)

    def unsubscribe(self, handler: KeyHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def dispatch(self, key: Key) -> None:
        """Deliver a key to every current subscriber."""
        # Copy: a handler may unsubscribe while being called
        for handler in list(self._handlers):
            handler(key)

    def feed(self, text: str) -> bool:
        """
        Parse a terminal token and dispatch it.

        Returns True if the token was a navigation key.
        """
        key = parse_key(text)
        if key is None:
            return False
        logger.debug(f"Navigation key: {key.value}")
        self.dispatch(key)
        return True
