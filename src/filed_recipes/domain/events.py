"""Change notification for the recipe collection.

A ``RecipesChangedEvent`` is a small registry of callbacks. Handlers receive
the object that raised the event (the repository) and are called
synchronously, in subscription order.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

RecipesChangedHandler = Callable[[Any], None]


class RecipesChangedEvent:
    """Occurs after changes to the underlying collection of recipes."""

    def __init__(self) -> None:
        self._handlers: list[RecipesChangedHandler] = []

    def subscribe(self, handler: RecipesChangedHandler) -> RecipesChangedHandler:
        """Register *handler* and return it, so this can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: RecipesChangedHandler) -> None:
        """Remove *handler*; unknown handlers are ignored."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def emit(self, sender: Any) -> None:
        """Call every handler registered at the time of the call."""
        # Snapshot so a handler may unsubscribe itself while being called.
        handlers = list(self._handlers)
        logger.debug("Notifying %d recipe change handler(s)", len(handlers))
        for handler in handlers:
            handler(sender)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers
