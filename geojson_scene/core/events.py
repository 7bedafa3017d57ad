"""Minimal synchronous event channel.

Listeners are invoked in registration order with the arguments passed to
``raise_event``.  A listener that raises propagates to the caller of
``raise_event``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Event:
    """An ordered list of listeners that can be raised together.

    Example usage::

        changed = Event()
        remove = changed.add_listener(lambda source: print("reloaded", source))
        changed.raise_event(data_source)
        remove()
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[..., Any]] = []

    @property
    def listener_count(self) -> int:
        """Number of listeners currently registered."""
        return len(self._listeners)

    def add_listener(self, listener: Callable[..., Any]) -> Callable[[], None]:
        """Register *listener* and return a zero-argument remover."""
        self._listeners.append(listener)

        def _remove() -> None:
            self.remove_listener(listener)

        return _remove

    def remove_listener(self, listener: Callable[..., Any]) -> bool:
        """Remove *listener*; return ``False`` if it was not registered."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def raise_event(self, *args: Any) -> None:
        """Invoke every listener with *args*."""
        # Copy so listeners may unsubscribe themselves while being called.
        for listener in list(self._listeners):
            listener(*args)
        logger.debug("Raised event to %d listener(s)", len(self._listeners))
