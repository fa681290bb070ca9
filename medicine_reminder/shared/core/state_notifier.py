"""
Observable state holder for the Medicine Reminder app.
Lets the UI layer subscribe to immutable state snapshots published by a single writer.
"""

import logging
from typing import Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar('S')

Listener = Callable[[S], None]
RemoveListener = Callable[[], None]


class StateNotifier(Generic[S]):
    """
    Holds one state snapshot and notifies listeners whenever it is replaced.

    Only the subclass writes ``state``; subscribers receive the snapshot
    object itself, so snapshots must be immutable.
    Listeners are called synchronously, in subscription order.
    """

    def __init__(self, initial_state: S):
        self._state = initial_state
        self._listeners: List[Listener] = []
        self._mounted = True

    @property
    def state(self) -> S:
        """Current snapshot."""
        return self._state

    @state.setter
    def state(self, value: S) -> None:
        if not self._mounted:
            raise RuntimeError(f"{self.__class__.__name__} was used after being disposed")

        self._state = value
        self._notify(value)

    @property
    def mounted(self) -> bool:
        return self._mounted

    def add_listener(self, listener: Listener, fire_immediately: bool = True) -> RemoveListener:
        """
        Subscribe to state changes.

        Args:
            listener: Callable receiving every new snapshot
            fire_immediately: Call the listener with the current snapshot right away

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)
        logger.debug(f"Listener added to {self.__class__.__name__} ({len(self._listeners)} total)")

        if fire_immediately:
            self._call_listener(listener, self._state)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
                logger.debug(f"Listener removed from {self.__class__.__name__}")

        return remove

    def dispose(self) -> None:
        """Drop all listeners; further state writes raise."""
        self._listeners.clear()
        self._mounted = False

    def _notify(self, value: S) -> None:
        for listener in list(self._listeners):
            self._call_listener(listener, value)

    def _call_listener(self, listener: Listener, value: S) -> None:
        try:
            listener(value)
        except Exception as e:
            logger.error(f"Error in {self.__class__.__name__} listener: {e}", exc_info=True)
