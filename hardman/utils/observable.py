"""Subscribe/notify helper shared by stores and game engines"""
import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[object], None]


class Observable:
    """
    Minimal observer list.

    Listeners receive the notifying object. A listener that raises is logged
    and does not prevent the others from running.
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.error(f"Listener {listener!r} failed: {e}", exc_info=True)
