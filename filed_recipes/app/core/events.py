import logging
from typing import Callable, List

log = logging.getLogger(__name__)

Listener = Callable[[], None]


class ChangeSignal:
    """
    Synchronous "something changed" notification.

    Listeners take no arguments and are called in subscription order on the
    emitting thread.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self.unsubscribe(listener)

        return unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self) -> None:
        # Copy so a listener may unsubscribe itself while being notified.
        for listener in list(self._listeners):
            listener()
        log.debug(f"Change notified to {len(self._listeners)} listener(s)")

    def __len__(self) -> int:
        return len(self._listeners)
