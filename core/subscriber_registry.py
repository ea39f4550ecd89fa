import threading
from typing import Any, Dict, List
from .logging_config import LoggerMixin
from .subscriber_interface import ISubscriber

class SubscriberRegistry(LoggerMixin):
    """Set of currently connected viewers with best-effort fan-out."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, ISubscriber] = {}
        self._lock = threading.Lock()

    def add(self, subscriber: ISubscriber) -> None:
        with self._lock:
            self._subscribers[subscriber.subscriber_id] = subscriber
        self.logger.info("Subscriber connected", subscriber_id=subscriber.subscriber_id)

    def remove(self, subscriber_id: str) -> None:
        with self._lock:
            removed = self._subscribers.pop(subscriber_id, None)
        if removed is not None:
            self.logger.info("Subscriber disconnected", subscriber_id=subscriber_id)

    def snapshot(self) -> List[ISubscriber]:
        with self._lock:
            return list(self._subscribers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def broadcast(self, message: Dict[str, Any]) -> int:
        """
        Send ``message`` to every subscriber and return how many received it.
        A subscriber whose send raises is dropped; delivery to the rest continues.
        """
        delivered = 0
        for subscriber in self.snapshot():
            try:
                subscriber.send(message)
                delivered += 1
            except Exception as e:
                self.logger.warning(
                    "Dropping subscriber after failed delivery",
                    subscriber_id=subscriber.subscriber_id,
                    error=str(e),
                    error_type=type(e).__name__
                )
                self.remove(subscriber.subscriber_id)
        return delivered
