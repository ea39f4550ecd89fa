from abc import ABC, abstractmethod
from typing import Any, Dict

class ISubscriber(ABC):
    """
    Defines the contract for live-feed viewers.
    Anything that can receive pushed traffic updates (a Socket.IO session, a
    test double) implements this interface and is registered with the
    SubscriberRegistry.
    """

    @property
    @abstractmethod
    def subscriber_id(self) -> str:
        """
        Returns a stable identifier used to add and remove the subscriber.
        """
        pass

    @abstractmethod
    def send(self, message: Dict[str, Any]) -> None:
        """
        Delivers one message to the viewer.
        Implementations may raise; the registry treats any exception as a
        failed delivery for this subscriber only.
        """
        pass
