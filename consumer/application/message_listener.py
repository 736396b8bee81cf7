import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import Optional

from prometheus_client import Counter

from shared.domain.messages import Message


logger = logging.getLogger(__name__)


MESSAGES_RECEIVED = Counter(
    "consumer_messages_received_total",
    "Total number of messages handed to the listener",
    ["topic"],
)


class MessageListener(ABC):
    """Abstract base class for callbacks invoked once per received message.

    Listeners must not seek or commit; the consumer position is managed by
    the listener container.
    """

    @abstractmethod
    def on_message(self, message: Message) -> None:
        pass

    def __call__(self, message: Message) -> None:
        self.on_message(message)


class LoggingMessageListener(MessageListener):
    """Listener that logs the key and value of every message it receives."""

    def __init__(self):
        self._lock = Lock()
        self._received = 0
        self._last_message: Optional[Message] = None

    def on_message(self, message: Message) -> None:
        logger.info("Message received. key: %s, value: %s", message.key, message.value)
        MESSAGES_RECEIVED.labels(topic=message.topic or "").inc()

        with self._lock:
            self._received += 1
            self._last_message = message

    @property
    def received_count(self) -> int:
        with self._lock:
            return self._received

    def get_status(self) -> dict:
        with self._lock:
            return {
                "messages_received": self._received,
                "last_message": self._last_message.to_dict() if self._last_message else None,
            }
