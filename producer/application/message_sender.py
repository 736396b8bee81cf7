import logging
import time
from threading import Event
from typing import Callable, Optional, Sequence

from producer.infrastructure.kafka_publisher import MessagePublisher


logger = logging.getLogger(__name__)


class MessageSender:
    """Publishes a fixed sequence of messages with a pause before each one.

    When a shutdown event is given the pause waits on it, and a set event
    stops the sequence before the next publish.
    """

    def __init__(
        self,
        publisher: MessagePublisher,
        topic: str,
        key: str,
        delay_seconds: float = 5.0,
        sleep: Optional[Callable[[float], object]] = None,
        shutdown_event: Optional[Event] = None,
    ):
        self._publisher = publisher
        self._topic = topic
        self._key = key
        self._delay_seconds = delay_seconds
        self._shutdown_event = shutdown_event
        if sleep is None:
            sleep = shutdown_event.wait if shutdown_event is not None else time.sleep
        self._sleep = sleep

    def _shutdown_requested(self) -> bool:
        return self._shutdown_event is not None and self._shutdown_event.is_set()

    def send_all(self, messages: Sequence[str]) -> int:
        # Any publish failure propagates and aborts the remaining sends
        logger.info("Sending a total of %d messages.", len(messages))

        sent = 0
        for message in messages:
            self._sleep(self._delay_seconds)
            if self._shutdown_requested():
                logger.info("Shutdown requested, %d messages not sent", len(messages) - sent)
                break
            logger.info("Sending message: %s", message)
            self._publisher.send(self._topic, self._key, message)
            sent += 1

        return sent
