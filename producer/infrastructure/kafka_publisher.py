import logging
from abc import ABC, abstractmethod

from confluent_kafka import Producer
from prometheus_client import Counter, Histogram

from shared.domain.messages import Message


logger = logging.getLogger(__name__)


MESSAGES_SENT = Counter(
    "producer_messages_sent_total",
    "Total number of messages handed to the Kafka producer",
    ["topic"],
)

PUBLISH_LATENCY = Histogram(
    "producer_publish_latency_seconds",
    "Time spent handing messages to the Kafka producer",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)

PUBLISH_ERRORS = Counter(
    "producer_publish_errors_total",
    "Total number of messages the broker failed to acknowledge",
)


class MessagePublisher(ABC):
    """Abstract base class defining the interface for message publishing."""

    @abstractmethod
    def send(self, topic: str, key: str, value: str) -> None:
        # Publish a text message to the message broker
        pass

    @abstractmethod
    def flush(self, timeout: float = 10.0) -> int:
        # Flush pending messages, returning how many are still queued
        pass


class KafkaMessagePublisher(MessagePublisher):
    """Kafka implementation of the message publisher.

    Sends are fire-and-forget: ``send`` returns as soon as the message is
    queued and delivery results are only reported through the logger.
    """

    def __init__(self, bootstrap_servers: str):
        self._producer = Producer({
            "bootstrap.servers": bootstrap_servers,
        })

    def _delivery_callback(self, err, msg):
        if err is not None:
            logger.error("Failed to deliver message: %s", err)
            PUBLISH_ERRORS.inc()
        else:
            logger.debug(
                "Message delivered to %s [%d] @ %d",
                msg.topic(),
                msg.partition(),
                msg.offset(),
            )

    def send(self, topic: str, key: str, value: str) -> None:
        message = Message(key=key, value=value, topic=topic)
        with PUBLISH_LATENCY.time():
            self._producer.produce(
                topic,
                key=message.encoded_key(),
                value=message.encoded_value(),
                callback=self._delivery_callback,
            )
            self._producer.poll(0)

        MESSAGES_SENT.labels(topic=topic).inc()

    def flush(self, timeout: float = 10.0) -> int:
        remaining = self._producer.flush(timeout=timeout)
        if remaining:
            logger.warning("%d messages still queued after flush", remaining)
        return remaining
