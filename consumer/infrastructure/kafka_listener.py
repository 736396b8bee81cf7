import logging
from threading import Event, Lock, Thread
from typing import Callable, Optional

from confluent_kafka import Consumer, KafkaError, KafkaException
from prometheus_client import Counter

from shared.domain.messages import Message


logger = logging.getLogger(__name__)


POLL_ERRORS = Counter(
    "consumer_poll_errors_total",
    "Total number of errors reported by the Kafka consumer",
    ["error_type"],
)

LISTENER_ERRORS = Counter(
    "consumer_listener_errors_total",
    "Total number of exceptions raised by the message listener",
)


class KafkaMessageListenerContainer:
    """Runs a Kafka poll loop on a dedicated thread and feeds a listener.

    Messages from all assigned partitions are delivered to the listener one
    at a time on the container thread. Offsets are committed automatically
    by the client, so listeners never manage the consumer position.
    """

    def __init__(
        self,
        bootstrap_servers: str,
        topic: str,
        group_id: str,
        listener: Callable[[Message], None],
        auto_offset_reset: str = "earliest",
        poll_timeout_seconds: float = 1.0,
    ):
        self._topic = topic
        self._listener = listener
        self._poll_timeout_seconds = poll_timeout_seconds
        self._consumer_config = {
            "bootstrap.servers": bootstrap_servers,
            "group.id": group_id,
            "auto.offset.reset": auto_offset_reset,
            "enable.auto.commit": True,
        }
        self._consumer: Optional[Consumer] = None
        self._thread: Optional[Thread] = None
        self._stop_event = Event()
        self._close_lock = Lock()
        self._closed = False

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        # Subscribe and start polling in a background thread
        if self.is_running:
            logger.debug("Listener container for %s already running", self._topic)
            return

        self._stop_event.clear()
        self._closed = False
        self._consumer = Consumer(self._consumer_config)
        self._consumer.subscribe([self._topic])
        logger.info(
            "Subscribed to topic: %s (group: %s)",
            self._topic,
            self._consumer_config["group.id"],
        )

        self._thread = Thread(
            target=self._run,
            name=f"kafka-listener-{self._topic}",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Signal the poll loop to exit and wait for the consumer to close.

        The consumer is only closed once the container thread has left its
        current poll or listener call. If that takes longer than ``timeout``
        the thread still closes the consumer itself when it exits.
        """
        self._stop_event.set()
        if self._thread is None:
            return
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning(
                "Listener thread for %s did not stop in time, consumer closes when it exits",
                self._topic,
            )
            return
        self._close_consumer()

    def _close_consumer(self) -> None:
        with self._close_lock:
            if self._closed or self._consumer is None:
                return
            logger.info("Closing Kafka consumer for %s", self._topic)
            self._consumer.close()
            self._closed = True

    def _run(self) -> None:
        try:
            while not self._stop_event.is_set():
                msg = self._consumer.poll(self._poll_timeout_seconds)
                if msg is None:
                    continue
                if not self._dispatch(msg):
                    break
        except KafkaException as e:
            logger.exception("Kafka consumer failed: %s", e)
        except Exception:
            logger.exception("Listener container for %s stopped unexpectedly", self._topic)
        finally:
            self._close_consumer()

    def _dispatch(self, msg) -> bool:
        # Hand one polled message to the listener; False stops the loop
        error = msg.error()
        if error is not None:
            if error.code() == KafkaError._PARTITION_EOF:
                return True
            POLL_ERRORS.labels(error_type=error.name()).inc()
            if error.fatal():
                logger.error("Fatal Kafka error, stopping listener: %s", error)
                return False
            logger.error("Kafka error: %s", error)
            return True

        try:
            self._listener(Message.from_kafka(msg))
        except Exception:
            LISTENER_ERRORS.inc()
            logger.exception(
                "Listener failed for message %s [%s] @ %s",
                msg.topic(),
                msg.partition(),
                msg.offset(),
            )
        return True
