import logging
import signal
import sys
from threading import Event
from typing import Optional

from prometheus_client import start_http_server

from producer.application.message_sender import MessageSender
from producer.config import Config
from producer.domain.messages import build_messages
from producer.infrastructure.kafka_publisher import KafkaMessagePublisher


logger = logging.getLogger(__name__)


shutdown_event = Event()


def signal_handler(signum, frame):
    logger.info("Shutdown signal received")
    shutdown_event.set()


def build_sender(
    publisher: KafkaMessagePublisher,
    stop_event: Optional[Event] = None,
) -> MessageSender:
    return MessageSender(
        publisher=publisher,
        topic=Config.KAFKA_TOPIC,
        key=Config.KAFKA_MESSAGE_KEY,
        delay_seconds=Config.SEND_DELAY_SECONDS,
        shutdown_event=stop_event,
    )


def main():
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info("Starting metrics server on port %d", Config.METRICS_PORT)
    start_http_server(Config.METRICS_PORT)

    publisher = KafkaMessagePublisher(bootstrap_servers=Config.KAFKA_BOOTSTRAP_SERVERS)
    sender = build_sender(publisher, shutdown_event)

    logger.info(
        "Starting message producer - Kafka: %s, Topic: %s",
        Config.KAFKA_BOOTSTRAP_SERVERS,
        Config.KAFKA_TOPIC,
    )

    sent = 0
    try:
        sent = sender.send_all(build_messages())
    except Exception as e:
        logger.exception("Fatal error in producer: %s", e)
        sys.exit(1)
    finally:
        logger.info("Flushing remaining messages")
        publisher.flush(timeout=Config.FLUSH_TIMEOUT_SECONDS)
        logger.info("Producer shutdown complete. Total messages sent: %d", sent)


if __name__ == "__main__":
    main()
