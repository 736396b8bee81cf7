import logging
import signal
import sys
from threading import Event

from prometheus_client import start_http_server

from consumer.admin_server import AdminServer
from consumer.application.message_listener import LoggingMessageListener, MessageListener
from consumer.config import Config
from consumer.infrastructure.kafka_listener import KafkaMessageListenerContainer


logger = logging.getLogger(__name__)


shutdown_event = Event()


def signal_handler(signum, frame):
    # Handle shutdown signals by setting the shutdown event
    logger.info("Shutdown signal received")
    shutdown_event.set()


def build_container(listener: MessageListener) -> KafkaMessageListenerContainer:
    return KafkaMessageListenerContainer(
        bootstrap_servers=Config.KAFKA_BOOTSTRAP_SERVERS,
        topic=Config.KAFKA_TOPIC,
        group_id=Config.KAFKA_GROUP_ID,
        listener=listener,
        auto_offset_reset=Config.KAFKA_AUTO_OFFSET_RESET,
        poll_timeout_seconds=Config.POLL_TIMEOUT_SECONDS,
    )


def main():
    # Entry point for the standalone message consumer
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    logger.info("Starting metrics server on port %d", Config.METRICS_PORT)
    start_http_server(Config.METRICS_PORT)

    listener = LoggingMessageListener()
    container = build_container(listener)

    admin_server = AdminServer(Config.ADMIN_PORT)
    admin_server.set_status_callback(listener.get_status)
    admin_server.start()

    logger.info(
        "Starting message consumer - Kafka: %s, Topic: %s, Group: %s",
        Config.KAFKA_BOOTSTRAP_SERVERS,
        Config.KAFKA_TOPIC,
        Config.KAFKA_GROUP_ID,
    )

    try:
        container.start()
        while not shutdown_event.is_set():
            shutdown_event.wait(1.0)
    except Exception as e:
        logger.exception("Fatal error in consumer: %s", e)
        sys.exit(1)
    finally:
        container.stop(timeout=Config.STOP_TIMEOUT_SECONDS)
        admin_server.stop()
        logger.info(
            "Consumer shutdown complete. Total messages received: %d",
            listener.received_count,
        )


if __name__ == "__main__":
    main()
