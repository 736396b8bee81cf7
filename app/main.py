"""Runs the consumer and the producer side by side in one process.

Startup order is explicit: the listener container is started first so it
is subscribed before the producer begins its paced sends. The consumer then
keeps running until the process receives SIGINT or SIGTERM.
"""
import logging
import signal
import sys
from threading import Event

from prometheus_client import start_http_server

from consumer import main as consumer_main
from consumer.admin_server import AdminServer
from consumer.application.message_listener import LoggingMessageListener
from consumer.config import Config as ConsumerConfig
from producer import main as producer_main
from producer.config import Config as ProducerConfig
from producer.domain.messages import build_messages
from producer.infrastructure.kafka_publisher import KafkaMessagePublisher


logger = logging.getLogger(__name__)


shutdown_event = Event()


def signal_handler(signum, frame):
    logger.info("Shutdown signal received")
    shutdown_event.set()


def main():
    logging.basicConfig(
        level=getattr(logging, ProducerConfig.LOG_LEVEL),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    # Both components share the default registry, so one endpoint serves all metrics
    logger.info("Starting metrics server on port %d", ProducerConfig.METRICS_PORT)
    start_http_server(ProducerConfig.METRICS_PORT)

    listener = LoggingMessageListener()
    container = consumer_main.build_container(listener)

    admin_server = AdminServer(ConsumerConfig.ADMIN_PORT)
    admin_server.set_status_callback(listener.get_status)
    admin_server.start()

    publisher = KafkaMessagePublisher(bootstrap_servers=ProducerConfig.KAFKA_BOOTSTRAP_SERVERS)
    sender = producer_main.build_sender(publisher, shutdown_event)

    sent = 0
    try:
        container.start()

        try:
            sent = sender.send_all(build_messages())
        finally:
            publisher.flush(timeout=ProducerConfig.FLUSH_TIMEOUT_SECONDS)
        logger.info("Producer finished. Total messages sent: %d", sent)

        while not shutdown_event.is_set():
            shutdown_event.wait(1.0)
    except Exception as e:
        logger.exception("Fatal error during startup: %s", e)
        sys.exit(1)
    finally:
        container.stop(timeout=ConsumerConfig.STOP_TIMEOUT_SECONDS)
        admin_server.stop()
        logger.info(
            "Shutdown complete. Sent: %d, received: %d",
            sent,
            listener.received_count,
        )


if __name__ == "__main__":
    main()
