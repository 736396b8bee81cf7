import os

from shared.config.kafka import KafkaConfig


class Config:
    """Producer-specific configuration extending shared configs."""

    KAFKA_BOOTSTRAP_SERVERS: str = KafkaConfig.BOOTSTRAP_SERVERS
    KAFKA_TOPIC: str = KafkaConfig.TOPIC
    KAFKA_MESSAGE_KEY: str = KafkaConfig.MESSAGE_KEY

    SEND_DELAY_SECONDS: float = float(os.getenv("SEND_DELAY_SECONDS", "5"))
    FLUSH_TIMEOUT_SECONDS: float = float(os.getenv("FLUSH_TIMEOUT_SECONDS", "10"))

    METRICS_PORT: int = int(os.getenv("METRICS_PORT", "8000"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
