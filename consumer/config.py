import os

from shared.config.kafka import KafkaConfig


class Config:
    """Consumer-specific configuration extending shared configs."""

    KAFKA_BOOTSTRAP_SERVERS: str = KafkaConfig.BOOTSTRAP_SERVERS
    KAFKA_TOPIC: str = KafkaConfig.TOPIC
    KAFKA_GROUP_ID: str = KafkaConfig.GROUP_ID
    KAFKA_AUTO_OFFSET_RESET: str = os.getenv("KAFKA_AUTO_OFFSET_RESET", "earliest")

    POLL_TIMEOUT_SECONDS: float = float(os.getenv("POLL_TIMEOUT_SECONDS", "1.0"))
    STOP_TIMEOUT_SECONDS: float = float(os.getenv("STOP_TIMEOUT_SECONDS", "10.0"))

    METRICS_PORT: int = int(os.getenv("METRICS_PORT", "8001"))
    ADMIN_PORT: int = int(os.getenv("ADMIN_PORT", "8002"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
