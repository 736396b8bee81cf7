import os


class KafkaConfig:
    """Shared Kafka configuration."""

    BOOTSTRAP_SERVERS: str = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092")
    GROUP_ID: str = os.getenv("KAFKA_GROUP_ID", "tutorial-2-group-id")
    TOPIC: str = os.getenv("KAFKA_TOPIC", "tutorial-2-kafka-template")
    # Every produced message uses this key
    MESSAGE_KEY: str = os.getenv("KAFKA_MESSAGE_KEY", "tutorial-2-key")
