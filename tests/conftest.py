"""Shared fixtures for the producer and consumer tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from confluent_kafka import KafkaError


def _kafka_message(
    key: bytes | None = b"tutorial-2-key",
    value: bytes | None = b"First message",
    topic: str = "tutorial-2-kafka-template",
    partition: int = 0,
    offset: int = 0,
    error=None,
):
    msg = MagicMock()
    msg.key.return_value = key
    msg.value.return_value = value
    msg.topic.return_value = topic
    msg.partition.return_value = partition
    msg.offset.return_value = offset
    msg.error.return_value = error
    return msg


def _kafka_error(code: int = KafkaError._TRANSPORT, fatal: bool = False, name: str = "_TRANSPORT"):
    error = MagicMock()
    error.code.return_value = code
    error.fatal.return_value = fatal
    error.name.return_value = name
    return error


@pytest.fixture
def kafka_message():
    """Factory for mocked confluent_kafka.Message objects."""
    return _kafka_message


@pytest.fixture
def kafka_error():
    """Factory for mocked confluent_kafka.KafkaError objects."""
    return _kafka_error
