"""Tests for the logging message listener."""

import logging

from consumer.application.message_listener import LoggingMessageListener
from shared.domain.messages import Message


class TestLoggingMessageListener:
    """Tests for LoggingMessageListener."""

    def test_logs_key_and_value(self, caplog):
        """Every message produces one log line with key and value."""
        listener = LoggingMessageListener()

        with caplog.at_level(logging.INFO, logger="consumer.application.message_listener"):
            listener(Message(key="tutorial-2-key", value="First message", topic="t"))

        assert caplog.messages == [
            "Message received. key: tutorial-2-key, value: First message"
        ]

    def test_counts_each_message_once(self):
        """The counter tracks every invocation."""
        listener = LoggingMessageListener()

        for i in range(4):
            listener(Message(key="k", value=f"message {i}", topic="t"))

        assert listener.received_count == 4

    def test_status_before_any_message(self):
        """Status is empty until something arrives."""
        assert LoggingMessageListener().get_status() == {
            "messages_received": 0,
            "last_message": None,
        }

    def test_status_reports_last_message(self):
        """Status carries the most recent message."""
        listener = LoggingMessageListener()
        listener(Message(key="k", value="first", topic="t", partition=0, offset=0))
        listener(Message(key="k", value="second", topic="t", partition=0, offset=1))

        status = listener.get_status()

        assert status["messages_received"] == 2
        assert status["last_message"]["value"] == "second"
        assert status["last_message"]["offset"] == 1
