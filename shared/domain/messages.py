from dataclasses import dataclass
from typing import Optional


def _decode(raw: Optional[bytes]) -> Optional[str]:
    if raw is None:
        return None
    # Undecodable bytes become U+FFFD rather than failing the poll loop
    return raw.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Message:
    key: Optional[str]
    value: Optional[str]
    topic: Optional[str] = None
    partition: Optional[int] = None
    offset: Optional[int] = None

    def encoded_key(self) -> Optional[bytes]:
        return self.key.encode("utf-8") if self.key is not None else None

    def encoded_value(self) -> Optional[bytes]:
        return self.value.encode("utf-8") if self.value is not None else None

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "value": self.value,
            "topic": self.topic,
            "partition": self.partition,
            "offset": self.offset,
        }

    @staticmethod
    def from_kafka(msg) -> "Message":
        # Build from a confluent_kafka.Message polled off the broker
        return Message(
            key=_decode(msg.key()),
            value=_decode(msg.value()),
            topic=msg.topic(),
            partition=msg.partition(),
            offset=msg.offset(),
        )
