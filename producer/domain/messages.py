from datetime import datetime
from typing import Optional

from shared.domain.timestamps import format_rfc1123


MESSAGE_LABELS = ("First", "Second", "Third", "Forth")

MESSAGE_TEMPLATE = "{label} message at {timestamp}"


def build_messages(now: Optional[datetime] = None) -> tuple[str, ...]:
    # Build the outbound queue; every body shares the same timestamp
    if now is None:
        now = datetime.now().astimezone()
    timestamp = format_rfc1123(now)
    return tuple(
        MESSAGE_TEMPLATE.format(label=label, timestamp=timestamp)
        for label in MESSAGE_LABELS
    )
