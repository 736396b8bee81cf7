from datetime import datetime


DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def format_rfc1123(moment: datetime) -> str:
    """Render a datetime as an RFC 1123 date-time, e.g. ``Tue, 3 Jun 2008 11:05:30 GMT``.

    The day of month is not zero padded. A zero (or missing) UTC offset is
    written as ``GMT``, any other offset as ``+HHMM`` / ``-HHMM``. Names are
    always English so the output does not depend on the process locale.
    """
    offset = moment.utcoffset()
    if offset is None or not offset:
        zone = "GMT"
    else:
        total_seconds = int(offset.total_seconds())
        sign = "+" if offset.total_seconds() > 0 else "-"
        # Sub-minute remainders are dropped toward zero
        hours, minutes = divmod(abs(total_seconds) // 60, 60)
        zone = f"{sign}{hours:02d}{minutes:02d}"

    return (
        f"{DAY_NAMES[moment.weekday()]}, "
        f"{moment.day} {MONTH_NAMES[moment.month - 1]} {moment.year} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} "
        f"{zone}"
    )
