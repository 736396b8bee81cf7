"""Tests for RFC 1123 timestamp formatting."""

from datetime import datetime, timedelta, timezone

from shared.domain.timestamps import format_rfc1123


class TestFormatRfc1123:
    """Tests for format_rfc1123."""

    def test_utc_uses_gmt(self):
        """A zero offset is written as GMT."""
        moment = datetime(2008, 6, 3, 11, 5, 30, tzinfo=timezone.utc)

        assert format_rfc1123(moment) == "Tue, 3 Jun 2008 11:05:30 GMT"

    def test_day_of_month_is_not_padded(self):
        """Single digit days are not zero padded."""
        moment = datetime(2024, 1, 7, 9, 0, 0, tzinfo=timezone.utc)

        assert format_rfc1123(moment) == "Sun, 7 Jan 2024 09:00:00 GMT"

    def test_positive_offset(self):
        """Non-zero offsets are written as +HHMM."""
        moment = datetime(2024, 12, 25, 18, 30, 5, tzinfo=timezone(timedelta(hours=2)))

        assert format_rfc1123(moment) == "Wed, 25 Dec 2024 18:30:05 +0200"

    def test_negative_offset_with_minutes(self):
        """Negative offsets keep their minutes."""
        moment = datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone(-timedelta(hours=3, minutes=30)))

        assert format_rfc1123(moment) == "Fri, 1 Mar 2024 00:00:00 -0330"

    def test_naive_datetime_is_treated_as_gmt(self):
        """A datetime without tzinfo renders as GMT."""
        moment = datetime(2024, 2, 29, 23, 59, 59)

        assert format_rfc1123(moment) == "Thu, 29 Feb 2024 23:59:59 GMT"

    def test_sub_minute_negative_offset_truncates_toward_zero(self):
        """A -30s offset keeps its sign and does not round to a whole minute."""
        moment = datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone(-timedelta(seconds=30)))

        assert format_rfc1123(moment) == "Fri, 1 Mar 2024 00:00:00 -0000"

    def test_sub_minute_remainders_are_dropped(self):
        """Offsets with seconds drop the remainder on both sides of UTC."""
        ahead = datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone(timedelta(seconds=90)))
        behind = datetime(2024, 3, 1, 0, 0, 0, tzinfo=timezone(-timedelta(seconds=90)))

        assert format_rfc1123(ahead).endswith(" +0001")
        assert format_rfc1123(behind).endswith(" -0001")
