"""
Unit tests for civil-time to instant conversion and display formatting.
"""

from datetime import datetime, timezone

import pytest

from kapan.core.error_handler import InvalidDateTimeError, UnknownTimezoneError
from kapan.processors.core.instant_converter import (
    format_for_display,
    local_datetime_to_instant,
    split_local_datetime,
    to_absolute_instant,
    to_zoned_datetime,
)


class TestInstantConverter:
    """Test suite for the instant converter"""

    @pytest.mark.unit
    def test_jakarta_evening_to_utc(self):
        instant = to_absolute_instant("2025-10-20", "18:00")

        assert instant == datetime(2025, 10, 20, 11, 0, tzinfo=timezone.utc)
        assert instant.utcoffset().total_seconds() == 0

    @pytest.mark.unit
    def test_jakarta_midnight_falls_on_previous_utc_day(self):
        instant = to_absolute_instant("2025-10-20", "00:00")

        assert instant == datetime(2025, 10, 19, 17, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_explicit_zone(self):
        assert to_absolute_instant("2025-01-05", "09:05", "UTC") == \
            datetime(2025, 1, 5, 9, 5, tzinfo=timezone.utc)
        assert to_absolute_instant("2025-01-05", "09:05", "Asia/Tokyo") == \
            datetime(2025, 1, 5, 0, 5, tzinfo=timezone.utc)

    @pytest.mark.unit
    def test_zoned_datetime_keeps_wall_clock(self):
        zoned = to_zoned_datetime("2025-10-20", "18:00")

        assert (zoned.hour, zoned.minute) == (18, 0)
        assert zoned.utcoffset().total_seconds() == 7 * 3600

    @pytest.mark.unit
    def test_does_not_depend_on_host_zone(self, monkeypatch):
        import time
        monkeypatch.setenv("TZ", "America/New_York")
        if hasattr(time, "tzset"):
            time.tzset()
        try:
            assert to_absolute_instant("2025-10-20", "18:00") == \
                datetime(2025, 10, 20, 11, 0, tzinfo=timezone.utc)
        finally:
            monkeypatch.undo()
            if hasattr(time, "tzset"):
                time.tzset()

    @pytest.mark.unit
    @pytest.mark.parametrize("iso_date", [
        "2025-1-05", "25-10-20", "2025/10/20", "2025-13-01", "2025-02-30", "2025-00-10", "", "tomorrow",
    ])
    def test_rejects_malformed_date(self, iso_date):
        with pytest.raises(InvalidDateTimeError) as exc_info:
            to_absolute_instant(iso_date, "18:00")

        assert exc_info.value.field == "date"
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.unit
    @pytest.mark.parametrize("iso_time", ["6:00", "24:00", "12:60", "1800", "18:00:00", ""])
    def test_rejects_malformed_time(self, iso_time):
        with pytest.raises(InvalidDateTimeError) as exc_info:
            to_absolute_instant("2025-10-20", iso_time)

        assert exc_info.value.field == "time"

    @pytest.mark.unit
    def test_rejects_unknown_zone(self):
        with pytest.raises(UnknownTimezoneError):
            to_absolute_instant("2025-10-20", "18:00", "Mars/Olympus_Mons")

    @pytest.mark.unit
    def test_format_for_display(self):
        assert format_for_display("2025-10-20", "18:00") == "20 Oct 2025 at 18:00"
        assert format_for_display("2025-01-05", "09:05", "UTC") == "5 Jan 2025 at 09:05"

    @pytest.mark.unit
    def test_format_for_display_indonesian(self):
        assert format_for_display("2025-08-17", "07:30", locale="id") == "17 Agu 2025 pukul 07:30"

    @pytest.mark.unit
    def test_format_for_display_is_deterministic(self):
        outputs = {format_for_display("2025-10-20", "18:00", "Asia/Jakarta") for _ in range(5)}

        assert outputs == {"20 Oct 2025 at 18:00"}

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["2025-10-20T18:00", "2025-10-20T18:00:00", "2025-10-20T18:00:00.000"])
    def test_local_datetime_to_instant(self, value):
        assert split_local_datetime(value) == ("2025-10-20", "18:00")
        assert local_datetime_to_instant(value) == datetime(2025, 10, 20, 11, 0, tzinfo=timezone.utc)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["2025-10-20 18:00", "2025-10-20", "18:00", "2025-10-20T18:00Z"])
    def test_local_datetime_rejects_other_shapes(self, value):
        with pytest.raises(InvalidDateTimeError):
            local_datetime_to_instant(value)
