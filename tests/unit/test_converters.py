from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from newts_stress.converters import (
    from_epoch_seconds,
    parse_command,
    parse_duration,
    parse_timestamp,
    to_epoch_seconds,
)
from newts_stress.domain.models import Command
from newts_stress.errors import UnknownCommand

DEFAULT_START_EPOCH = 900_000_000
DEFAULT_END_EPOCH = 931_536_000


class TestParseTimestamp:
    def test_date_only_is_midnight_utc(self) -> None:
        assert parse_timestamp("2015-01-01") == datetime(2015, 1, 1, tzinfo=timezone.utc)

    def test_result_is_utc(self) -> None:
        value = parse_timestamp("2015-01-01T12:00:00+02:00")
        assert value.utcoffset() == timedelta(0)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2015-01-01T12", datetime(2015, 1, 1, 12, tzinfo=timezone.utc)),
            ("2015-01-01 12:30", datetime(2015, 1, 1, 12, 30, tzinfo=timezone.utc)),
            ("2015-01-01T12:30:45", datetime(2015, 1, 1, 12, 30, 45, tzinfo=timezone.utc)),
            ("2015-01-01T12:30:45Z", datetime(2015, 1, 1, 12, 30, 45, tzinfo=timezone.utc)),
            (
                "2015-01-01T12:30:45.123Z",
                datetime(2015, 1, 1, 12, 30, 45, 123000, tzinfo=timezone.utc),
            ),
            (
                "2015-01-01T12:30:45.1234567Z",
                datetime(2015, 1, 1, 12, 30, 45, 123456, tzinfo=timezone.utc),
            ),
            ("2015-01-01T12:30:45+02:00", datetime(2015, 1, 1, 10, 30, 45, tzinfo=timezone.utc)),
            ("2015-01-01T12:30-0130", datetime(2015, 1, 1, 14, 0, tzinfo=timezone.utc)),
            ("2015-01-01T00:00+01", datetime(2014, 12, 31, 23, 0, tzinfo=timezone.utc)),
        ],
    )
    def test_accepted_forms(self, text: str, expected: datetime) -> None:
        assert parse_timestamp(text) == expected

    def test_same_input_same_output(self) -> None:
        assert parse_timestamp("2010-06-01T08:00:00Z") == parse_timestamp("2010-06-01T08:00:00Z")

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "yesterday",
            "2015-1-1",
            "2015-13-01",
            "2015-02-30",
            "2015-01-01T25:00",
            "2015-01-01T12:61",
            "2015-01-01T12:00+24:00",
            "1420070400",
        ],
    )
    def test_rejects_malformed_text(self, text: str) -> None:
        with pytest.raises(ValueError) as excinfo:
            parse_timestamp(text)
        assert repr(text) in str(excinfo.value)

    @pytest.mark.parametrize("text", ["0001-01-01T00:00+01:00", "9999-12-31T23:30-01:00"])
    def test_rejects_offsets_beyond_calendar_range(self, text: str) -> None:
        with pytest.raises(ValueError) as excinfo:
            parse_timestamp(text)
        assert repr(text) in str(excinfo.value)

    def test_calendar_limits_without_shift(self) -> None:
        assert parse_timestamp("0001-01-01T00:00Z") == datetime.min.replace(tzinfo=timezone.utc)
        assert parse_timestamp("9999-12-31T23:30+01:00").year == 9999

    def test_default_bounds_round_trip_through_epoch(self) -> None:
        assert to_epoch_seconds(parse_timestamp("1998-07-09T16:00:00Z")) == DEFAULT_START_EPOCH
        assert from_epoch_seconds(DEFAULT_END_EPOCH) == parse_timestamp("1999-07-09T16:00:00Z")


class TestParseDuration:
    @pytest.mark.parametrize(("text", "seconds"), [("0", 0), ("300", 300), (" 86400 ", 86400)])
    def test_whole_seconds(self, text: str, seconds: int) -> None:
        assert parse_duration(text) == timedelta(seconds=seconds)

    @pytest.mark.parametrize("text", ["-5", "abc", "", "1.5", "5s", "+300"])
    def test_rejects_non_numeric_or_negative(self, text: str) -> None:
        with pytest.raises(ValueError) as excinfo:
            parse_duration(text)
        assert repr(text) in str(excinfo.value)

    @pytest.mark.parametrize("text", ["100000000000000", "99999999999999999999"])
    def test_rejects_values_beyond_timedelta_range(self, text: str) -> None:
        with pytest.raises(ValueError) as excinfo:
            parse_duration(text)
        assert repr(text) in str(excinfo.value)

    def test_largest_representable_duration(self) -> None:
        assert parse_duration("86399999999999") == timedelta(seconds=86_399_999_999_999)


class TestParseCommand:
    @pytest.mark.parametrize("text", ["insert", "INSERT", "Insert"])
    def test_insert_any_case(self, text: str) -> None:
        assert parse_command(text) is Command.INSERT

    def test_select(self) -> None:
        assert parse_command("sElEcT") is Command.SELECT

    @pytest.mark.parametrize("text", ["inser", "delete", ""])
    def test_unknown(self, text: str) -> None:
        with pytest.raises(UnknownCommand) as excinfo:
            parse_command(text)
        assert excinfo.value.message == f"Unknown command: {text}"
