"""Tests for DateFormatter (epoch millisecond and datetime inputs)."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from charting import InvalidArgumentError
from charting.labels import DateFormatter, NumberFormatter, is_date_formatter

PLUS_TWO = timezone(timedelta(hours=2))


def test_epoch_milliseconds():
    fmt = DateFormatter("%Y-%m-%d %H:%M", tz="UTC")
    assert fmt.format(0) == "1970-01-01 00:00"
    assert fmt.format(86_400_000) == "1970-01-02 00:00"
    assert fmt.format(-86_400_000) == "1969-12-31 00:00"


def test_fractional_milliseconds_are_truncated():
    fmt = DateFormatter("%S.%f", tz="UTC")
    assert fmt.format(1999.9) == "01.999000"


def test_fixed_offset_zone():
    fmt = DateFormatter("%H:%M", tz=PLUS_TWO)
    assert fmt.format(0) == "02:00"


def test_datetime_inputs():
    fmt = DateFormatter("%Y-%m-%d %H:%M", tz=PLUS_TWO)
    # naive values are taken as already in the formatter's zone
    assert fmt.format(datetime(2024, 3, 1, 9, 30)) == "2024-03-01 09:30"
    # aware values are converted
    assert fmt.format(datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)) == "2024-03-01 11:30"
    assert fmt.format(date(2024, 3, 1)) == "2024-03-01 00:00"


def test_to_datetime_is_zone_aware():
    dt = DateFormatter(tz="UTC").to_datetime(0)
    assert dt == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_nan_timestamp_raises():
    with pytest.raises(ValueError):
        DateFormatter(tz="UTC").format(float("nan"))


def test_unknown_zone_rejected():
    with pytest.raises(InvalidArgumentError) as exc:
        DateFormatter(tz="Nowhere/Atlantis")
    assert exc.value.context["tz"] == "Nowhere/Atlantis"


def test_null_pattern_rejected():
    with pytest.raises(InvalidArgumentError):
        DateFormatter(None)


def test_equality_and_kind():
    assert DateFormatter("%Y", tz="UTC") == DateFormatter("%Y", tz="UTC")
    assert DateFormatter("%Y", tz="UTC") != DateFormatter("%m", tz="UTC")
    assert is_date_formatter(DateFormatter())
    assert not is_date_formatter(NumberFormatter())


def test_zone_name_and_tzinfo_compare_equal():
    by_name = DateFormatter("%Y", tz="UTC")
    by_object = DateFormatter("%Y", tz=timezone.utc)
    assert by_name.tz is timezone.utc
    assert by_name == by_object and hash(by_name) == hash(by_object)
