"""Tests for check_publication.clock module."""

from datetime import datetime

import pytz

from check_publication.clock import (
    format_day,
    is_bst_clock_forward_time,
    is_christmas_day,
    local_now,
    run_hour_segment,
)


class TestIsChristmasDay:
    def test_christmas(self) -> None:
        assert is_christmas_day(datetime(2023, 12, 25, 1, 5))

    def test_christmas_eve(self) -> None:
        assert not is_christmas_day(datetime(2023, 12, 24, 1, 5))

    def test_twenty_fifth_of_another_month(self) -> None:
        assert not is_christmas_day(datetime(2023, 11, 25, 1, 5))


class TestIsBstClockForwardTime:
    def test_last_sunday_of_march_at_two(self) -> None:
        assert is_bst_clock_forward_time(datetime(2023, 3, 26, 2, 10))
        assert is_bst_clock_forward_time(datetime(2024, 3, 31, 2, 0))

    def test_other_hours_on_clock_change_day(self) -> None:
        assert not is_bst_clock_forward_time(datetime(2023, 3, 26, 0, 10))
        assert not is_bst_clock_forward_time(datetime(2023, 3, 26, 3, 10))

    def test_earlier_sunday_in_march(self) -> None:
        assert not is_bst_clock_forward_time(datetime(2023, 3, 19, 2, 10))

    def test_weekday_at_end_of_march(self) -> None:
        assert not is_bst_clock_forward_time(datetime(2023, 3, 27, 2, 10))

    def test_last_sunday_of_october(self) -> None:
        assert not is_bst_clock_forward_time(datetime(2023, 10, 29, 2, 10))

    def test_timezone_aware_moment(self) -> None:
        london = pytz.timezone("Europe/London")
        assert is_bst_clock_forward_time(london.localize(datetime(2023, 3, 26, 2, 10)))


class TestRunHourSegment:
    def test_midnight_run(self) -> None:
        assert run_hour_segment(datetime(2023, 5, 2, 0, 30)) == "0000"

    def test_one_am_run(self) -> None:
        assert run_hour_segment(datetime(2023, 5, 2, 1, 30)) == "0100"

    def test_later_manual_run_defaults_to_one_am(self) -> None:
        assert run_hour_segment(datetime(2023, 5, 2, 14, 0)) == "0100"


class TestLocalNow:
    def test_is_timezone_aware(self) -> None:
        result = local_now("Europe/London")
        assert result.tzinfo is not None
        assert result.tzinfo.zone == "Europe/London"

    def test_format_day(self) -> None:
        assert format_day(datetime(2023, 5, 2, 1, 30)) == "2023-05-02"
