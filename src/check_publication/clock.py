"""Calendar and wall-clock helpers for the publication check.

The publisher runs just after midnight UK time, so a few days of the year
need special handling: nothing is published on Christmas Day, and on the
last Sunday of March the 01:00 run never happens because clocks jump from
01:00 GMT straight to 02:00 BST.
"""

from datetime import datetime, timedelta

import pytz

DEFAULT_TIMEZONE = "Europe/London"

SUNDAY = 6
MARCH = 3
APRIL = 4
DECEMBER = 12

# First wall-clock hour after the skipped 01:00 on clock-change day
HOUR_AFTER_CLOCK_CHANGE = 2


def local_now(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Current wall-clock time in the given timezone."""
    return datetime.now(pytz.timezone(tz_name))


def format_day(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d")


def is_christmas_day(moment: datetime) -> bool:
    return moment.month == DECEMBER and moment.day == 25


def is_bst_clock_forward_time(moment: datetime) -> bool:
    """True during the 02:00 hour of the day UK clocks go forward."""
    next_week = moment + timedelta(days=7)
    return (
        moment.weekday() == SUNDAY
        and moment.month == MARCH
        and moment.hour == HOUR_AFTER_CLOCK_CHANGE
        and next_week.month == APRIL
    )


def run_hour_segment(moment: datetime) -> str:
    """Storage folder for the publisher run being checked.

    The check runs either after midnight or after 1am. Anything other than
    hour 0 maps to the 1am folder so manual runs later in the day still work.
    """
    return "0000" if moment.hour == 0 else "0100"
