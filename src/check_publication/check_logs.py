"""Find today's publisher logs in CloudWatch and scan them for problems."""

import logging
import re

from check_publication.models import Failure, FailureKind, LogEvent, LogStream, Ok, StageResult
from common.aws import describe_recent_log_streams, iter_log_events

logger = logging.getLogger(__name__)

STAGE = "log scan"

# A run that straddles midnight can be split over two streams
MAX_STREAMS = 2

SEVERITY_PATTERN = re.compile(r"WARN|ERROR|FATAL")

# Printed by the JVM on every start-up; not an operational problem
BENIGN_PREFIX = "WARNING: sun.reflect.Reflection.getCallerClass is not supported"


def start_marker(today: str) -> str:
    return f"Starting to publish files for {today}"


def find_log_streams(logs, log_group_name: str) -> list[LogStream]:
    """Most recently written streams of the group, newest first."""
    streams = describe_recent_log_streams(logs, log_group_name, limit=MAX_STREAMS)
    return [
        LogStream(name=s["logStreamName"], last_event_time=s.get("lastEventTimestamp"))
        for s in streams
    ]


def get_stream_events(logs, log_group_name: str, stream: LogStream) -> list[LogEvent]:
    return [
        LogEvent(timestamp=event.get("timestamp", 0), message=event.get("message", ""))
        for event in iter_log_events(logs, log_group_name, stream.name)
    ]


def get_todays_logs(logs, log_group_name: str, today: str) -> list[LogEvent]:
    """
    Return the events of the newest stream that contains today's start marker.

    Streams are tried newest first. An empty list means no stream has
    evidence of a run for today.
    """
    marker = start_marker(today)

    for stream in find_log_streams(logs, log_group_name):
        events = get_stream_events(logs, log_group_name, stream)
        if any(marker in event.message for event in events):
            logger.info("Found run for %s in log stream %s (%d events)", today, stream.name, len(events))
            return events
        logger.info("Log stream %s has no run for %s", stream.name, today)

    return []


def find_log_errors(events: list[LogEvent]) -> list[str]:
    """Messages with a severity marker, in log order, minus the benign JVM warning."""
    return [
        event.message
        for event in events
        if SEVERITY_PATTERN.search(event.message) and not event.message.startswith(BENIGN_PREFIX)
    ]


def check_logs(events: list[LogEvent]) -> StageResult[None]:
    errors = find_log_errors(events)
    if errors:
        return Failure(STAGE, FailureKind.LOG_SEVERITY, tuple(errors))
    return Ok(None)


def scan_logs(logs, log_group_name: str, today: str) -> StageResult[None]:
    """Locate today's run in the log group and fail on any warning or error line."""
    events = get_todays_logs(logs, log_group_name, today)
    if not events:
        return Failure(
            STAGE,
            FailureKind.DATA,
            f"No log stream in {log_group_name} contains '{start_marker(today)}'",
        )
    return check_logs(events)
