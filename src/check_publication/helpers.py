"""Helper functions for the check_publication entry points."""

from __future__ import annotations

import argparse
from collections.abc import Collection

import requests

from check_publication.models import Clients, RunConfig
from common.aws import get_logs_client, get_s3_client
from common.cli_helpers import parse_date


def should_run(hour: int, run_hours: Collection[int], force: bool = False) -> bool:
    """Whether the check is due this hour."""
    return force or hour in run_hours


def build_clients(config: RunConfig) -> Clients:
    return Clients(
        s3=get_s3_client(config.region, config.http_timeout),
        logs=get_logs_client(config.region, config.http_timeout),
        http=requests.Session(),
    )


def parse_check_publication_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for check_publication."""

    parser = argparse.ArgumentParser(
        description="Check today's Kindle publication and email the result",
    )
    parser.add_argument(
        "--date",
        type=lambda v: parse_date(v, "date"),
        default=None,
        help="Check the publication for this date instead of today (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Run even if the current hour is not one of RUN_HOURS",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the email instead of sending it through SES",
    )
    return parser.parse_args(argv)
