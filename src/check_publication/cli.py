"""CLI for checking the day's Kindle publication."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from check_publication.check_publication import check_publication
from check_publication.clock import local_now
from check_publication.config import ConfigError, load_config
from check_publication.helpers import build_clients, parse_check_publication_args, should_run
from check_publication.notify import log_email, make_ses_sender
from common.aws import get_ses_client
from common.cli_helpers import setup_logging

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = parse_check_publication_args(argv)

    today = args.date.isoformat() if args.date else None
    try:
        config = load_config(today=today)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    hour = local_now(config.timezone).hour
    if not should_run(hour, config.run_hours, force=args.force):
        logger.info("Not running because hour is %d (run hours: %s)", hour, sorted(config.run_hours))
        return 0

    if args.dry_run:
        send_email = log_email
    else:
        send_email = make_ses_sender(get_ses_client(config.region, config.http_timeout), config)

    report = check_publication(config, build_clients(config), send_email)
    return 0 if report.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
