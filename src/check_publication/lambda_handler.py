"""AWS Lambda entry point.

Scheduled hourly; only does work in the configured run hours unless the
invoking event sets "force". An event "date" (YYYY-MM-DD) checks a past day.
"""

from __future__ import annotations

import logging
from typing import Any

from check_publication.check_publication import check_publication
from check_publication.clock import local_now
from check_publication.config import load_config
from check_publication.helpers import build_clients, should_run
from check_publication.notify import make_ses_sender
from common.aws import get_ses_client

# The Lambda runtime installs its own root handler at WARNING
logging.getLogger().setLevel(logging.INFO)
logger = logging.getLogger(__name__)


def handler(event: dict[str, Any] | None = None, context: Any = None) -> Any:
    event = event or {}
    config = load_config(today=event.get("date"))

    hour = local_now(config.timezone).hour
    if not should_run(hour, config.run_hours, force=bool(event.get("force"))):
        message = f"Not running because hour is {hour}"
        logger.info(message)
        return message

    send_email = make_ses_sender(get_ses_client(config.region, config.http_timeout), config)
    report = check_publication(config, build_clients(config), send_email)
    return report.response
