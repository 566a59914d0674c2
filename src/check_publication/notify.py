"""Build and deliver the success or failure email for a run."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from check_publication.clock import is_bst_clock_forward_time, is_christmas_day
from check_publication.models import Email, Failure, Ok, PipelineOutcome, PublicationInfo, RunConfig
from common.aws import send_text_email

logger = logging.getLogger(__name__)

SendEmailFn = Callable[[str, str, list[str]], dict]

CHRISTMAS_SUBJECT = "No kindle publication on Christmas Day. Merry Christmas!"


def build_success_email(info: PublicationInfo, config: RunConfig) -> Email:
    return Email(
        subject=f"Kindle publication succeeded ({config.today})",
        body=(
            f"The Kindle edition for {config.today} was successfully published.\n"
            f"It contains {info.article_count} articles with {info.image_count} images."
        ),
        recipients=config.pass_target_addresses,
    )


def build_failure_subject(today: str, now: datetime) -> str:
    """
    Pick the failure subject for the moment the email is written.

    Christmas wins over the clock change; both are judged on now, not on
    the date being checked.
    """
    if is_christmas_day(now):
        return CHRISTMAS_SUBJECT
    if is_bst_clock_forward_time(now):
        return f"Kindle publication check failed ({today}) due to BST clock change"
    return f"Kindle publication FAILED ({today})"


def build_failure_email(failure: Failure, config: RunConfig, now: datetime) -> Email:
    return Email(
        subject=build_failure_subject(config.today, now),
        body=(
            f"The Kindle edition for {config.today} was not successfully published. "
            f"The error was: \n'{failure.describe()}'\n"
            f"Failed stage: {failure.stage} ({failure.kind.value} error)"
        ),
        recipients=config.failure_target_addresses,
    )


def compose_notification(outcome: PipelineOutcome, config: RunConfig, now: datetime) -> Email:
    if isinstance(outcome, Ok):
        return build_success_email(outcome.value, config)
    return build_failure_email(outcome, config, now)


def make_ses_sender(ses, config: RunConfig) -> SendEmailFn:
    """Send through SES from the configured source address."""

    def send_email(subject: str, body: str, recipients: list[str]) -> dict:
        return send_text_email(
            ses,
            subject,
            body,
            recipients,
            source=config.source_address,
            return_path=config.return_path,
        )

    return send_email


def log_email(subject: str, body: str, recipients: list[str]) -> dict:
    """Stand-in sender for dry runs: log the email instead of sending it."""
    logger.info("Subject: %s", subject)
    logger.info("To: %s", ", ".join(recipients))
    logger.info("%s", body)
    return {"MessageId": "dry-run"}
