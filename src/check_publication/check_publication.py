"""Run the publication checks in order and send exactly one report email."""

from __future__ import annotations

import logging
from datetime import datetime
from functools import partial
from typing import Callable

import requests
from botocore.exceptions import BotoCoreError, ClientError

from check_publication import check_logs, check_redirect, count_artifacts
from check_publication.clock import local_now, run_hour_segment
from check_publication.models import (
    Clients,
    Failure,
    FailureKind,
    PipelineOutcome,
    RunConfig,
    RunReport,
    StageResult,
)
from check_publication.notify import SendEmailFn, compose_notification

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (requests.RequestException, BotoCoreError, ClientError)


def _run_stage(stage: str, check: Callable[..., StageResult], *args) -> StageResult:
    """
    Run one check, turning remote-service errors into a transport Failure.

    Only TRANSPORT_ERRORS are converted. Anything else is a bug in the check
    and propagates, so that run ends without a report email.
    """
    logger.info("Running %s", stage)
    try:
        result = check(*args)
    except TRANSPORT_ERRORS as exc:
        logger.exception("%s could not reach a remote service", stage)
        return Failure(stage, FailureKind.TRANSPORT, f"{type(exc).__name__}: {exc}")

    if isinstance(result, Failure):
        logger.warning("%s failed: %s", stage, result.describe())
    return result


def run_checks(config: RunConfig, clients: Clients, now: datetime) -> PipelineOutcome:
    """
    Log scan, then redirect check, then artifact count.

    Returns the first failure without running later stages, or the
    publication counts when everything passes.
    """
    logs = _run_stage(check_logs.STAGE, check_logs.scan_logs, clients.logs, config.log_group_name, config.today)
    if isinstance(logs, Failure):
        return logs

    redirect = _run_stage(
        check_redirect.STAGE,
        check_redirect.verify_redirect,
        clients.http,
        config.manifest_url,
        config.today,
        config.http_timeout,
    )
    if isinstance(redirect, Failure):
        return redirect

    prefix = count_artifacts.build_prefix(config.stage, config.today, run_hour_segment(now))
    return _run_stage(
        count_artifacts.STAGE,
        count_artifacts.count_artifacts,
        clients.s3,
        config.bucket,
        prefix,
        config.minimum_article_count,
    )


def check_publication(
    config: RunConfig,
    clients: Clients,
    send_email: SendEmailFn,
    clock: Callable[[], datetime] | None = None,
) -> RunReport:
    """Check today's publication and email the result."""
    if clock is None:
        clock = partial(local_now, config.timezone)

    logger.info("Checking publication for %s (stage=%s)", config.today, config.stage)
    outcome = run_checks(config, clients, clock())

    email = compose_notification(outcome, config, clock())
    response = send_email(email.subject, email.body, list(email.recipients))

    report = RunReport(outcome=outcome, email=email, response=response)
    if report.succeeded:
        logger.info("Publication for %s passed all checks", config.today)
    else:
        logger.warning("Publication for %s failed: %s", config.today, email.subject)
    return report
