"""Configuration loader for the publication check.

Settings come from environment variables (a local .env file is read by the
entry points through python-dotenv).
"""

from __future__ import annotations

import os
from datetime import date
from typing import Mapping

import pytz

from check_publication.clock import DEFAULT_TIMEZONE, format_day, local_now
from check_publication.models import RunConfig
from common.aws import DEFAULT_REGION
from common.cli_helpers import split_csv

REQUIRED = (
    "MANIFEST_URL",
    "KINDLE_BUCKET",
    "STAGE",
    "SOURCE_ADDRESS",
    "PASS_TARGET_ADDRESSES",
    "FAILURE_TARGET_ADDRESSES",
    "MINIMUM_ARTICLE_COUNT",
    "RUN_HOURS",
)


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable run."""


def load_config(environ: Mapping[str, str] | None = None, today: str | None = None) -> RunConfig:
    """Build the run configuration from the environment.

    Args:
        environ: Variables to read (defaults to os.environ)
        today: Date to check, YYYY-MM-DD. Defaults to the local date.

    Returns:
        Loaded RunConfig

    Raises:
        ConfigError: If a required variable is missing or malformed
    """
    if environ is None:
        environ = os.environ

    missing = [name for name in REQUIRED if not environ.get(name, "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    return _parse_config(environ, today)


def _parse_int(environ: Mapping[str, str], name: str) -> int:
    try:
        return int(environ[name])
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {environ[name]!r}") from exc


def _parse_hours(value: str) -> frozenset[int]:
    try:
        hours = frozenset(int(part) for part in split_csv(value))
    except ValueError as exc:
        raise ConfigError(f"RUN_HOURS must be comma-separated integers, got {value!r}") from exc

    if not hours or any(hour < 0 or hour > 23 for hour in hours):
        raise ConfigError(f"RUN_HOURS must list hours between 0 and 23, got {value!r}")
    return hours


def _parse_addresses(environ: Mapping[str, str], name: str) -> tuple[str, ...]:
    addresses = tuple(split_csv(environ[name]))
    if not addresses:
        raise ConfigError(f"{name} must contain at least one address")
    return addresses


def _parse_timezone(tz_name: str) -> str:
    try:
        pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigError(f"TIMEZONE must be a known timezone name, got {tz_name!r}") from exc
    return tz_name


def _parse_today(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"date must be YYYY-MM-DD, got {value!r}") from exc


def _parse_config(environ: Mapping[str, str], today: str | None) -> RunConfig:
    """Parse environment values into a RunConfig."""
    tz_name = _parse_timezone(environ.get("TIMEZONE", DEFAULT_TIMEZONE))

    try:
        http_timeout = float(environ.get("HTTP_TIMEOUT_SECONDS", "10"))
    except ValueError as exc:
        raise ConfigError("HTTP_TIMEOUT_SECONDS must be a number") from exc

    minimum_article_count = _parse_int(environ, "MINIMUM_ARTICLE_COUNT")
    if minimum_article_count < 0:
        raise ConfigError("MINIMUM_ARTICLE_COUNT must not be negative")

    return RunConfig(
        manifest_url=environ["MANIFEST_URL"].strip(),
        bucket=environ["KINDLE_BUCKET"].strip(),
        stage=environ["STAGE"].strip(),
        today=_parse_today(today) if today else format_day(local_now(tz_name)),
        minimum_article_count=minimum_article_count,
        source_address=environ["SOURCE_ADDRESS"].strip(),
        pass_target_addresses=_parse_addresses(environ, "PASS_TARGET_ADDRESSES"),
        failure_target_addresses=_parse_addresses(environ, "FAILURE_TARGET_ADDRESSES"),
        run_hours=_parse_hours(environ["RUN_HOURS"]),
        return_path=environ.get("RETURN_PATH", "").strip() or None,
        region=environ.get("AWS_REGION", DEFAULT_REGION),
        timezone=tz_name,
        http_timeout=http_timeout,
    )
