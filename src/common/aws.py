"""AWS client factories and thin wrappers around the calls the checks make."""

import logging
from typing import Any, Iterator

import boto3
from botocore.config import Config

logger = logging.getLogger(__name__)

DEFAULT_REGION = "eu-west-1"


def _client_config(timeout: float) -> Config:
    return Config(connect_timeout=timeout, read_timeout=timeout)


def get_s3_client(region: str = DEFAULT_REGION, timeout: float = 10):
    """Create S3 client."""
    return boto3.client("s3", region_name=region, config=_client_config(timeout))


def get_logs_client(region: str = DEFAULT_REGION, timeout: float = 10):
    """Create CloudWatch Logs client."""
    return boto3.client("logs", region_name=region, config=_client_config(timeout))


def get_ses_client(region: str = DEFAULT_REGION, timeout: float = 10):
    """Create SES client."""
    return boto3.client("ses", region_name=region, config=_client_config(timeout))


def list_s3_keys(s3, bucket: str, prefix: str) -> list[str]:
    """List every object key under an S3 prefix."""
    keys = []
    paginator = s3.get_paginator("list_objects_v2")

    for page in paginator.paginate(Bucket=bucket, Prefix=prefix):
        for obj in page.get("Contents", []):
            keys.append(obj["Key"])

    return keys


def describe_recent_log_streams(logs, log_group_name: str, limit: int = 2) -> list[dict]:
    """Return the most recently written streams of a log group, newest first."""
    response = logs.describe_log_streams(
        logGroupName=log_group_name,
        orderBy="LastEventTime",
        descending=True,
        limit=limit,
    )
    return response.get("logStreams", [])


def iter_log_events(logs, log_group_name: str, log_stream_name: str) -> Iterator[dict]:
    """
    Yield every event of a log stream from the head.

    get_log_events hands back the same forward token once the end of the
    stream is reached, which is how pagination terminates.
    """
    kwargs: dict[str, Any] = {
        "logGroupName": log_group_name,
        "logStreamName": log_stream_name,
        "startFromHead": True,
    }
    previous_token = None

    while True:
        response = logs.get_log_events(**kwargs)
        yield from response.get("events", [])

        token = response.get("nextForwardToken")
        if token is None or token == previous_token:
            return
        previous_token = token
        kwargs["nextToken"] = token


def send_text_email(
    ses,
    subject: str,
    body: str,
    to_addresses: list[str],
    source: str,
    return_path: str | None = None,
) -> dict:
    """Send a plain-text UTF-8 email through SES."""
    request: dict[str, Any] = {
        "Destination": {"ToAddresses": list(to_addresses)},
        "Message": {
            "Subject": {"Charset": "UTF-8", "Data": subject},
            "Body": {"Text": {"Charset": "UTF-8", "Data": body}},
        },
        "Source": source,
    }
    if return_path:
        request["ReturnPath"] = return_path

    response = ses.send_email(**request)
    logger.info("Sent email '%s' to %s (MessageId=%s)", subject, ", ".join(to_addresses), response.get("MessageId"))
    return response
