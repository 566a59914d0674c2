"""Count the articles and images the publisher wrote to S3."""

import logging

from check_publication.models import Failure, FailureKind, Ok, PublicationInfo, StageResult
from common.aws import list_s3_keys

logger = logging.getLogger(__name__)

STAGE = "artifact count"

ARTICLE_SUFFIX = ".nitf.xml"
IMAGE_SUFFIX = ".jpg"


def build_prefix(stage: str, today: str, run_hour: str) -> str:
    return f"{stage}/{today}/{run_hour}"


def summarize_keys(keys: list[str]) -> PublicationInfo:
    return PublicationInfo(
        article_count=sum(1 for key in keys if key.endswith(ARTICLE_SUFFIX)),
        image_count=sum(1 for key in keys if key.endswith(IMAGE_SUFFIX)),
    )


def validate_publication_info(info: PublicationInfo, minimum_article_count: int) -> StageResult[PublicationInfo]:
    if info.article_count >= minimum_article_count:
        return Ok(info)
    return Failure(
        STAGE,
        FailureKind.DATA,
        f"Expected at least {minimum_article_count} articles, but there are only {info.article_count}",
    )


def count_artifacts(s3, bucket: str, prefix: str, minimum_article_count: int) -> StageResult[PublicationInfo]:
    """List everything under the prefix and require enough articles."""
    keys = list_s3_keys(s3, bucket, prefix)
    info = summarize_keys(keys)
    logger.info(
        "Found %d articles and %d images under s3://%s/%s",
        info.article_count,
        info.image_count,
        bucket,
        prefix,
    )
    return validate_publication_info(info, minimum_article_count)
