"""HEAD checks against the manifest URL and the dated location it points to."""

import logging
from urllib.parse import urljoin

from check_publication.models import Failure, FailureKind, Ok, StageResult

logger = logging.getLogger(__name__)

STAGE = "redirect check"

MOVED = 302
OK = 200


def get_redirect(http, url: str, today: str, timeout: float = 10) -> StageResult[str]:
    """Return the redirect target of url, which must mention today's date."""
    response = http.head(url, allow_redirects=False, timeout=timeout)

    if response.status_code != MOVED:
        return Failure(
            STAGE,
            FailureKind.NETWORK,
            f"Expected status code {MOVED} (moved) for url {url}, got {response.status_code}",
        )

    location = response.headers.get("Location", "")
    if today not in location:
        return Failure(
            STAGE,
            FailureKind.NETWORK,
            f"Expected today's date ({today}), but got {location}",
        )

    target = urljoin(url, location)
    logger.info("Manifest %s redirects to %s", url, target)
    return Ok(target)


def check_target(http, url: str, timeout: float = 10) -> StageResult[int]:
    response = http.head(url, allow_redirects=False, timeout=timeout)
    if response.status_code != OK:
        return Failure(
            STAGE,
            FailureKind.NETWORK,
            f"Expected status code {OK} for url {url}, got {response.status_code}",
        )
    return Ok(response.status_code)


def verify_redirect(http, manifest_url: str, today: str, timeout: float = 10) -> StageResult[str]:
    """Both steps in order; the target is only probed if the redirect is right."""
    redirect = get_redirect(http, manifest_url, today, timeout)
    if isinstance(redirect, Failure):
        return redirect

    target = check_target(http, redirect.value, timeout)
    if isinstance(target, Failure):
        return target

    return redirect
