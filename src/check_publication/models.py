"""Data models for the publication check."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class RunConfig:
    """Settings for one run, read once from the environment."""
    manifest_url: str
    bucket: str
    stage: str
    today: str
    minimum_article_count: int
    source_address: str
    pass_target_addresses: tuple[str, ...]
    failure_target_addresses: tuple[str, ...]
    run_hours: frozenset[int]
    return_path: str | None = None
    region: str = "eu-west-1"
    timezone: str = "Europe/London"
    http_timeout: float = 10

    @property
    def log_group_name(self) -> str:
        return f"/aws/lambda/kindle-gen-{self.stage}"


@dataclass(frozen=True)
class LogEvent:
    timestamp: int
    message: str


@dataclass(frozen=True)
class LogStream:
    name: str
    last_event_time: int | None


@dataclass(frozen=True)
class PublicationInfo:
    """Article and image counts found under the day's storage prefix."""
    article_count: int
    image_count: int


class FailureKind(Enum):
    NETWORK = "network"
    DATA = "data"
    LOG_SEVERITY = "log severity"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    """A stage failure. reason is either a message or the offending log lines."""
    stage: str
    kind: FailureKind
    reason: str | tuple[str, ...]

    def describe(self) -> str:
        if isinstance(self.reason, str):
            return self.reason
        return "\n".join(self.reason)


StageResult = Union[Ok[T], Failure]
PipelineOutcome = Union[Ok[PublicationInfo], Failure]


@dataclass(frozen=True)
class Email:
    subject: str
    body: str
    recipients: tuple[str, ...]


@dataclass(frozen=True)
class Clients:
    """Collaborator handles a run talks to."""
    s3: Any
    logs: Any
    http: Any


@dataclass(frozen=True)
class RunReport:
    """What a run decided and what the email sender returned."""
    outcome: PipelineOutcome
    email: Email
    response: Any

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Ok)
