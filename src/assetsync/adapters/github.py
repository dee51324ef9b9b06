"""Open pull requests for the regenerated asset list on GitHub."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict

from assetsync.adapters.http_resilience import ClientFactory, ResilientClient
from assetsync.config.publish import PULL_REQUEST_BODY, PULL_REQUEST_TITLE
from assetsync.domain.errors import PublishError
from assetsync.domain.ports.publishing import PublicationResult

if TYPE_CHECKING:
    from pathlib import Path

    from assetsync.adapters.git import GitWorkspace
    from assetsync.config.http_resilience import ResilienceConfig
    from assetsync.config.publish import PublishConfig
    from assetsync.domain.reconciliation import ReconciliationResult

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PullRequestPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int
    html_url: str


@dataclass(slots=True)
class GitHubPullRequests:
    """Minimal GitHub REST client; requests are never retried."""

    config: PublishConfig
    client_factory: ClientFactory = field(default=_default_client_factory)

    def open(self, *, head: str, title: str, body: str) -> PullRequestPayload:
        return asyncio.run(self._open_async(head=head, title=title, body=body))

    async def _open_async(self, *, head: str, title: str, body: str) -> PullRequestPayload:
        path = f"/repos/{self.config.repository}/pulls"
        payload = {"title": title, "head": head, "base": self.config.base_branch, "body": body}
        headers = {"Authorization": f"Bearer {self.config.token}"}
        try:
            async with self.client_factory(self.config.resilience) as client:
                response = await client.post(path, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise PublishError(f"Could not reach GitHub: {exc}") from exc

        if response.status_code != httpx.codes.CREATED:
            raise PublishError(
                f"GitHub refused pull request ({response.status_code}): {response.text}"
            )
        return PullRequestPayload.model_validate_json(response.content)


@dataclass(slots=True)
class GitHubPublisher:
    """Commit the written asset list on a fresh branch and open a pull request.

    Git failures raise :class:`PublishError`. A failed pull request is logged
    and reported on the result; the pushed branch stays as it is.
    """

    workspace: GitWorkspace
    pull_requests: GitHubPullRequests
    branch: str | None = None
    now_provider: Callable[[], datetime] = field(default=_utcnow)

    def publish(self, path: Path, result: ReconciliationResult) -> PublicationResult:
        branch = self.branch or self._branch_name()
        self.workspace.create_branch(branch)
        if not self.workspace.has_changes(path):
            log.info("No changes to %s; nothing to propose", path)
            return PublicationResult(branch=branch, error="nothing to commit")

        self.workspace.commit(path, PULL_REQUEST_TITLE)
        self.workspace.push(branch)
        log.info("Pushed %s", branch)

        body = PULL_REQUEST_BODY.format(
            appended=len(result.appended),
            backfilled=len(result.backfilled),
        )
        try:
            pull_request = self.pull_requests.open(head=branch, title=PULL_REQUEST_TITLE, body=body)
        except PublishError as exc:
            log.error("Error creating pull request for %s: %s", branch, exc)  # noqa: TRY400
            return PublicationResult(branch=branch, error=str(exc))

        log.info("Opened pull request #%s: %s", pull_request.number, pull_request.html_url)
        return PublicationResult(branch=branch, pull_request_url=pull_request.html_url)

    def _branch_name(self) -> str:
        stamp = self.now_provider().strftime("%Y%m%d%H%M%S")
        return f"{self.pull_requests.config.branch_prefix}-{stamp}"
