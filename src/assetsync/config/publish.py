"""Settings for proposing the generated asset list upstream."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import env_or_default, env_path, require_env_vars
from .http_resilience import NO_RETRY, ResilienceConfig

GITHUB_API_URL = "https://api.github.com"
DEFAULT_GITHUB_REPOSITORY = "InjectiveLabs/injective-ts"
DEFAULT_BASE_BRANCH = "dev"
DEFAULT_BRANCH_PREFIX = "chore/update-cosmostation-assets"
PULL_REQUEST_TITLE = "chore: update cosmostation assets"
PULL_REQUEST_BODY = (
    "Automated update of the Cosmostation asset list.\n\n"
    "- {appended} new asset(s) discovered from the chain supply\n"
    "- {backfilled} coinGeckoId value(s) backfilled on existing assets\n"
)


@dataclass(frozen=True, slots=True)
class PublishConfig:
    token: str
    repository: str
    base_branch: str
    branch_prefix: str
    repo_dir: Path
    resilience: ResilienceConfig


def get_publish_config(*, token: str | None = None) -> PublishConfig:
    """Build the publish settings; the access token is mandatory here and only here."""

    if token is None or not token.strip():
        token = require_env_vars(("GITHUB_TOKEN",))["GITHUB_TOKEN"]
    return PublishConfig(
        token=token.strip(),
        repository=env_or_default("ASSETSYNC_GITHUB_REPOSITORY", DEFAULT_GITHUB_REPOSITORY),
        base_branch=env_or_default("ASSETSYNC_BASE_BRANCH", DEFAULT_BASE_BRANCH),
        branch_prefix=env_or_default("ASSETSYNC_BRANCH_PREFIX", DEFAULT_BRANCH_PREFIX),
        repo_dir=env_path("ASSETSYNC_REPO_DIR", "."),
        resilience=ResilienceConfig(
            name="github",
            base_url=env_or_default("ASSETSYNC_GITHUB_API_URL", GITHUB_API_URL),
            timeout_seconds=15.0,
            retry=NO_RETRY,
            cache=None,
            default_headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
        ),
    )
