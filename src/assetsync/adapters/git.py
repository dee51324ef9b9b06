"""Thin wrapper around the ``git`` command line."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path

from assetsync.domain.errors import PublishError

log = getLogger(__name__)

CommandRunner = Callable[..., subprocess.CompletedProcess[str]]


@dataclass(slots=True)
class GitWorkspace:
    """Branch, commit and push inside an existing checkout."""

    repo_dir: Path
    remote: str = "origin"
    runner: CommandRunner = field(default=subprocess.run)

    def create_branch(self, branch: str) -> None:
        self._run("checkout", "-b", branch)

    def has_changes(self, path: Path) -> bool:
        result = self._run("status", "--porcelain", "--", str(path))
        return bool(result.stdout.strip())

    def commit(self, path: Path, message: str) -> None:
        self._run("add", "--", str(path))
        self._run("commit", "-m", message)

    def push(self, branch: str) -> None:
        self._run("push", "--set-upstream", self.remote, branch)

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        command = ["git", *args]
        log.debug("Running %s", " ".join(command))
        try:
            return self.runner(
                command,
                cwd=self.repo_dir,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise PublishError(f"git {args[0]} failed: {detail}") from exc
        except FileNotFoundError as exc:
            raise PublishError("git executable not found") from exc
