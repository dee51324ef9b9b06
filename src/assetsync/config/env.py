"""Read settings from the process environment.

Blank values count as unset everywhere, so an empty ``GITHUB_TOKEN=`` line in
``.env`` behaves like a missing one.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return every variable in ``names``; raise naming all of those that are unset."""

    values = {name: _read(name) for name in names}
    missing = sorted(name for name, value in values.items() if value is None)
    if missing:
        raise MissingConfigurationError(f"Missing configuration for: {', '.join(missing)}")
    return {name: value for name, value in values.items() if value is not None}


def env_or_default(name: str, default: str) -> str:
    value = _read(name)
    return default if value is None else value


def env_path(name: str, default: Path | str) -> Path:
    return Path(env_or_default(name, str(default))).expanduser()
