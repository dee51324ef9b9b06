"""Write asset list files to disk."""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from assetsync.adapters.chainlist.translator import dump_assets
from assetsync.domain.errors import PublishError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assetsync.domain.model import CatalogRecord
    from assetsync.domain.ports.publishing import CatalogWriter

log = getLogger(__name__)

JSON_INDENT = 2


def write_json(path: Path, payload: object) -> Path:
    """Pretty-print ``payload`` to ``path``, replacing the file atomically."""

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=JSON_INDENT, ensure_ascii=False)
                handle.write("\n")
            Path(tmp_name).replace(path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise PublishError(f"Could not write {path}: {exc}") from exc
    log.debug("Wrote %s", path)
    return path


@dataclass(slots=True)
class JsonCatalogFile:
    """Asset list persisted as a JSON array."""

    path: Path

    def write(self, records: Sequence[CatalogRecord]) -> Path:
        return write_json(self.path, dump_assets(records))


if TYPE_CHECKING:
    _writer_check: CatalogWriter = JsonCatalogFile(Path())
