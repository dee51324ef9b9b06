from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from assetsync.adapters.filesystem import JsonCatalogFile, write_json
from assetsync.domain.errors import PublishError
from tests.support.tokens import curated_record

if TYPE_CHECKING:
    from pathlib import Path


def test_write_json_formatting(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.json"

    write_json(target, [{"denom": "inj", "symbol": "ÜSD"}])

    text = target.read_text(encoding="utf-8")
    assert text == '[\n  {\n    "denom": "inj",\n    "symbol": "ÜSD"\n  }\n]\n'
    assert [p.name for p in target.parent.iterdir()] == ["out.json"]


def test_write_json_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "out.json"
    target.write_text("stale", encoding="utf-8")

    write_json(target, [])

    assert target.read_text(encoding="utf-8") == "[]\n"


def test_write_json_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(PublishError, match="Could not write"):
        write_json(blocker / "out.json", [])


def test_catalog_file_keeps_curated_extras(tmp_path: Path) -> None:
    target = tmp_path / "assets.json"
    catalog = JsonCatalogFile(target)

    assert catalog.write([curated_record(coin_gecko_id=None)]) == target

    [entry] = json.loads(target.read_text(encoding="utf-8"))
    assert entry["image"] == "injective/asset/inj.png"
    assert entry["origin_chain"] == "injective"
    assert "coinGeckoId" not in entry
