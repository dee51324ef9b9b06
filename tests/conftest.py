from __future__ import annotations

import json
from pathlib import Path

import pytest

from assetsync.config.http_resilience import NO_RETRY, ResilienceConfig

DATA_DIR = Path(__file__).resolve().parent / "data"


def _load_json(name: str) -> list[dict[str, object]]:
    with (DATA_DIR / name).open() as handle:
        return json.load(handle)


@pytest.fixture
def chainlist_payload() -> list[dict[str, object]]:
    return _load_json("chainlist_assets.json")


@pytest.fixture
def token_list_payload() -> list[dict[str, object]]:
    return _load_json("injective_tokens.json")


@pytest.fixture
def resilience() -> ResilienceConfig:
    return ResilienceConfig(name="test", retry=NO_RETRY, cache=None)


@pytest.fixture
def lcd_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="lcd", base_url="https://lcd.example", retry=NO_RETRY, cache=None)
