from __future__ import annotations

from pathlib import Path

import pytest

from assetsync.config import (
    MissingConfigurationError,
    env_or_default,
    env_path,
    get_chain_config,
    get_publish_config,
    get_storage_config,
    require_env_vars,
)
from assetsync.config.chain import DEFAULT_LCD_URL, DEFAULT_TOKEN_LIST_URL
from assetsync.config.publish import DEFAULT_BASE_BRANCH


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    assert require_env_vars(["EXAMPLE_VAR"]) == {"EXAMPLE_VAR": "value"}


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "   ")

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["MISSING_B", "MISSING_A"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_env_or_default_ignores_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", " ")
    assert env_or_default("EXAMPLE_VAR", "fallback") == "fallback"

    monkeypatch.setenv("EXAMPLE_VAR", " set ")
    assert env_or_default("EXAMPLE_VAR", "fallback") == "set"


def test_env_path_expands_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setenv("EXAMPLE_PATH", "~/out.json")
    monkeypatch.delenv("UNSET_EXAMPLE_PATH", raising=False)

    assert env_path("EXAMPLE_PATH", "default.json") == Path("/home/tester/out.json")
    assert env_path("UNSET_EXAMPLE_PATH", "default.json") == Path("default.json")


def test_chain_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ASSETSYNC_LCD_URL", raising=False)
    monkeypatch.delenv("ASSETSYNC_TOKEN_LIST_URL", raising=False)
    monkeypatch.delenv("ASSETSYNC_ASSET_LIST_URL", raising=False)

    config = get_chain_config()

    assert config.lcd.base_url == DEFAULT_LCD_URL
    assert config.token_list_url == DEFAULT_TOKEN_LIST_URL
    assert config.asset_list_url == (
        "https://raw.githubusercontent.com/shane-moore/chainlist/main/chain/injective/assets.json"
    )
    assert config.supply_page_limit == 1000


def test_chain_config_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ASSETSYNC_LCD_URL", "https://lcd.example")
    monkeypatch.setenv("ASSETSYNC_ASSET_LIST_URL", "https://assets.example/assets.json")

    config = get_chain_config()

    assert config.lcd.base_url == "https://lcd.example"
    assert config.asset_list_url == "https://assets.example/assets.json"


def test_storage_config_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ASSETSYNC_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("ASSETSYNC_OUTPUT_PATH", str(tmp_path / "assets.json"))

    config = get_storage_config()

    assert config.assets_output_path == tmp_path / "assets.json"
    assert config.http_cache_path() == (tmp_path / "data" / "http_cache.db").resolve()
    assert (tmp_path / "data").is_dir()


def test_publish_config_requires_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(MissingConfigurationError, match="GITHUB_TOKEN"):
        get_publish_config()


def test_publish_config_prefers_explicit_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")
    monkeypatch.delenv("ASSETSYNC_BASE_BRANCH", raising=False)
    monkeypatch.setenv("ASSETSYNC_REPO_DIR", "/checkout")

    config = get_publish_config(token=" explicit ")

    assert config.token == "explicit"
    assert config.base_branch == DEFAULT_BASE_BRANCH
    assert config.repo_dir == Path("/checkout")
    assert config.resilience.retry.total == 0


def test_publish_config_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")

    assert get_publish_config(token="  ").token == "from-env"
