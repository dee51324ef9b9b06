from __future__ import annotations

import logging
from pathlib import Path

import pytest

from assetsync.config import MissingConfigurationError
from assetsync.domain.ports.publishing import PublicationResult
from assetsync.ui import cli as cli_module


class _Result:
    def __init__(self, publication: PublicationResult | None = None) -> None:
        self.publication = publication


def test_sync_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> _Result:
        captured.update(kwargs)
        return _Result()

    monkeypatch.setattr(cli_module, "sync_assets", fake_sync)

    cli_module.main(["sync"])

    assert captured == {
        "output_path": None,
        "require_coingecko_id": False,
        "publish": False,
        "token": None,
        "branch": None,
    }


def test_sync_with_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> _Result:
        captured.update(kwargs)
        return _Result(PublicationResult(branch="chore/x", error="nothing to commit"))

    levels: list[int] = []

    def fake_configure_logging(*, level: int = logging.INFO, **_kwargs: object) -> None:
        levels.append(level)

    monkeypatch.setattr(cli_module, "sync_assets", fake_sync)
    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)

    cli_module.main(
        [
            "--verbose",
            "sync",
            "--output",
            "out/assets.json",
            "--require-coingecko-id",
            "--publish",
            "--token",
            "abc",
            "--branch",
            "chore/x",
        ]
    )

    assert captured["output_path"] == Path("out/assets.json")
    assert captured["require_coingecko_id"] is True
    assert captured["publish"] is True
    assert captured["token"] == "abc"
    assert captured["branch"] == "chore/x"
    assert levels == [logging.INFO, logging.DEBUG]


def test_branch_requires_publish() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync", "--branch", "chore/x"])

    assert excinfo.value.code == 2


def test_configuration_error_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(**_kwargs: object) -> _Result:
        raise MissingConfigurationError("Missing configuration for: GITHUB_TOKEN")

    monkeypatch.setattr(cli_module, "sync_assets", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync", "--publish"])

    assert excinfo.value.code == 2


def test_runtime_failure_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(**_kwargs: object) -> _Result:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "sync_assets", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync"])

    assert excinfo.value.code == 1


def test_ibc_tokens_command(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_export(**kwargs: object) -> int:
        captured.update(kwargs)
        return 3

    monkeypatch.setattr(cli_module, "export_ibc_tokens", fake_export)

    cli_module.main(["ibc-tokens", "--output", "ibc.json"])

    assert captured == {"output_path": Path("ibc.json")}


def test_missing_command_is_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
