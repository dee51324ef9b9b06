"""Where generated files and the HTTP cache live."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import env_path

APP_DIR_NAME: Final[str] = "assetsync"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"
# relative to the injective-ts checkout the sync runs in
DEFAULT_ASSETS_OUTPUT_PATH: Final[str] = "src/services/cosmostation-tokens/automated-assets.json"
DEFAULT_IBC_OUTPUT_PATH: Final[str] = "src/services/ibc/ibcTokenMetadata.json"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    assets_output_path: Path = Path(DEFAULT_ASSETS_OUTPUT_PATH)
    ibc_output_path: Path = Path(DEFAULT_IBC_OUTPUT_PATH)
    http_cache_filename: str = HTTP_CACHE_FILENAME

    def http_cache_path(self, *, ensure: bool = True) -> Path:
        """Path of the sqlite HTTP cache; creates the data dir unless ``ensure`` is off."""
        data_dir = self.data_dir.expanduser().resolve()
        if ensure:
            data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / self.http_cache_filename


def _default_data_dir() -> Path:
    xdg_data_home = os.getenv("XDG_DATA_HOME")
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME


def get_storage_config() -> StorageConfig:
    return StorageConfig(
        data_dir=env_path("ASSETSYNC_DATA_DIR", _default_data_dir()),
        assets_output_path=env_path("ASSETSYNC_OUTPUT_PATH", DEFAULT_ASSETS_OUTPUT_PATH),
        ibc_output_path=env_path("ASSETSYNC_IBC_OUTPUT_PATH", DEFAULT_IBC_OUTPUT_PATH),
    )
