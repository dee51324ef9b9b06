from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from assetsync.app import export_ibc_tokens, sync_assets
from assetsync.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile the Injective asset list")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sync = subparsers.add_parser("sync", help="Merge on-chain tokens into the asset list")
    sync.add_argument(
        "--output",
        type=Path,
        help="Where to write the merged asset list (defaults to config)",
    )
    sync.add_argument(
        "--require-coingecko-id",
        action="store_true",
        help="Only add tokens that have a coinGeckoId",
    )
    sync.add_argument(
        "--publish",
        action="store_true",
        help="Commit the result on a new branch and open a pull request",
    )
    sync.add_argument(
        "--token",
        type=str,
        help="GitHub access token (defaults to GITHUB_TOKEN)",
    )
    sync.add_argument(
        "--branch",
        type=str,
        help="Branch name to publish on (defaults to a timestamped branch)",
    )

    ibc = subparsers.add_parser("ibc-tokens", help="Snapshot IBC token metadata from TFM")
    ibc.add_argument(
        "--output",
        type=Path,
        help="Where to write the IBC token snapshot (defaults to config)",
    )

    args = parser.parse_args(list(argv))
    if getattr(args, "branch", None) is not None and not args.publish:
        parser.error("--branch requires --publish")
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        if parsed_args.command == "sync":
            result = sync_assets(
                output_path=parsed_args.output,
                require_coingecko_id=parsed_args.require_coingecko_id,
                publish=parsed_args.publish,
                token=parsed_args.token,
                branch=parsed_args.branch,
            )
            publication = result.publication
            if publication is not None and not publication.succeeded:
                log.warning(
                    "Publication incomplete on %s: %s", publication.branch, publication.error
                )
        elif parsed_args.command == "ibc-tokens":
            written = export_ibc_tokens(output_path=parsed_args.output)
            if written is None:
                log.warning("No IBC token metadata written")
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during asset sync")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
