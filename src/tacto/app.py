"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tacto import __version__
from tacto.config import GameSettings
from tacto.core.enums import StorageSource


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tacto", description="N×N tic-tac-toe")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--size", type=int, default=3, help="board side length (default: 3)")
    parser.add_argument(
        "--storage",
        choices=[source.value for source in StorageSource],
        default=StorageSource.DURABLE.value,
        help="storage selected when the window opens",
    )
    parser.add_argument(
        "--settings-file",
        type=Path,
        default=None,
        help="INI file for durable saves instead of the platform settings store",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> tuple[GameSettings, str]:
    """Parse *argv* into game settings and a log level name."""
    args = _build_parser().parse_args(argv)
    settings = GameSettings(
        rows=args.size,
        columns=args.size,
        default_source=StorageSource(args.storage),
        settings_path=args.settings_file,
    )
    return settings, args.log_level


def main(argv: list[str] | None = None) -> None:
    """Launch the tacto application."""
    from tacto.ui.bootstrap import run_application

    settings, log_level = settings_from_args(argv)
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(settings, [sys.argv[0]]))


if __name__ == "__main__":
    main()
