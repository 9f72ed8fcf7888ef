from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from animal_list.core.config import AppConfig, parse_config


def build_parser(description: str = "Animal list demo") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        type=str,
        help="JSON file with 'catalog' and 'images' sections",
    )
    parser.add_argument(
        "--asset-dir",
        type=str,
        help="Directory holding <Name>.png and <Name>Thumb.png artwork",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write log output to this file",
    )
    return parser


def parse_args(argv: Sequence[str]) -> tuple[argparse.Namespace, list[str]]:
    return build_parser().parse_known_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the config from ``--config`` and ``--asset-dir``; exits with status 2 on a bad file."""
    config = AppConfig()
    if args.config:
        path = Path(args.config).expanduser()
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            build_parser().error(f"Cannot read config {path}: {exc}")
        parsed, error = parse_config(raw)
        if error:
            build_parser().error(error)
        config = parsed
    if args.asset_dir:
        config.images.asset_dir = args.asset_dir
    return config
