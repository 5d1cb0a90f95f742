from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from profile_config.binding import ConfigBinder
from profile_config.config import YamlConfigLoader
from profile_config.demo import AppConfig, build_schema
from profile_config.errors import ConfigParsingError
from profile_config.logging import init_logging
from profile_config.models import ConfigLoadRequest, LoggingSettings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="profile-config", description="Load and bind a layered YAML configuration")
    parser.add_argument(
        "--config",
        default="application.yaml",
        help="Path to the base YAML document (default: application.yaml)",
    )
    parser.add_argument(
        "--profile",
        default=None,
        help="Profile name; loads <name>-<profile>.<ext> on top of the base document",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Property override consulted before environment variables (repeatable)",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Optional .env file used for placeholders missing from the environment",
    )
    return parser


def _parse_overrides(items: Sequence[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for item in items:
        if "=" not in item:
            raise ValueError(f"Override must be NAME=VALUE: {item}")
        name, value = item.split("=", 1)
        overrides[name.strip()] = value
    return overrides


def run(argv: Optional[Sequence[str]] = None) -> AppConfig:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        overrides = _parse_overrides(args.overrides)
    except ValueError as e:
        parser.error(str(e))
    request = ConfigLoadRequest(
        yaml_path=args.config,
        profile=args.profile,
        dotenv_path=args.dotenv,
        overrides=overrides or None,
    )
    store = YamlConfigLoader().load(request)
    binder = ConfigBinder(store, build_schema())

    init_logging(binder.bind(LoggingSettings))
    config = binder.bind(AppConfig)
    logger.info("Configuration bound. profile=%s config=%s", args.profile or "-", config)
    return config


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        run(argv)
    except (ConfigParsingError, ValueError) as e:
        logger.error("Failed to load configuration. error=%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
