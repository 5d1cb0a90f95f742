from __future__ import annotations

import logging

from profile_config import ConfigBinder, ConfigLoadRequest, YamlConfigLoader
from profile_config.config import DEFAULT_OVERRIDES
from profile_config.demo import AppConfig, build_schema
from profile_config.logging import init_logging
from profile_config.models import LoggingSettings


def _load(profile: str | None = None) -> AppConfig:
    store = YamlConfigLoader().load(ConfigLoadRequest(yaml_path="examples/config/application.yaml", profile=profile))
    binder = ConfigBinder(store, build_schema())
    init_logging(binder.bind(LoggingSettings))
    return binder.bind(AppConfig)


def main() -> None:
    logger = logging.getLogger("smoke")

    config = _load()
    logger.info("Default config: %s", config)

    local_config = _load("local")
    logger.info("Local config: %s", local_config)

    DEFAULT_OVERRIDES.set("DB_URL", "jdbc:env")
    try:
        env_config = _load()
    finally:
        DEFAULT_OVERRIDES.remove("DB_URL")
    logger.info("With override: %s", env_config)


if __name__ == "__main__":
    main()
