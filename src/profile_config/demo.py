from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from profile_config.binding import ConfigSchema
from profile_config.models import LoggingSettings


class DatabaseConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = "jdbc:h2:mem:default"
    username: str = "sa"
    password: str = ""
    pool_size: int = 5


class AppConfig(BaseModel):
    """Sample application settings bound from the `app.*` keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    timeout: int = 0
    debug: bool = False
    tags: list[str] = Field(default_factory=list)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)


def build_schema() -> ConfigSchema:
    schema = ConfigSchema()
    schema.register(AppConfig, prefix="app")
    schema.register(LoggingSettings, prefix="logging")
    return schema
