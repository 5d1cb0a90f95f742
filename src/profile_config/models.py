from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Optional[str] = None
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"
    file: FileLoggingSettings = Field(default_factory=FileLoggingSettings)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Inputs for a configuration loader.

    `yaml_path` is resolved against `config_dir` when it is relative. The profile
    document name is derived from `yaml_path`. When `overrides` is None the
    process-wide override registry is consulted; when `environ` is None the
    process environment is used.
    """

    yaml_path: str = "application.yaml"
    profile: Optional[str] = None
    config_dir: Optional[str] = None
    dotenv_path: Optional[str] = None
    overrides: Optional[Mapping[str, str]] = None
    environ: Optional[Mapping[str, str]] = None
