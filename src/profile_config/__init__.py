"""Layered YAML configuration with profile overlays, placeholders and typed binding."""

from profile_config.binding import ConfigBinder, ConfigSchema, ScalarKind, TypeDescriptor
from profile_config.config import ConfigStore, PropertyOverrides, YamlConfigLoader
from profile_config.errors import (
    BindConstructionError,
    ConfigNotFound,
    ConfigParsingError,
    ConfigSchemaError,
    DocumentParseError,
    TypeCoercionError,
)
from profile_config.models import ConfigLoadRequest

__all__ = [
    "BindConstructionError",
    "ConfigBinder",
    "ConfigLoadRequest",
    "ConfigNotFound",
    "ConfigParsingError",
    "ConfigSchema",
    "ConfigSchemaError",
    "ConfigStore",
    "DocumentParseError",
    "PropertyOverrides",
    "ScalarKind",
    "TypeCoercionError",
    "TypeDescriptor",
    "YamlConfigLoader",
]
