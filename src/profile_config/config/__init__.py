"""Loading of layered YAML documents into a flat, frozen property store."""

from profile_config.config.document import YamlDocumentLoader
from profile_config.config.flatten import flatten, flatten_tree
from profile_config.config.loader import YamlConfigLoader, profile_document_path
from profile_config.config.placeholders import (
    DEFAULT_OVERRIDES,
    PLACEHOLDER_PATTERN,
    PropertyOverrides,
    resolve_placeholders,
)
from profile_config.config.store import ConfigStore, ConfigStoreBuilder

__all__ = [
    "ConfigStore",
    "ConfigStoreBuilder",
    "DEFAULT_OVERRIDES",
    "PLACEHOLDER_PATTERN",
    "PropertyOverrides",
    "YamlConfigLoader",
    "YamlDocumentLoader",
    "flatten",
    "flatten_tree",
    "profile_document_path",
    "resolve_placeholders",
]
