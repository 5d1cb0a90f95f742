from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

from profile_config.config.store import ConfigStore
from profile_config.models import ConfigLoadRequest


class DocumentLoader(Protocol):
    def read(self, path: Path) -> Optional[Mapping[str, Any]]:
        """
        Parse one structured document into a tree of mappings and scalars.

        Returns None when the document does not exist and an empty mapping when it
        exists but holds no data.
        """


class ConfigLoader(Protocol):
    """
    Loads the effective flat configuration.

    Precedence, highest first:
    - profile document values over base document values
    - property overrides, then environment, then inline defaults for placeholders
    """

    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> ConfigStore:
        ...
