from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from profile_config.errors import DocumentParseError


class YamlDocumentLoader:
    def read(self, path: Path) -> Optional[Mapping[str, Any]]:
        try:
            import yaml  # type: ignore[import-not-found]
        except ModuleNotFoundError as e:  # pragma: no cover
            raise ModuleNotFoundError(
                "Missing dependency: PyYAML is required to load YAML config files. Install 'PyYAML'."
            ) from e

        if not path.is_file():
            return None

        try:
            with path.open("rb") as fh:
                data = yaml.safe_load(fh)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise DocumentParseError(str(path), "Error reading YAML file.") from e

        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise DocumentParseError(
                str(path), f"Top-level YAML must be a mapping, got: {type(data).__name__}."
            )
        return data
