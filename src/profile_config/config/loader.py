from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from profile_config.config.document import YamlDocumentLoader
from profile_config.config.interfaces import DocumentLoader
from profile_config.config.placeholders import DEFAULT_OVERRIDES
from profile_config.config.store import ConfigStore, ConfigStoreBuilder
from profile_config.errors import ConfigNotFound, ConfigParsingError
from profile_config.models import ConfigLoadRequest

logger = logging.getLogger(__name__)


def profile_document_path(path: Path, profile: str) -> Path:
    """Insert ``-{profile}`` before the extension: application.yaml -> application-local.yaml."""
    return path.with_name(f"{path.stem}-{profile}{path.suffix}")


def _resolve_path(yaml_path: str, config_dir: Optional[str]) -> Path:
    path = Path(yaml_path)
    if config_dir is not None and not path.is_absolute():
        return Path(config_dir) / path
    return path


def _read_dotenv(dotenv_path: Path) -> Mapping[str, Optional[str]]:
    try:
        from dotenv import dotenv_values  # type: ignore[import-not-found]
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "Missing dependency: python-dotenv is required to load .env. Install 'python-dotenv'."
        ) from e

    if not dotenv_path.exists():
        return {}
    return dotenv_values(dotenv_path)


class YamlConfigLoader:
    def __init__(self, document_loader: Optional[DocumentLoader] = None) -> None:
        self._documents: DocumentLoader = document_loader or YamlDocumentLoader()

    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> ConfigStore:
        try:
            return self._load(request)
        except ConfigParsingError:
            raise
        except Exception as e:
            raise ConfigParsingError(f"Failed to load configuration: {e}") from e

    def _load(self, request: ConfigLoadRequest) -> ConfigStore:
        builder = ConfigStoreBuilder()

        base_path = _resolve_path(request.yaml_path, request.config_dir)
        logger.info("Loading configuration document. path=%s", base_path)
        base_tree = self._documents.read(base_path)
        if not base_tree:
            raise ConfigNotFound(f"Default configuration file not found or empty: {base_path}")
        builder.merge(base_tree)

        profile = (request.profile or "").strip()
        if profile:
            self._merge_profile(builder, profile_document_path(base_path, profile))

        overrides: Mapping[str, str] = (
            request.overrides if request.overrides is not None else DEFAULT_OVERRIDES.snapshot()
        )
        environ: Mapping[str, str] = request.environ if request.environ is not None else os.environ
        dotenv = _read_dotenv(Path(request.dotenv_path)) if request.dotenv_path is not None else None
        builder.resolve(overrides=overrides, environ=environ, dotenv=dotenv)

        store = builder.freeze()
        logger.info("Configuration loaded. path=%s profile=%s keys=%d", base_path, profile or "-", len(store))
        return store

    def _merge_profile(self, builder: ConfigStoreBuilder, profile_path: Path) -> None:
        logger.info("Loading profile document. path=%s", profile_path)
        profile_tree: Optional[Mapping[str, Any]] = self._documents.read(profile_path)
        if profile_tree is None:
            logger.info("Profile document not found, using base configuration only. path=%s", profile_path)
            return
        if not profile_tree:
            logger.info("Profile document is empty. path=%s", profile_path)
            return
        builder.merge(profile_tree)
