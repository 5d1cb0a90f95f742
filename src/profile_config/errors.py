from __future__ import annotations

from typing import Any


class ConfigParsingError(RuntimeError):
    """Base error for every failure raised while loading or binding configuration."""


class ConfigNotFound(ConfigParsingError):
    pass


class DocumentParseError(ConfigParsingError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{message} path={path}")
        self.path = path


class ConfigSchemaError(ConfigParsingError):
    pass


class TypeCoercionError(ConfigParsingError):
    def __init__(self, field: str, raw: Any, kind: str) -> None:
        super().__init__(f"Cannot convert value for field '{field}' to {kind}. raw={raw!r}")
        self.field = field
        self.raw = raw
        self.kind = kind


class BindConstructionError(ConfigParsingError):
    pass
