from __future__ import annotations

import logging
import re
from typing import Any, Mapping, MutableMapping, Optional

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"^\$\{([^:}]+)(?::([^}]+))?\}$")


class PropertyOverrides:
    """
    Process-local key/value overrides consulted before environment variables.

    Works like JVM system properties: set once at startup (or in tests) and read by
    every loader that does not bring its own overrides mapping.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def remove(self, name: str) -> None:
        self._values.pop(name, None)

    def clear(self) -> None:
        self._values.clear()

    def snapshot(self) -> dict[str, str]:
        return dict(self._values)


DEFAULT_OVERRIDES = PropertyOverrides()


def lookup_variable(
    name: str,
    *,
    overrides: Mapping[str, str],
    environ: Mapping[str, str],
    dotenv: Optional[Mapping[str, Optional[str]]] = None,
) -> Optional[str]:
    value = overrides.get(name)
    if value is not None:
        return value
    value = environ.get(name)
    if value is not None:
        return value
    if dotenv is not None:
        return dotenv.get(name)
    return None


def resolve_value(
    value: Any,
    *,
    overrides: Mapping[str, str],
    environ: Mapping[str, str],
    dotenv: Optional[Mapping[str, Optional[str]]] = None,
) -> Any:
    """Resolve one stored value.

    Only strings that are a placeholder in their entirety are substituted; the
    result is not scanned again.
    """

    if not isinstance(value, str):
        return value
    match = PLACEHOLDER_PATTERN.fullmatch(value)
    if match is None:
        return value
    name, default = match.group(1), match.group(2)
    resolved = lookup_variable(name, overrides=overrides, environ=environ, dotenv=dotenv)
    if resolved is None:
        if default is None:
            logger.debug("Placeholder has no value and no default. name=%s", name)
        return default
    return resolved


def resolve_placeholders(
    properties: MutableMapping[str, Any],
    overrides: Mapping[str, str],
    environ: Mapping[str, str],
    dotenv: Optional[Mapping[str, Optional[str]]] = None,
) -> None:
    for key, value in list(properties.items()):
        resolved = resolve_value(value, overrides=overrides, environ=environ, dotenv=dotenv)
        if resolved is not value:
            properties[key] = resolved
