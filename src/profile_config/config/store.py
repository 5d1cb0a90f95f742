from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from profile_config.config.flatten import flatten
from profile_config.config.placeholders import resolve_placeholders


class ConfigStore(Mapping[str, Any]):
    """Read-only flat view of the effective configuration, keyed by dotted path."""

    def __init__(self, properties: Mapping[str, Any]) -> None:
        self._properties = MappingProxyType(dict(properties))

    def __getitem__(self, key: str) -> Any:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"ConfigStore({dict(self._properties)!r})"

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._properties

    def with_prefix(self, prefix: str) -> dict[str, Any]:
        """Return the entries below ``prefix`` with the prefix stripped."""
        head = f"{prefix}."
        return {k[len(head) :]: v for k, v in self._properties.items() if k.startswith(head)}


class ConfigStoreBuilder:
    """
    Mutable staging area owned by a single load call.

    Documents are merged in call order, placeholders are resolved once, then
    `freeze()` hands out the immutable store. The builder rejects use after freezing.
    """

    def __init__(self) -> None:
        self._properties: dict[str, Any] = {}
        self._frozen = False

    def _check_open(self) -> None:
        if self._frozen:
            raise RuntimeError("Config store builder is already frozen.")

    def merge(self, tree: Mapping[Any, Any]) -> None:
        self._check_open()
        flatten("", tree, self._properties)

    def resolve(
        self,
        *,
        overrides: Mapping[str, str],
        environ: Mapping[str, str],
        dotenv: Optional[Mapping[str, Optional[str]]] = None,
    ) -> None:
        self._check_open()
        resolve_placeholders(self._properties, overrides, environ, dotenv)

    def freeze(self) -> ConfigStore:
        self._check_open()
        self._frozen = True
        return ConfigStore(self._properties)
