from __future__ import annotations

from typing import Any, Mapping, MutableMapping


def flatten(prefix: str, node: Mapping[Any, Any], target: MutableMapping[str, Any]) -> None:
    """Write every leaf of ``node`` into ``target`` under its dotted path.

    Nested mappings are walked depth-first in insertion order. Anything that is not
    a mapping is a leaf, lists included, and overwrites an existing entry at the
    same key.
    """

    for key, value in node.items():
        full_key = str(key) if not prefix else f"{prefix}.{key}"
        if isinstance(value, Mapping):
            flatten(full_key, value, target)
        else:
            target[full_key] = value


def flatten_tree(node: Mapping[Any, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    flatten("", node, out)
    return out
