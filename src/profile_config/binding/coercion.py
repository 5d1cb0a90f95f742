from __future__ import annotations

import re
from typing import Any, Callable

from profile_config.binding.schema import ScalarKind
from profile_config.errors import TypeCoercionError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)


def _as_text(value: Any) -> str:
    # YAML booleans keep their YAML spelling.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_integer(field: str, value: Any, kind: ScalarKind, bounds: tuple[int, int]) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        text = _as_text(value)
        if not _INTEGER_PATTERN.fullmatch(text):
            raise TypeCoercionError(field, value, kind.value)
        number = int(text)
    low, high = bounds
    if not low <= number <= high:
        raise TypeCoercionError(field, value, kind.value)
    return number


def _to_float(field: str, value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = _as_text(value)
    if not _FLOAT_PATTERN.fullmatch(text):
        raise TypeCoercionError(field, value, ScalarKind.FLOAT.value)
    return float(text)


def _to_boolean(field: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = _as_text(value)
    if text == "true":
        return True
    if text == "false":
        return False
    raise TypeCoercionError(field, value, ScalarKind.BOOLEAN.value)


_CONVERTERS: dict[ScalarKind, Callable[[str, Any], Any]] = {
    ScalarKind.STRING: lambda field, value: _as_text(value),
    ScalarKind.INTEGER: lambda field, value: _to_integer(field, value, ScalarKind.INTEGER, INT32_RANGE),
    ScalarKind.LONG: lambda field, value: _to_integer(field, value, ScalarKind.LONG, INT64_RANGE),
    ScalarKind.FLOAT: _to_float,
    ScalarKind.BOOLEAN: _to_boolean,
    ScalarKind.RAW: lambda field, value: value,
}


def coerce(field: str, value: Any, kind: ScalarKind) -> Any:
    """Convert a stored value to ``kind`` or raise TypeCoercionError naming ``field``."""
    return _CONVERTERS[kind](field, value)
