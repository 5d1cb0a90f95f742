from __future__ import annotations

import dataclasses
import enum
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from pydantic import BaseModel

from profile_config.errors import ConfigSchemaError


class ScalarKind(str, enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    BOOLEAN = "boolean"
    # Opaque leaf such as a YAML list; passed through without coercion.
    RAW = "raw"


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    name: str
    kind: Union[ScalarKind, "TypeDescriptor"]
    default: Any = MISSING

    @property
    def is_composite(self) -> bool:
        return isinstance(self.kind, TypeDescriptor)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """
    Explicit binding table for one target type.

    `factory` receives the bound field values as keyword arguments. Fields that are
    absent from the store and carry no descriptor default are left out, so the
    factory's own defaults apply.
    """

    name: str
    fields: tuple[FieldDescriptor, ...]
    factory: Callable[..., Any]
    prefix: str = ""

    def with_prefix(self, prefix: str) -> "TypeDescriptor":
        return dataclasses.replace(self, prefix=prefix)


_SCALAR_TYPES: dict[Any, ScalarKind] = {
    str: ScalarKind.STRING,
    int: ScalarKind.LONG,
    float: ScalarKind.FLOAT,
    bool: ScalarKind.BOOLEAN,
}

_RAW_ORIGINS = (list, tuple, set, frozenset)


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_bindable_type(annotation: Any) -> bool:
    if not isinstance(annotation, type):
        return False
    return issubclass(annotation, BaseModel) or dataclasses.is_dataclass(annotation)


def _model_fields(cls: type) -> Sequence[tuple[str, Any]]:
    if issubclass(cls, BaseModel):
        return [(name, info.annotation) for name, info in cls.model_fields.items()]
    try:
        hints = typing.get_type_hints(cls)
    except Exception as e:
        raise ConfigSchemaError(f"Cannot resolve field annotations of {cls.__name__}: {e}") from e
    return [(f.name, hints.get(f.name, f.type)) for f in dataclasses.fields(cls) if f.init]


class ConfigSchema:
    """
    Registry of bindable types and their namespace prefixes.

    Descriptors are derived once, when a type is first registered or first bound,
    from pydantic model fields or dataclass fields.
    """

    def __init__(self) -> None:
        self._descriptors: dict[type, TypeDescriptor] = {}

    def register(self, cls: type, *, prefix: str = "") -> TypeDescriptor:
        descriptor = self._derive(cls, ()).with_prefix(prefix)
        self._descriptors[cls] = descriptor
        return descriptor

    def descriptor_for(self, cls: type) -> TypeDescriptor:
        descriptor = self._descriptors.get(cls)
        if descriptor is None:
            descriptor = self._derive(cls, ())
            self._descriptors[cls] = descriptor
        return descriptor

    def prefix_for(self, cls: type) -> str:
        descriptor = self._descriptors.get(cls)
        return descriptor.prefix if descriptor is not None else ""

    def __contains__(self, cls: object) -> bool:
        return cls in self._descriptors

    def _derive(self, cls: type, seen: tuple[type, ...]) -> TypeDescriptor:
        if not _is_bindable_type(cls):
            raise ConfigSchemaError(
                f"Cannot bind to {getattr(cls, '__name__', cls)!r}: expected a pydantic model or a dataclass."
            )
        if cls in seen:
            raise ConfigSchemaError(f"Recursive configuration type: {cls.__name__}")

        fields = []
        for name, annotation in _model_fields(cls):
            fields.append(FieldDescriptor(name=name, kind=self._kind_for(cls, name, annotation, seen + (cls,))))
        return TypeDescriptor(name=cls.__name__, fields=tuple(fields), factory=cls)

    def _kind_for(
        self, owner: type, name: str, annotation: Any, seen: tuple[type, ...]
    ) -> Union[ScalarKind, TypeDescriptor]:
        target = _unwrap_optional(annotation)
        if target is Any or typing.get_origin(target) in _RAW_ORIGINS or target in _RAW_ORIGINS:
            return ScalarKind.RAW
        if target in _SCALAR_TYPES:
            return _SCALAR_TYPES[target]
        if _is_bindable_type(target):
            nested = self._descriptors.get(target)
            if nested is not None:
                return nested.with_prefix("")
            return self._derive(target, seen)
        raise ConfigSchemaError(f"Unsupported field type. type={owner.__name__} field={name} annotation={annotation!r}")


def describe(cls: type, prefix: str = "") -> TypeDescriptor:
    return ConfigSchema().register(cls, prefix=prefix)


def scalar(name: str, kind: ScalarKind, default: Any = MISSING) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=kind, default=default)


def composite(name: str, descriptor: TypeDescriptor) -> FieldDescriptor:
    return FieldDescriptor(name=name, kind=descriptor)


def descriptor(
    name: str,
    fields: Sequence[FieldDescriptor],
    *,
    factory: Optional[Callable[..., Any]] = None,
    prefix: str = "",
) -> TypeDescriptor:
    """Build a descriptor by hand; the default factory produces a plain dict."""
    return TypeDescriptor(name=name, fields=tuple(fields), factory=factory or dict, prefix=prefix)
