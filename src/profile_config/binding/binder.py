from __future__ import annotations

import logging
from typing import Any, Optional, Union

from profile_config.binding.coercion import coerce
from profile_config.binding.schema import ConfigSchema, TypeDescriptor
from profile_config.config.store import ConfigStore
from profile_config.errors import BindConstructionError, ConfigParsingError

logger = logging.getLogger(__name__)

BindTarget = Union[type, TypeDescriptor]


def _join(prefix: str, name: str) -> str:
    return name if not prefix else f"{prefix}.{name}"


def _target_name(target: BindTarget) -> str:
    if isinstance(target, TypeDescriptor):
        return target.name
    return getattr(target, "__name__", repr(target))


class ConfigBinder:
    """
    Populates typed configuration objects from a frozen ConfigStore.

    Scalar fields take the stored value when one exists and keep their default
    otherwise. Composite fields are always constructed, even when the store holds
    no key beneath them. All values are computed before anything is constructed,
    so a failed bind leaves nothing half-populated.
    """

    def __init__(self, store: ConfigStore, schema: Optional[ConfigSchema] = None) -> None:
        self._store = store
        self._schema = schema or ConfigSchema()

    def bind(self, target: BindTarget, *, prefix: Optional[str] = None) -> Any:
        try:
            descriptor = self._descriptor(target)
            effective_prefix = descriptor.prefix if prefix is None else prefix
            return self._construct(descriptor, effective_prefix)
        except ConfigParsingError:
            raise
        except Exception as e:
            raise BindConstructionError(f"Failed to bind properties to {_target_name(target)}") from e

    def bind_into(self, instance: Any, prefix: Optional[str] = None) -> Any:
        """Assign bound values onto an existing, mutable instance and return it."""
        try:
            descriptor = self._descriptor(type(instance))
        except ConfigParsingError:
            raise
        except Exception as e:
            raise BindConstructionError(f"Failed to bind properties to {_target_name(type(instance))}") from e
        effective_prefix = descriptor.prefix if prefix is None else prefix
        values = self.bind_values(descriptor, effective_prefix)
        for name, value in values.items():
            try:
                setattr(instance, name, value)
            except Exception as e:
                raise BindConstructionError(
                    f"Failed to bind field {name} on {descriptor.name}"
                ) from e
        return instance

    def bind_values(self, descriptor: TypeDescriptor, prefix: str) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for field in descriptor.fields:
            prop_key = _join(prefix, field.name)
            if field.is_composite:
                values[field.name] = self._construct(field.kind, prop_key)
                continue

            raw = self._store.get(prop_key)
            logger.debug("Binding property. key=%s value=%r", prop_key, raw)
            if raw is not None:
                values[field.name] = coerce(field.name, raw, field.kind)
            elif field.has_default:
                values[field.name] = field.default
        return values

    def _construct(self, descriptor: TypeDescriptor, prefix: str) -> Any:
        values = self.bind_values(descriptor, prefix)
        try:
            return descriptor.factory(**values)
        except Exception as e:
            raise BindConstructionError(f"Failed to construct {descriptor.name} for prefix '{prefix}'") from e

    def _descriptor(self, target: BindTarget) -> TypeDescriptor:
        if isinstance(target, TypeDescriptor):
            return target
        return self._schema.descriptor_for(target)

