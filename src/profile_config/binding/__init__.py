"""Binding of flat configuration stores onto typed objects."""

from profile_config.binding.binder import ConfigBinder
from profile_config.binding.coercion import coerce
from profile_config.binding.schema import (
    MISSING,
    ConfigSchema,
    FieldDescriptor,
    ScalarKind,
    TypeDescriptor,
    composite,
    describe,
    descriptor,
    scalar,
)

__all__ = [
    "MISSING",
    "ConfigBinder",
    "ConfigSchema",
    "FieldDescriptor",
    "ScalarKind",
    "TypeDescriptor",
    "coerce",
    "composite",
    "describe",
    "descriptor",
    "scalar",
]
