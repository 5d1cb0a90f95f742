from __future__ import annotations

import unittest
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from profile_config.binding.schema import ConfigSchema, ScalarKind, TypeDescriptor, describe
from profile_config.errors import ConfigSchemaError


class PoolSettings(BaseModel):
    size: int = 4
    timeout: float = 1.5


class DatabaseSettings(BaseModel):
    url: Optional[str] = None
    pool: PoolSettings = Field(default_factory=PoolSettings)


class ServiceSettings(BaseModel):
    name: str = ""
    enabled: bool = False
    hosts: List[str] = Field(default_factory=list)
    extra: Any = None
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@dataclass
class CacheSettings:
    ttl: int = 60
    backend: str | None = "memory"
    nodes: list = field(default_factory=list)


class WithMapping(BaseModel):
    labels: Dict[str, str] = Field(default_factory=dict)


@dataclass
class Node:
    child: Optional["Node"] = None


class DescribeTests(unittest.TestCase):
    def test_pydantic_model_fields_map_to_kinds(self) -> None:
        descriptor = describe(ServiceSettings, prefix="svc")
        self.assertEqual(descriptor.prefix, "svc")
        self.assertIs(descriptor.factory, ServiceSettings)
        kinds = {f.name: f.kind for f in descriptor.fields}
        self.assertEqual(kinds["name"], ScalarKind.STRING)
        self.assertEqual(kinds["enabled"], ScalarKind.BOOLEAN)
        self.assertEqual(kinds["hosts"], ScalarKind.RAW)
        self.assertEqual(kinds["extra"], ScalarKind.RAW)

        database = kinds["database"]
        self.assertIsInstance(database, TypeDescriptor)
        self.assertEqual(database.prefix, "")
        nested = {f.name: f.kind for f in database.fields}
        self.assertEqual(nested["url"], ScalarKind.STRING)
        pool = {f.name: f.kind for f in nested["pool"].fields}
        self.assertEqual(pool, {"size": ScalarKind.LONG, "timeout": ScalarKind.FLOAT})

    def test_dataclass_fields_map_to_kinds(self) -> None:
        kinds = {f.name: f.kind for f in describe(CacheSettings).fields}
        self.assertEqual(
            kinds,
            {"ttl": ScalarKind.LONG, "backend": ScalarKind.STRING, "nodes": ScalarKind.RAW},
        )

    def test_mapping_fields_are_rejected(self) -> None:
        with self.assertRaises(ConfigSchemaError):
            describe(WithMapping)

    def test_recursive_types_are_rejected(self) -> None:
        with self.assertRaises(ConfigSchemaError):
            describe(Node)

    def test_plain_classes_are_rejected(self) -> None:
        with self.assertRaises(ConfigSchemaError):
            describe(object)


class ConfigSchemaTests(unittest.TestCase):
    def test_register_records_prefix(self) -> None:
        schema = ConfigSchema()
        schema.register(ServiceSettings, prefix="svc")
        self.assertIn(ServiceSettings, schema)
        self.assertEqual(schema.prefix_for(ServiceSettings), "svc")
        self.assertEqual(schema.prefix_for(DatabaseSettings), "")

    def test_descriptor_for_unregistered_type_has_empty_prefix(self) -> None:
        schema = ConfigSchema()
        descriptor = schema.descriptor_for(DatabaseSettings)
        self.assertEqual(descriptor.prefix, "")
        self.assertIs(schema.descriptor_for(DatabaseSettings), descriptor)

    def test_registered_nested_descriptor_is_reused(self) -> None:
        schema = ConfigSchema()
        schema.register(DatabaseSettings, prefix="db")
        service = schema.register(ServiceSettings)
        database = next(f.kind for f in service.fields if f.name == "database")
        self.assertEqual(database.prefix, "")
        self.assertEqual(database.fields, schema.descriptor_for(DatabaseSettings).fields)


if __name__ == "__main__":
    unittest.main()
