"""Schemas package: request/response models derived from the tables."""

from schemas.derive import SERVER_MANAGED, ColumnSpec, EntitySchema, derive_schemas, describe_columns
from schemas.registry import ENTITY_TABLES, SCHEMAS, get_schema, validate_create, validate_update

__all__ = [
    "SERVER_MANAGED",
    "ColumnSpec",
    "EntitySchema",
    "derive_schemas",
    "describe_columns",
    "ENTITY_TABLES",
    "SCHEMAS",
    "get_schema",
    "validate_create",
    "validate_update",
]
