"""Errors raised by the schema registry and the record helpers."""

from typing import Any


class RegistryError(Exception):
    """Base class for registry errors."""


class RecordValidationError(RegistryError):
    """Raised when a candidate record fails one or more column rules.

    ``errors`` lists every offending field, never only the first one.
    """

    def __init__(self, entity: str, errors: list[dict[str, Any]]):
        self.entity = entity
        self.errors = errors
        fields = ", ".join(error["field"] for error in errors)
        super().__init__(f"Invalid {entity} record: {fields}")

    @property
    def fields(self) -> list[str]:
        return [error["field"] for error in self.errors]


class ConflictError(RegistryError):
    """Raised when the database rejects a write (unique or foreign key)."""

    def __init__(self, entity: str, detail: str):
        self.entity = entity
        self.detail = detail
        super().__init__(f"Conflict writing {entity}: {detail}")


class NotFoundError(RegistryError):
    """Raised when a record does not exist."""

    def __init__(self, entity: str, record_id: Any):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class InvalidStatusTransition(RegistryError):
    """Raised when a status change is not allowed by the lifecycle."""

    def __init__(self, current: Any, target: Any):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move status from '{current}' to '{target}'")
