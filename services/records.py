"""Write path for registry entities.

Input is validated against the derived schemas before any row is built.
Uniqueness and foreign keys are left to the database; its integrity errors
come back as ``ConflictError``.
"""

import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select

from core.exceptions import ConflictError, NotFoundError
from models.base import utc_now
from schemas.derive import EntitySchema
from schemas.registry import get_schema
from services.lifecycle import TRANSITIONS, check_transition

logger = logging.getLogger(__name__)

Entity = Union[str, type[SQLModel]]


def _write(session: Session, schema: EntitySchema, commit: bool) -> None:
    try:
        if commit:
            session.commit()
        else:
            session.flush()
    except IntegrityError as exc:
        session.rollback()
        logger.warning("Integrity error on %s: %s", schema.name, exc.orig)
        raise ConflictError(schema.name, str(exc.orig)) from exc


def create_record(
    session: Session,
    entity: Entity,
    payload: Mapping[str, Any],
    commit: bool = True,
) -> SQLModel:
    """Validate ``payload`` and insert it. Omitted fields take the column defaults.

    Pass ``commit=False`` to keep the insert inside the caller's transaction.
    """
    schema = get_schema(entity)
    data = schema.validate_create(payload)
    row = schema.build_row(data)
    session.add(row)
    _write(session, schema, commit)
    session.refresh(row)
    logger.info("Created %s %s", schema.name, row.id)
    return row


def get_record(session: Session, entity: Entity, record_id: Any) -> SQLModel:
    schema = get_schema(entity)
    row = session.get(schema.table, record_id)
    if row is None:
        raise NotFoundError(schema.name, record_id)
    return row


def update_record(
    session: Session,
    row: SQLModel,
    changes: Mapping[str, Any],
    commit: bool = True,
) -> SQLModel:
    """Apply a partial update.

    Only the supplied fields change. Status fields must follow their
    lifecycle and ``updated_at`` is refreshed when the table has one.
    """
    schema = get_schema(row)
    data = schema.validate_update(changes)
    updates = data.model_dump(exclude_unset=True)

    for key, value in updates.items():
        if schema.column(key).python_type in TRANSITIONS:
            check_transition(getattr(row, key), value)

    for key, value in updates.items():
        setattr(row, key, value)
    if "updated_at" in schema.server_managed:
        row.updated_at = utc_now()

    session.add(row)
    _write(session, schema, commit)
    session.refresh(row)
    logger.info("Updated %s %s: %s", schema.name, row.id, sorted(updates))
    return row


def list_children(
    session: Session,
    parent: SQLModel,
    child: Entity,
    foreign_key: Optional[str] = None,
) -> list[SQLModel]:
    """Rows of ``child`` referencing ``parent`` through a foreign-key column.

    ``foreign_key`` may be omitted when the child has a single column
    pointing at the parent table.
    """
    parent_schema = get_schema(parent)
    child_schema = get_schema(child)
    target = f"{parent_schema.name}.id"

    if foreign_key is None:
        candidates = [key for key, ref in child_schema.foreign_keys.items() if ref == target]
        if len(candidates) != 1:
            raise ValueError(
                f"{child_schema.name} has {len(candidates)} keys referencing {target}, pass foreign_key"
            )
        foreign_key = candidates[0]
    elif child_schema.foreign_keys.get(foreign_key) != target:
        raise ValueError(f"{child_schema.name}.{foreign_key} does not reference {target}")

    table = child_schema.table
    statement = select(table).where(getattr(table, foreign_key) == parent.id).order_by(table.id)
    return list(session.exec(statement).all())
