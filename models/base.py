"""Column helpers shared by the table models."""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from sqlalchemy import DateTime, false, func, text, true
from sqlmodel import Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def column_default(value: Any) -> Any:
    """DDL ``DEFAULT`` clause for a Python-side default value."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return true() if value else false()
    if isinstance(value, (int, Decimal)):
        return text(str(value))
    return value


def default_field(value: Any, **kwargs) -> Any:
    """Column defaulted to ``value`` by the ORM and by the database."""
    return Field(default=value, sa_column_kwargs={"server_default": column_default(value)}, **kwargs)


def timestamp_field(default_now: bool = False, nullable: bool = True, **kwargs) -> Any:
    """Timestamp-with-timezone column, optionally defaulted to the insert time."""
    if default_now:
        return Field(
            default_factory=utc_now,
            sa_type=DateTime(timezone=True),
            sa_column_kwargs={"server_default": func.now()},
            nullable=nullable,
            **kwargs,
        )
    if nullable:
        kwargs.setdefault("default", None)
    return Field(sa_type=DateTime(timezone=True), nullable=nullable, **kwargs)


def money_field(**kwargs) -> Any:
    """Currency amount, numeric(10, 2)."""
    return Field(max_digits=10, decimal_places=2, **kwargs)


def rate_field(**kwargs) -> Any:
    """Percentage, numeric(5, 2)."""
    if kwargs.get("default") is not None:
        return default_field(kwargs.pop("default"), max_digits=5, decimal_places=2, **kwargs)
    return Field(max_digits=5, decimal_places=2, **kwargs)
