"""Custom SQLAlchemy column types."""

from __future__ import annotations

import logging
from enum import Enum

from sqlalchemy import JSON, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)


class EnumString(TypeDecorator):
    """Store a ``str`` enum as its plain varchar value.

    The column stays a varchar so existing rows and other clients keep
    working; values read back are converted to enum members.
    """

    impl = String
    cache_ok = True

    def __init__(self, enum_class: type[Enum], **kwargs):
        self.enum_class = enum_class
        super().__init__(**kwargs)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, self.enum_class):
            return value.value
        return self.enum_class(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return self.enum_class(value)
        except ValueError:
            # Rows written before the vocabulary was closed
            logger.warning("Unknown %s value %r", self.enum_class.__name__, value)
            return value

    @property
    def python_type(self):
        return self.enum_class


class TextArray(TypeDecorator):
    """Ordered list of text: ``text[]`` on PostgreSQL, JSON elsewhere."""

    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(ARRAY(Text))
        return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return [str(item) for item in value]

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return list(value)

    @property
    def python_type(self):
        return list


class JSONDocument(TypeDecorator):
    """``jsonb`` on PostgreSQL, JSON elsewhere."""

    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(JSONB())
        return dialect.type_descriptor(JSON())
