from datetime import datetime
from typing import Any

from sqlalchemy import Index
from sqlmodel import Field, SQLModel

from db.types import JSONDocument
from models.base import timestamp_field


class SessionRecord(SQLModel, table=True):
    """Server-side session storage used by the authentication middleware."""

    __tablename__ = "sessions"
    __table_args__ = (Index("IDX_session_expire", "expire"),)

    sid: str = Field(primary_key=True)
    sess: Any = Field(sa_type=JSONDocument, nullable=False)
    expire: datetime = timestamp_field(nullable=False)
