from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, SQLModel

from db.types import EnumString
from models.base import default_field, timestamp_field
from models.enums import EmailStatus


class Email(SQLModel, table=True):
    """Outbound message record. Rows are append-only, hence no ``updated_at``."""

    __tablename__ = "emails"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    to: str
    subject: str
    content: str = Field(sa_type=Text)
    sent_at: Optional[datetime] = timestamp_field(default_now=True)
    status: Optional[EmailStatus] = default_field(EmailStatus.SENT, sa_type=EnumString(EmailStatus))
    # notification, newsletter, reminder, ...
    type: Optional[str] = Field(default=None)
    # "metadata" is reserved on declarative classes
    meta: Optional[Any] = Field(default=None, sa_column=Column("metadata", JSON, nullable=True))
    created_at: Optional[datetime] = timestamp_field(default_now=True)
