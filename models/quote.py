from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from db.types import EnumString
from models.base import default_field, money_field, timestamp_field
from models.enums import QuoteRequestStatus, QuoteStatus


class QuoteRequest(SQLModel, table=True):
    """Inbound lead from the website. Anonymous visitors have no ``user_id``."""

    __tablename__ = "quote_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    name: str
    email: str
    phone: str
    company: Optional[str] = Field(default=None)
    service_type: str
    message: str = Field(sa_type=Text)
    status: Optional[QuoteRequestStatus] = default_field(
        QuoteRequestStatus.PENDING, sa_type=EnumString(QuoteRequestStatus)
    )
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class Quote(SQLModel, table=True):
    __tablename__ = "quotes"

    id: Optional[int] = Field(default=None, primary_key=True)
    quote_request_id: Optional[int] = Field(default=None, foreign_key="quote_requests.id")
    user_id: Optional[int] = Field(default=None, foreign_key="users.id")
    title: str
    description: str = Field(sa_type=Text)
    total_price: Decimal = money_field()
    valid_until: datetime = timestamp_field(nullable=False)
    status: Optional[QuoteStatus] = default_field(QuoteStatus.SENT, sa_type=EnumString(QuoteStatus))
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)
