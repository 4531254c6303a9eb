from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from db.types import EnumString
from models.base import default_field, money_field, timestamp_field
from models.enums import ClientServiceStatus


class ClientService(SQLModel, table=True):
    """A service purchased by a client.

    ``price`` is a snapshot taken at purchase time and is never recomputed
    from ``services.price``.
    """

    __tablename__ = "client_services"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    service_id: int = Field(foreign_key="services.id")
    status: Optional[ClientServiceStatus] = default_field(
        ClientServiceStatus.PENDING, sa_type=EnumString(ClientServiceStatus)
    )
    purchase_date: Optional[datetime] = timestamp_field(default_now=True)
    expiry_date: Optional[datetime] = timestamp_field()
    renewal_date: Optional[datetime] = timestamp_field()
    notes: Optional[str] = Field(default=None, sa_type=Text)
    price: Decimal = money_field()
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)
