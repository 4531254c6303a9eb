from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from db.types import EnumString
from models.base import default_field, money_field, timestamp_field
from models.enums import InvoiceStatus, PaymentStatus


class Invoice(SQLModel, table=True):
    __tablename__ = "invoices"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    quote_id: Optional[int] = Field(default=None, foreign_key="quotes.id")
    client_service_id: Optional[int] = Field(default=None, foreign_key="client_services.id")
    invoice_number: str = Field(unique=True)
    title: str
    description: Optional[str] = Field(default=None, sa_type=Text)
    total_amount: Decimal = money_field()
    tax_amount: Optional[Decimal] = money_field(default=None)
    due_date: datetime = timestamp_field(nullable=False)
    status: Optional[InvoiceStatus] = default_field(
        InvoiceStatus.UNPAID, sa_type=EnumString(InvoiceStatus)
    )
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class Payment(SQLModel, table=True):
    __tablename__ = "payments"

    id: Optional[int] = Field(default=None, primary_key=True)
    invoice_id: int = Field(foreign_key="invoices.id")
    user_id: int = Field(foreign_key="users.id")
    amount: Decimal = money_field()
    # mpesa, paypal, bank, ...
    payment_method: str
    transaction_id: Optional[str] = Field(default=None)
    status: Optional[PaymentStatus] = default_field(
        PaymentStatus.COMPLETED, sa_type=EnumString(PaymentStatus)
    )
    payment_date: Optional[datetime] = timestamp_field(default_now=True)
    notes: Optional[str] = Field(default=None, sa_type=Text)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)
