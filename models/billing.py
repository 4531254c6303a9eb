"""Recurring billing and payment reminders.

Generating invoices from a plan and dispatching reminders happen elsewhere;
these tables only record the schedule and what was sent.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from db.types import EnumString
from models.base import default_field, money_field, timestamp_field
from models.enums import BillingFrequency, RecurringInvoiceStatus, ReminderLogStatus, ReminderType


class BillingPlan(SQLModel, table=True):
    __tablename__ = "billing_plans"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = Field(default=None, sa_type=Text)
    frequency: BillingFrequency = Field(sa_type=EnumString(BillingFrequency))
    days_in_cycle: int
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class ReminderTemplate(SQLModel, table=True):
    __tablename__ = "reminder_templates"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    type: ReminderType = Field(sa_type=EnumString(ReminderType))
    subject: str
    content: str = Field(sa_type=Text)
    # Days relative to the due date, negative means before
    days_offset: Optional[int] = default_field(0)
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class RecurringInvoice(SQLModel, table=True):
    __tablename__ = "recurring_invoices"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    billing_plan_id: int = Field(foreign_key="billing_plans.id")
    title: str
    description: Optional[str] = Field(default=None, sa_type=Text)
    amount: Decimal = money_field()
    last_billed_date: Optional[datetime] = timestamp_field()
    next_billing_date: datetime = timestamp_field(nullable=False)
    status: Optional[RecurringInvoiceStatus] = default_field(
        RecurringInvoiceStatus.ACTIVE, sa_type=EnumString(RecurringInvoiceStatus)
    )
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class ReminderLog(SQLModel, table=True):
    """Audit record of a dispatched reminder."""

    __tablename__ = "reminder_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id")
    invoice_id: Optional[int] = Field(default=None, foreign_key="invoices.id")
    recurring_invoice_id: Optional[int] = Field(default=None, foreign_key="recurring_invoices.id")
    reminder_template_id: Optional[int] = Field(default=None, foreign_key="reminder_templates.id")
    email_id: Optional[int] = Field(default=None, foreign_key="emails.id")
    sent_at: Optional[datetime] = timestamp_field(default_now=True)
    status: Optional[ReminderLogStatus] = default_field(
        ReminderLogStatus.SENT, sa_type=EnumString(ReminderLogStatus)
    )
    type: ReminderType = Field(sa_type=EnumString(ReminderType))
    created_at: Optional[datetime] = timestamp_field(default_now=True)
