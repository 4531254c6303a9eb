"""Allowed status transitions per entity.

A status may only move along the edges below. Terminal statuses have no
outgoing edges. Setting a record to the status it already has is a no-op,
and a status once set cannot be cleared back to null.
"""

from enum import Enum
from typing import Optional

from core.exceptions import InvalidStatusTransition
from models.enums import (
    ClientServiceStatus,
    EmailStatus,
    InvoiceStatus,
    PaymentStatus,
    QuoteRequestStatus,
    QuoteStatus,
    RecurringInvoiceStatus,
    ReminderLogStatus,
)

TRANSITIONS: dict[type[Enum], dict[Enum, frozenset]] = {
    ClientServiceStatus: {
        ClientServiceStatus.PENDING: frozenset({ClientServiceStatus.ACTIVE, ClientServiceStatus.CANCELLED}),
        ClientServiceStatus.ACTIVE: frozenset({ClientServiceStatus.COMPLETED, ClientServiceStatus.CANCELLED}),
    },
    QuoteRequestStatus: {
        QuoteRequestStatus.PENDING: frozenset({QuoteRequestStatus.REVIEWED, QuoteRequestStatus.REJECTED}),
        QuoteRequestStatus.REVIEWED: frozenset({QuoteRequestStatus.QUOTED, QuoteRequestStatus.REJECTED}),
        QuoteRequestStatus.QUOTED: frozenset({QuoteRequestStatus.ACCEPTED, QuoteRequestStatus.REJECTED}),
    },
    QuoteStatus: {
        QuoteStatus.SENT: frozenset({
            QuoteStatus.VIEWED, QuoteStatus.ACCEPTED, QuoteStatus.REJECTED, QuoteStatus.EXPIRED,
        }),
        QuoteStatus.VIEWED: frozenset({QuoteStatus.ACCEPTED, QuoteStatus.REJECTED, QuoteStatus.EXPIRED}),
    },
    InvoiceStatus: {
        InvoiceStatus.UNPAID: frozenset({InvoiceStatus.PAID, InvoiceStatus.OVERDUE, InvoiceStatus.CANCELLED}),
        InvoiceStatus.OVERDUE: frozenset({InvoiceStatus.PAID, InvoiceStatus.CANCELLED}),
    },
    PaymentStatus: {
        PaymentStatus.PENDING: frozenset({PaymentStatus.COMPLETED, PaymentStatus.FAILED}),
    },
    EmailStatus: {
        EmailStatus.SENT: frozenset({EmailStatus.FAILED, EmailStatus.DELIVERED, EmailStatus.OPENED}),
        EmailStatus.DELIVERED: frozenset({EmailStatus.OPENED}),
    },
    RecurringInvoiceStatus: {
        RecurringInvoiceStatus.ACTIVE: frozenset({RecurringInvoiceStatus.PAUSED, RecurringInvoiceStatus.CANCELLED}),
        RecurringInvoiceStatus.PAUSED: frozenset({RecurringInvoiceStatus.ACTIVE, RecurringInvoiceStatus.CANCELLED}),
    },
    # Reminder logs are audit records, their status never changes
    ReminderLogStatus: {},
}


def allowed_transitions(current: Enum) -> frozenset:
    return TRANSITIONS.get(type(current), {}).get(current, frozenset())


def is_terminal(status: Enum) -> bool:
    return not allowed_transitions(status)


def can_transition(current: Optional[Enum], target: Optional[Enum]) -> bool:
    # A status once set is never cleared
    if target is None:
        return current is None
    # Missing or legacy free-text statuses can move anywhere
    if current is None or not isinstance(current, Enum) or current == target:
        return True
    if type(current) is not type(target):
        return False
    return target in allowed_transitions(current)


def check_transition(current: Optional[Enum], target: Optional[Enum]) -> None:
    """Raise ``InvalidStatusTransition`` unless ``current`` may move to ``target``."""
    if not can_transition(current, target):
        raise InvalidStatusTransition(
            getattr(current, "value", current),
            getattr(target, "value", target),
        )
