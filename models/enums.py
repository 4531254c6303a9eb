from enum import Enum


class PriceType(str, Enum):
    """How a service is priced."""
    FIXED = "fixed"
    HOURLY = "hourly"
    RANGE = "range"


class DurationType(str, Enum):
    """Unit of a service duration."""
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


class ClientServiceStatus(str, Enum):
    """Purchased service lifecycle."""
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class QuoteRequestStatus(str, Enum):
    """Inbound lead lifecycle."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class QuoteStatus(str, Enum):
    """Quote lifecycle statuses."""
    SENT = "sent"
    VIEWED = "viewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class InvoiceStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class EmailStatus(str, Enum):
    """Outbound email delivery statuses."""
    SENT = "sent"
    FAILED = "failed"
    DELIVERED = "delivered"
    OPENED = "opened"


class BillingFrequency(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    BIANNUALLY = "biannually"
    ANNUALLY = "annually"


class RecurringInvoiceStatus(str, Enum):
    ACTIVE = "active"
    PAUSED = "paused"
    CANCELLED = "cancelled"


class ReminderType(str, Enum):
    """When a reminder is sent relative to the billing date."""
    UPCOMING = "upcoming"
    OVERDUE = "overdue"
    RENEWAL = "renewal"


class ReminderLogStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"
