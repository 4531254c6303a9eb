"""Models package for database entities."""

from models.enums import (
    BillingFrequency,
    ClientServiceStatus,
    DurationType,
    EmailStatus,
    InvoiceStatus,
    PaymentStatus,
    PriceType,
    QuoteRequestStatus,
    QuoteStatus,
    RecurringInvoiceStatus,
    ReminderLogStatus,
    ReminderType,
)
from models.user import User
from models.auth import SessionRecord
from models.catalog import Service, WebPackage, HostingPackage
from models.client_service import ClientService
from models.quote import QuoteRequest, Quote
from models.invoice import Invoice, Payment
from models.email import Email
from models.billing import BillingPlan, ReminderTemplate, RecurringInvoice, ReminderLog
from models.content import (
    AboutUs,
    AnalyticsData,
    ContactInfo,
    PortfolioItem,
    TeamMember,
    Testimonial,
)

__all__ = [
    "BillingFrequency",
    "ClientServiceStatus",
    "DurationType",
    "EmailStatus",
    "InvoiceStatus",
    "PaymentStatus",
    "PriceType",
    "QuoteRequestStatus",
    "QuoteStatus",
    "RecurringInvoiceStatus",
    "ReminderLogStatus",
    "ReminderType",
    "User",
    "SessionRecord",
    "Service",
    "WebPackage",
    "HostingPackage",
    "ClientService",
    "QuoteRequest",
    "Quote",
    "Invoice",
    "Payment",
    "Email",
    "BillingPlan",
    "ReminderTemplate",
    "RecurringInvoice",
    "ReminderLog",
    "AboutUs",
    "AnalyticsData",
    "ContactInfo",
    "PortfolioItem",
    "TeamMember",
    "Testimonial",
]
