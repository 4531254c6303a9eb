"""Registry of every entity exposed to the admin backend."""

from typing import Any, Mapping, Union

from pydantic import BaseModel
from sqlmodel import SQLModel

from models import (
    AboutUs,
    AnalyticsData,
    BillingPlan,
    ClientService,
    ContactInfo,
    Email,
    HostingPackage,
    Invoice,
    Payment,
    PortfolioItem,
    Quote,
    QuoteRequest,
    RecurringInvoice,
    ReminderLog,
    ReminderTemplate,
    Service,
    TeamMember,
    Testimonial,
    User,
    WebPackage,
)
from schemas.derive import EntitySchema, derive_schemas

# The sessions table is owned by the auth middleware and has no insert schema.
ENTITY_TABLES: tuple[type[SQLModel], ...] = (
    User,
    Service,
    ClientService,
    QuoteRequest,
    Quote,
    Invoice,
    Payment,
    PortfolioItem,
    Testimonial,
    Email,
    WebPackage,
    HostingPackage,
    BillingPlan,
    ReminderTemplate,
    RecurringInvoice,
    ReminderLog,
    ContactInfo,
    AboutUs,
    TeamMember,
    AnalyticsData,
)

SCHEMAS: dict[str, EntitySchema] = {
    table.__tablename__: derive_schemas(table) for table in ENTITY_TABLES
}


def get_schema(entity: Union[str, type[SQLModel], SQLModel]) -> EntitySchema:
    """Look up an entity by table name, table model or row."""
    if isinstance(entity, SQLModel):
        entity = type(entity)
    name = entity if isinstance(entity, str) else entity.__tablename__
    try:
        return SCHEMAS[name]
    except KeyError:
        raise KeyError(f"Unknown entity: {name}") from None


def validate_create(entity: Union[str, type[SQLModel]], payload: Mapping[str, Any]) -> BaseModel:
    return get_schema(entity).validate_create(payload)


def validate_update(entity: Union[str, type[SQLModel]], payload: Mapping[str, Any]) -> BaseModel:
    return get_schema(entity).validate_update(payload)
