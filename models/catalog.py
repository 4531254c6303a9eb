"""Services and packages offered on the website."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from db.types import EnumString, TextArray
from models.base import default_field, money_field, timestamp_field
from models.enums import DurationType, PriceType


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = Field(sa_type=Text)
    category: str
    price: Optional[Decimal] = money_field(default=None)
    price_type: Optional[PriceType] = default_field(PriceType.FIXED, sa_type=EnumString(PriceType))
    price_range: Optional[str] = Field(default=None)
    duration: Optional[int] = Field(default=None)
    duration_type: Optional[DurationType] = default_field(
        DurationType.DAYS, sa_type=EnumString(DurationType)
    )
    features: Optional[list[str]] = Field(default=None, sa_type=TextArray)
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class WebPackage(SQLModel, table=True):
    __tablename__ = "web_packages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = Field(sa_type=Text)
    price_range: str
    features: Optional[list[str]] = Field(default=None, sa_type=TextArray)
    pages_included: Optional[int] = default_field(1)
    revisions: Optional[int] = default_field(1)
    delivery_time: Optional[str] = Field(default=None)
    support_period: Optional[str] = Field(default=None)
    featured: Optional[bool] = default_field(False)
    popular: Optional[bool] = default_field(False)
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class HostingPackage(SQLModel, table=True):
    __tablename__ = "hosting_packages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str = Field(sa_type=Text)
    price_range: str
    storage_space: str
    bandwidth: str
    email_accounts: Optional[int] = default_field(0)
    features: Optional[list[str]] = Field(default=None, sa_type=TextArray)
    support_period: Optional[str] = Field(default=None)
    featured: Optional[bool] = default_field(False)
    popular: Optional[bool] = default_field(False)
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)
