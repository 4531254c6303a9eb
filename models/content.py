"""Marketing content shown on the public website."""

import datetime as dt
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Text
from sqlmodel import Field, SQLModel

from db.types import TextArray
from models.base import default_field, rate_field, timestamp_field


class PortfolioItem(SQLModel, table=True):
    __tablename__ = "portfolio_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: str = Field(sa_type=Text)
    category: str
    image_url: str
    website_url: Optional[str] = Field(default=None)
    client_name: Optional[str] = Field(default=None)
    completion_date: Optional[date] = Field(default=None)
    featured: Optional[bool] = default_field(False)
    technologies: Optional[list[str]] = Field(default=None, sa_type=TextArray)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class Testimonial(SQLModel, table=True):
    __tablename__ = "testimonials"

    id: Optional[int] = Field(default=None, primary_key=True)
    client_name: str
    client_company: Optional[str] = Field(default=None)
    client_title: Optional[str] = Field(default=None)
    profile_image: Optional[str] = Field(default=None)
    content: str = Field(sa_type=Text)
    rating: Optional[int] = default_field(5)
    project_type: Optional[str] = Field(default=None)
    is_active: Optional[bool] = default_field(True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


class TeamMember(SQLModel, table=True):
    __tablename__ = "team_members"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    position: str
    bio: Optional[str] = Field(default=None, sa_type=Text)
    image_url: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    social_links: Optional[Any] = Field(default=None, sa_type=JSON, nullable=True)
    is_active: Optional[bool] = default_field(True)
    display_order: Optional[int] = default_field(0)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)


# Single-row pages edited from the admin. They only track when they were
# last edited, and the caller sets it.

class ContactInfo(SQLModel, table=True):
    __tablename__ = "contact_info"

    id: Optional[int] = Field(default=None, primary_key=True)
    phone_number1: str
    phone_number2: Optional[str] = Field(default=None)
    email: str
    location: str
    google_map_link: Optional[str] = Field(default=None)
    updated_at: Optional[datetime] = timestamp_field()


class AboutUs(SQLModel, table=True):
    __tablename__ = "about_us"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    subtitle: Optional[str] = Field(default=None)
    content: str = Field(sa_type=Text)
    mission: Optional[str] = Field(default=None, sa_type=Text)
    vision: Optional[str] = Field(default=None, sa_type=Text)
    values: Optional[str] = Field(default=None, sa_type=Text)
    updated_at: Optional[datetime] = timestamp_field()


class AnalyticsData(SQLModel, table=True):
    """Daily traffic snapshot."""

    __tablename__ = "analytics_data"

    id: Optional[int] = Field(default=None, primary_key=True)
    date: dt.date
    page_views: Optional[int] = default_field(0)
    unique_visitors: Optional[int] = default_field(0)
    conversion_rate: Optional[Decimal] = rate_field(default=Decimal("0"))
    bounce_rate: Optional[Decimal] = rate_field(default=Decimal("0"))
    top_sources_data: Optional[Any] = Field(default=None, sa_type=JSON, nullable=True)
    visitors_by_location: Optional[Any] = Field(default=None, sa_type=JSON, nullable=True)
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)
