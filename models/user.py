from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from models.base import default_field, timestamp_field


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True)
    email: str = Field(unique=True)
    # bcrypt hash, see reset_db.py
    password: str
    full_name: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    company: Optional[str] = Field(default=None)
    role: Optional[str] = default_field("client")
    created_at: Optional[datetime] = timestamp_field(default_now=True)
    updated_at: Optional[datetime] = timestamp_field(default_now=True)

    # Email verification and password reset
    verification_token: Optional[str] = Field(default=None)
    verified: Optional[bool] = default_field(False)
    reset_token: Optional[str] = Field(default=None)
    reset_token_expiry: Optional[datetime] = timestamp_field()

    # Stripe
    stripe_customer_id: Optional[str] = Field(default=None)
    stripe_subscription_id: Optional[str] = Field(default=None)
