import os
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

# Tests never touch a real database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_NAME", "Admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")

sys.path.append(str(Path(__file__).resolve().parent.parent))

import pytest
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import models  # noqa: F401
from models import Invoice, Service, User


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def user(session: Session) -> User:
    user = User(username="jane", email="jane@example.com", password="hashed", full_name="Jane Wanjiru")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def service(session: Session) -> Service:
    service = Service(name="Business Website", description="Five page site", category="web")
    session.add(service)
    session.commit()
    session.refresh(service)
    return service


@pytest.fixture
def invoice(session: Session, user: User) -> Invoice:
    invoice = Invoice(
        user_id=user.id,
        invoice_number="INV-2026-0001",
        title="Business Website",
        total_amount=Decimal("1250.00"),
        due_date=datetime.now(timezone.utc) + timedelta(days=14),
    )
    session.add(invoice)
    session.commit()
    session.refresh(invoice)
    return invoice
