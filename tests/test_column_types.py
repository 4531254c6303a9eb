"""Tests for the custom column types against a real (SQLite) database."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import inspect, text
from sqlmodel import Session, select

from models import ClientService, Email, Invoice, Service, SessionRecord, User
from models.enums import ClientServiceStatus, InvoiceStatus, PriceType


def test_status_is_stored_as_plain_text(engine, session: Session, invoice: Invoice):
    raw = session.execute(text("SELECT status FROM invoices WHERE id = :id"), {"id": invoice.id}).scalar_one()
    assert raw == "unpaid"

    with Session(engine) as fresh:
        loaded = fresh.get(Invoice, invoice.id)
        assert loaded.status is InvoiceStatus.UNPAID


def test_unknown_legacy_status_is_kept(engine, session: Session, invoice: Invoice):
    session.execute(text("UPDATE invoices SET status = 'archived' WHERE id = :id"), {"id": invoice.id})
    session.commit()

    with Session(engine) as fresh:
        assert fresh.get(Invoice, invoice.id).status == "archived"


def test_text_array_round_trip(engine, service: Service):
    with Session(engine) as fresh:
        row = fresh.get(Service, service.id)
        assert row.features is None
        assert row.price_type is PriceType.FIXED
        row.features = ["Responsive design", "Contact form"]
        fresh.add(row)
        fresh.commit()

    with Session(engine) as fresh:
        assert fresh.get(Service, service.id).features == ["Responsive design", "Contact form"]


def test_email_metadata_column(session: Session, user: User):
    email = Email(user_id=user.id, to=user.email, subject="Welcome", content="Hi", meta={"template": "welcome"})
    session.add(email)
    session.commit()

    raw = session.execute(text("SELECT metadata FROM emails WHERE id = :id"), {"id": email.id}).scalar_one()
    assert "welcome" in raw
    assert "metadata" in {column["name"] for column in inspect(session.get_bind()).get_columns("emails")}


def test_session_storage_table(engine, session: Session):
    session.add(SessionRecord(
        sid="abc123",
        sess={"cookie": {"httpOnly": True}, "user_id": 1},
        expire=datetime.now(timezone.utc) + timedelta(days=1),
    ))
    session.commit()

    indexes = inspect(engine).get_indexes("sessions")
    assert [index["name"] for index in indexes] == ["IDX_session_expire"]
    assert session.get(SessionRecord, "abc123").sess["user_id"] == 1


def test_table_names_match_the_database_contract(engine):
    assert set(inspect(engine).get_table_names()) == {
        "users", "sessions", "services", "client_services", "quote_requests", "quotes",
        "invoices", "payments", "portfolio_items", "testimonials", "emails", "web_packages",
        "hosting_packages", "billing_plans", "reminder_templates", "recurring_invoices",
        "reminder_logs", "contact_info", "about_us", "team_members", "analytics_data",
    }
    user_columns = [column["name"] for column in inspect(engine).get_columns("users")]
    assert user_columns[:4] == ["id", "username", "email", "password"]
    assert "stripe_subscription_id" in user_columns


def test_column_defaults_are_declared_in_the_database(engine, session: Session, user: User, service: Service):
    session.execute(text("INSERT INTO testimonials (client_name, content) VALUES ('Amina', 'Great work')"))
    session.execute(
        text("INSERT INTO client_services (user_id, service_id, price) VALUES (:user_id, :service_id, 1000)"),
        {"user_id": user.id, "service_id": service.id},
    )
    session.execute(text("INSERT INTO analytics_data (date) VALUES ('2026-10-01')"))
    session.commit()

    rating, is_active, created_at = session.execute(
        text("SELECT rating, is_active, created_at FROM testimonials")
    ).one()
    assert rating == 5
    assert is_active == 1
    assert created_at is not None

    raw_status = session.execute(text("SELECT status FROM client_services")).scalar_one()
    assert raw_status == "pending"
    with Session(engine) as fresh:
        purchase = fresh.exec(select(ClientService)).one()
        assert purchase.status is ClientServiceStatus.PENDING

    page_views, bounce_rate = session.execute(text("SELECT page_views, bounce_rate FROM analytics_data")).one()
    assert page_views == 0
    assert bounce_rate == 0
