"""Tests for the schemas derived from the table models."""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

import pytest

from core.exceptions import RecordValidationError
from models import Invoice, User
from models.enums import ClientServiceStatus, InvoiceStatus
from schemas import ENTITY_TABLES, SCHEMAS, get_schema, validate_create

INVOICE_PAYLOAD = {
    "user_id": 1,
    "invoice_number": "INV-2026-0042",
    "title": "Hosting renewal",
    "total_amount": "1250.00",
    "due_date": "2026-11-30T00:00:00Z",
}


def test_every_entity_is_registered():
    assert len(SCHEMAS) == 20
    assert set(SCHEMAS) == {table.__tablename__ for table in ENTITY_TABLES}
    assert "sessions" not in SCHEMAS


@pytest.mark.parametrize("name", sorted(SCHEMAS))
def test_insertable_shape_is_row_minus_server_managed(name):
    schema = SCHEMAS[name]
    expected = [key for key in schema.row_fields if key not in {"id", "created_at", "updated_at"}]

    assert list(schema.insert_fields) == expected
    assert list(schema.create.model_fields) == expected
    assert list(schema.update.model_fields) == expected
    assert list(schema.response.model_fields) == list(schema.row_fields)
    assert "id" in schema.server_managed


@pytest.mark.parametrize("name, managed", [
    ("users", {"id", "created_at", "updated_at"}),
    ("emails", {"id", "created_at"}),
    ("reminder_logs", {"id", "created_at"}),
    ("contact_info", {"id", "updated_at"}),
    ("about_us", {"id", "updated_at"}),
])
def test_server_managed_columns_follow_the_table(name, managed):
    assert SCHEMAS[name].server_managed == managed


def test_lookup_by_name_model_or_row():
    schema = get_schema("invoices")
    assert get_schema(Invoice) is schema
    assert get_schema(Invoice(invoice_number="X", title="X", user_id=1)) is schema
    with pytest.raises(KeyError):
        get_schema("sessions")


def test_declared_constraints():
    assert SCHEMAS["users"].unique_fields == ("username", "email")
    assert SCHEMAS["invoices"].unique_fields == ("invoice_number",)
    assert SCHEMAS["payments"].foreign_keys == {"invoice_id": "invoices.id", "user_id": "users.id"}
    assert SCHEMAS["reminder_logs"].foreign_keys == {
        "user_id": "users.id",
        "invoice_id": "invoices.id",
        "recurring_invoice_id": "recurring_invoices.id",
        "reminder_template_id": "reminder_templates.id",
        "email_id": "emails.id",
    }

    total = SCHEMAS["invoices"].column("total_amount")
    assert (total.max_digits, total.decimal_places) == (10, 2)
    rate = SCHEMAS["analytics_data"].column("conversion_rate")
    assert (rate.max_digits, rate.decimal_places) == (5, 2)
    assert rate.default == Decimal("0")


def test_user_requires_username_email_and_password():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("users", {"full_name": "No Credentials"})

    assert set(exc_info.value.fields) == {"username", "email", "password"}
    assert exc_info.value.entity == "users"


def test_user_with_only_required_fields_is_valid():
    data = validate_create("users", {"username": "jane", "email": "jane@example.com", "password": "secret"})

    assert data.username == "jane"
    assert data.full_name is None
    assert data.role == "client"
    assert data.verified is False


def test_empty_required_text_is_rejected():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("users", {"username": "", "email": "jane@example.com", "password": "secret"})
    assert exc_info.value.fields == ["username"]


def test_server_managed_input_is_dropped():
    data = validate_create("users", {
        "id": 99,
        "created_at": "2020-01-01T00:00:00Z",
        "username": "jane",
        "email": "jane@example.com",
        "password": "secret",
    })
    dumped = data.model_dump()
    assert "id" not in dumped
    assert "created_at" not in dumped


def test_invoice_total_amount_must_be_fixed_point():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("invoices", {**INVOICE_PAYLOAD, "total_amount": "twelve fifty"})
    assert exc_info.value.fields == ["total_amount"]

    data = validate_create("invoices", INVOICE_PAYLOAD)
    assert data.total_amount == Decimal("1250.00")
    assert data.status == InvoiceStatus.UNPAID


@pytest.mark.parametrize("amount", ["10.125", "1234567890.5"])
def test_invoice_total_amount_respects_precision(amount):
    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("invoices", {**INVOICE_PAYLOAD, "total_amount": amount})
    assert exc_info.value.fields == ["total_amount"]


def test_every_invalid_field_is_reported():
    payload = {
        "user_id": "not-a-number",
        "invoice_number": "INV-1",
        "total_amount": "abc",
        "due_date": "someday",
        "status": "settled",
    }
    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("invoices", payload)

    assert set(exc_info.value.fields) == {"user_id", "title", "total_amount", "due_date", "status"}
    for error in exc_info.value.errors:
        assert error["message"]
        assert error["type"]


def test_defaults_are_filled_when_omitted():
    purchase = validate_create("client_services", {"user_id": 1, "service_id": 2, "price": "450.00"})
    assert purchase.status == ClientServiceStatus.PENDING

    testimonial = validate_create("testimonials", {"client_name": "Amina", "content": "Great work"})
    assert testimonial.rating == 5
    assert testimonial.is_active is True

    overridden = validate_create("testimonials", {"client_name": "Amina", "content": "Ok", "rating": 3})
    assert overridden.rating == 3


def test_text_arrays_and_json_payloads():
    service = validate_create("services", {
        "name": "SEO Audit",
        "description": "Full audit",
        "category": "marketing",
        "features": ["Keyword research", "Backlinks"],
    })
    assert service.features == ["Keyword research", "Backlinks"]

    with pytest.raises(RecordValidationError) as exc_info:
        validate_create("services", {
            "name": "SEO Audit",
            "description": "Full audit",
            "category": "marketing",
            "features": "Keyword research",
        })
    assert exc_info.value.fields == ["features"]

    member = validate_create("team_members", {
        "name": "Brian",
        "position": "Designer",
        "social_links": {"github": "https://github.com/brian"},
    })
    assert member.social_links == {"github": "https://github.com/brian"}


def test_email_metadata_keeps_its_column_name():
    schema = SCHEMAS["emails"]
    data = schema.validate_create({
        "to": "client@example.com",
        "subject": "Invoice INV-1",
        "content": "Your invoice is ready",
        "metadata": {"invoice_id": 1},
    })
    assert data.meta == {"invoice_id": 1}
    assert schema.column("meta").name == "metadata"

    row = schema.build_row(data)
    assert row.meta == {"invoice_id": 1}
    assert schema.to_response(row).model_dump(by_alias=True)["metadata"] == {"invoice_id": 1}


def test_response_hides_credentials():
    user = User(id=1, username="jane", email="jane@example.com", password="hashed", reset_token="abc")
    dumped = SCHEMAS["users"].to_response(user).model_dump()

    assert dumped["username"] == "jane"
    assert "password" not in dumped
    assert "reset_token" not in dumped


def test_update_schema_is_partial():
    schema = SCHEMAS["invoices"]
    data = schema.validate_update({"status": "paid"})
    assert data.model_dump(exclude_unset=True) == {"status": InvoiceStatus.PAID}

    with pytest.raises(RecordValidationError) as exc_info:
        schema.validate_update({"title": None, "description": None})
    assert exc_info.value.fields == ["title"]


ROW_TIMESTAMP = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


SAMPLE_VALUES = {
    bool: True,
    int: 7,
    str: "Nairobi",
    Decimal: Decimal("12.50"),
    datetime: ROW_TIMESTAMP,
    date: date(2026, 3, 1),
}


def sample_value(column):
    if column.python_type == list[str]:
        return ["Design", "Hosting"]
    if isinstance(column.python_type, type) and issubclass(column.python_type, Enum):
        # last member, so the value differs from the column default
        return list(column.python_type)[-1]
    return SAMPLE_VALUES.get(column.python_type, {"campaign": "spring"})


@pytest.mark.parametrize("name", sorted(SCHEMAS))
def test_row_round_trips_through_insertable_projection(name):
    schema = SCHEMAS[name]
    row = schema.table(**{column.key: sample_value(column) for column in schema.columns})
    server_values = {key: getattr(row, key) for key in schema.server_managed}

    insertable = schema.extract_insertable(row)
    rebuilt = schema.merge_server_fields(insertable, **server_values)

    assert {key: getattr(rebuilt, key) for key in schema.row_fields} == {
        key: getattr(row, key) for key in schema.row_fields
    }


def test_legacy_status_cannot_be_projected():
    row = Invoice(
        id=7, user_id=3, invoice_number="INV-7", title="Website", total_amount=Decimal("1250.00"),
        due_date=ROW_TIMESTAMP, status="archived",
    )
    with pytest.raises(RecordValidationError) as exc_info:
        get_schema(row).extract_insertable(row)
    assert exc_info.value.fields == ["status"]


def test_merge_refuses_client_columns():
    schema = SCHEMAS["contact_info"]
    data = schema.validate_create({"phone_number1": "1", "email": "a@b.c", "location": "Nairobi"})
    with pytest.raises(ValueError):
        schema.merge_server_fields(data, id=1, email="other@b.c")
