"""
Database Seeder Script

Generates fake data for testing purposes using Faker.
Creates clients with purchased services, quote requests, quotes, invoices
and payments, plus the marketing content shown on the website.

Usage:
    python seed_data.py [--clients 20] [--invoices 60] [--seed 42]

Requirements:
    pip install faker
"""

import argparse
import random
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from faker import Faker
from sqlmodel import Session

from core.config import settings
from core.log_config import configure_logging
from db.session import engine
from models.enums import (
    ClientServiceStatus,
    InvoiceStatus,
    PaymentStatus,
    QuoteRequestStatus,
    QuoteStatus,
)
from reset_db import hash_password
from services.records import create_record

fake = Faker()

SERVICE_CATALOG = [
    ("Business Website", "web", Decimal("45000.00")),
    ("E-commerce Store", "web", Decimal("120000.00")),
    ("Shared Hosting", "hosting", Decimal("6000.00")),
    ("SEO Audit", "marketing", Decimal("15000.00")),
    ("Logo & Branding", "design", Decimal("20000.00")),
    ("Website Maintenance", "support", Decimal("8000.00")),
]
PAYMENT_METHODS = ["mpesa", "paypal", "bank"]
TECHNOLOGIES = ["React", "Django", "WordPress", "Laravel", "Tailwind", "PostgreSQL", "Stripe"]


def money(value: Decimal) -> str:
    return str(value.quantize(Decimal("0.01")))


def create_services(session: Session) -> list:
    print(f"Creating {len(SERVICE_CATALOG)} services...")
    services = []
    for name, category, price in SERVICE_CATALOG:
        services.append(create_record(session, "services", {
            "name": name,
            "description": fake.paragraph(nb_sentences=3),
            "category": category,
            "price": money(price),
            "features": fake.words(nb=4),
        }))
    return services


def create_clients(session: Session, count: int) -> list:
    """Create client accounts sharing one throwaway password."""
    print(f"Creating {count} clients...")
    password = hash_password("password123")
    clients = []
    for _ in range(count):
        profile = fake.simple_profile()
        clients.append(create_record(session, "users", {
            "username": f"{profile['username']}{fake.unique.random_int(100, 9999)}",
            "email": fake.unique.email(),
            "password": password,
            "full_name": profile["name"],
            "phone": fake.phone_number(),
            "company": fake.company() if random.random() > 0.3 else None,
            "verified": random.random() > 0.2,
        }))
    print(f"✓ Created {count} clients")
    return clients


def create_sales(session: Session, clients: list, services: list, count: int) -> list:
    """Quote requests, quotes, invoices and payments for random clients."""
    print(f"Creating {count} invoices...")
    invoices = []
    year = datetime.now().year
    for index in range(1, count + 1):
        client = random.choice(clients)
        service = random.choice(services)
        now = datetime.now(timezone.utc)

        request = create_record(session, "quote_requests", {
            "user_id": client.id,
            "name": client.full_name,
            "email": client.email,
            "phone": client.phone,
            "service_type": service.category,
            "message": fake.paragraph(),
            "status": QuoteRequestStatus.QUOTED,
        }, commit=False)
        quote = create_record(session, "quotes", {
            "quote_request_id": request.id,
            "user_id": client.id,
            "title": service.name,
            "description": fake.paragraph(),
            "total_price": money(service.price),
            "valid_until": now + timedelta(days=30),
            "status": QuoteStatus.ACCEPTED,
        }, commit=False)
        purchase = create_record(session, "client_services", {
            "user_id": client.id,
            "service_id": service.id,
            "status": random.choice([ClientServiceStatus.ACTIVE, ClientServiceStatus.COMPLETED]),
            "price": money(service.price),
        }, commit=False)

        status = random.choice(list(InvoiceStatus))
        tax = (service.price * Decimal("0.16")).quantize(Decimal("0.01"))
        invoice = create_record(session, "invoices", {
            "user_id": client.id,
            "quote_id": quote.id,
            "client_service_id": purchase.id,
            "invoice_number": f"INV-{year}-{str(index).zfill(4)}",
            "title": service.name,
            "total_amount": money(service.price + tax),
            "tax_amount": money(tax),
            "due_date": now + timedelta(days=random.randint(-30, 30)),
            "status": status,
        }, commit=False)

        if status == InvoiceStatus.PAID:
            create_record(session, "payments", {
                "invoice_id": invoice.id,
                "user_id": client.id,
                "amount": money(service.price + tax),
                "payment_method": random.choice(PAYMENT_METHODS),
                "transaction_id": fake.bothify("??########").upper(),
                "status": PaymentStatus.COMPLETED,
            }, commit=False)

        invoices.append(invoice)
        # Commit in batches
        if index % 20 == 0:
            session.commit()
            print(f"  Processed {index}/{count} invoices...")

    session.commit()
    print(f"✓ Created {count} invoices")
    return invoices


def create_content(session: Session) -> None:
    print("Creating website content...")
    for _ in range(6):
        create_record(session, "portfolio_items", {
            "title": fake.catch_phrase(),
            "description": fake.paragraph(),
            "category": random.choice(["web", "e-commerce", "branding"]),
            "image_url": fake.image_url(),
            "website_url": fake.url(),
            "client_name": fake.company(),
            "completion_date": fake.date_between(start_date="-2y", end_date="today"),
            "featured": random.random() > 0.6,
            "technologies": random.sample(TECHNOLOGIES, 3),
        }, commit=False)
    for _ in range(5):
        create_record(session, "testimonials", {
            "client_name": fake.name(),
            "client_company": fake.company(),
            "client_title": fake.job(),
            "content": fake.paragraph(),
            "rating": random.randint(4, 5),
        }, commit=False)
    for order in range(4):
        create_record(session, "team_members", {
            "name": fake.name(),
            "position": fake.job(),
            "bio": fake.paragraph(),
            "email": fake.company_email(),
            "social_links": {"linkedin": fake.url(), "twitter": fake.url()},
            "display_order": order,
        }, commit=False)

    today = date.today()
    for offset in range(30):
        create_record(session, "analytics_data", {
            "date": today - timedelta(days=offset),
            "page_views": random.randint(200, 2000),
            "unique_visitors": random.randint(80, 900),
            "conversion_rate": money(Decimal(random.uniform(0.5, 6))),
            "bounce_rate": money(Decimal(random.uniform(25, 70))),
            "top_sources_data": [
                {"source": "google", "visits": random.randint(50, 500)},
                {"source": "direct", "visits": random.randint(20, 300)},
            ],
        }, commit=False)
    session.commit()
    print("✓ Created website content")


def main():
    parser = argparse.ArgumentParser(description='Seed database with fake data')
    parser.add_argument('--clients', type=int, default=20, help='Number of clients to create (default: 20)')
    parser.add_argument('--invoices', type=int, default=60, help='Number of invoices to create (default: 60)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible data')

    args = parser.parse_args()
    configure_logging(settings.log_level)

    if args.seed is not None:
        random.seed(args.seed)
        Faker.seed(args.seed)

    print("\n🌱 Starting database seeding...")
    print(f"   Clients: {args.clients}")
    print(f"   Invoices: {args.invoices}\n")

    with Session(engine) as session:
        services = create_services(session)
        clients = create_clients(session, args.clients)
        invoices = create_sales(session, clients, services, args.invoices)
        create_content(session)

        status_counts = {}
        for invoice in invoices:
            status_counts[invoice.status.value] = status_counts.get(invoice.status.value, 0) + 1

        print("\n📊 Summary:")
        print(f"   Total clients: {len(clients)}")
        print(f"   Total invoices: {len(invoices)}")
        print("   Status breakdown:")
        for status, count in status_counts.items():
            print(f"     - {status}: {count}")

    print("\n✅ Seeding complete!\n")


if __name__ == "__main__":
    main()
