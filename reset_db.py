from datetime import datetime, timezone

import bcrypt
from sqlmodel import Session

from core.config import settings
from core.log_config import configure_logging
from db.session import drop_db, engine, init_db
from models.content import AboutUs, ContactInfo
from services.records import create_record


def hash_password(password: str) -> str:
    # bcrypt directly, passlib is incompatible with bcrypt 5.0+
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def reset_db():
    print("🗑️  Dropping all tables...")
    drop_db(engine)

    print("✨ Creating all tables...")
    init_db(engine)

    print(f"🌱 Seeding Admin User: {settings.admin_email}...")
    with Session(engine) as session:
        user = create_record(session, "users", {
            "username": settings.admin_username,
            "email": settings.admin_email,
            "password": hash_password(settings.admin_password),
            "full_name": settings.admin_name,
            "role": "admin",
            "verified": True,
        })

        # Single-row pages edited from the admin
        now = datetime.now(timezone.utc)
        session.add(ContactInfo(
            phone_number1="+254 700 000 000",
            email=settings.admin_email,
            location="Nairobi, Kenya",
            updated_at=now,
        ))
        session.add(AboutUs(
            title="About Us",
            content="Tell visitors who you are.",
            updated_at=now,
        ))
        session.commit()

        print(f"✅ Database reset complete. User ID: {user.id}")


if __name__ == "__main__":
    configure_logging(settings.log_level)
    reset_db()
