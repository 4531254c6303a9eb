from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str

    # Environment
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Admin account seeded by reset_db.py
    admin_email: str
    admin_username: str
    admin_name: str
    admin_password: str

    @property
    def is_postgres(self) -> bool:
        """Whether the configured database is PostgreSQL."""
        return self.database_url.startswith(("postgresql", "postgres"))

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
