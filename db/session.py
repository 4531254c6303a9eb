import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; pool sizing and timezone only apply to PostgreSQL."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,
        connect_args={
            "connect_timeout": 10,
            "options": "-c timezone=utc"
        }
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.database_url, echo=settings.debug)


def get_session():

    with Session(engine) as session:
        yield session


def init_db(bind: Engine = engine) -> None:
    """Create every table registered on the metadata."""
    import models  # noqa: F401  registers the tables

    logger.info("Creating %d tables", len(SQLModel.metadata.tables))
    SQLModel.metadata.create_all(bind)


def drop_db(bind: Engine = engine) -> None:
    import models  # noqa: F401

    logger.info("Dropping all tables")
    SQLModel.metadata.drop_all(bind)
