from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

ALEMBIC_INI_PATH = Path(__file__).resolve().parents[2] / "alembic.ini"
MEMORY_DATABASE_URL = "sqlite://"


def normalize_database_url(url: str) -> str:
    """Normalize PostgreSQL URL to use psycopg3 driver."""
    if url.startswith("postgresql://") and "+psycopg" not in url:
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_engine(storage_backend: str, database_url: str | None = None) -> Engine:
    """
    Build the engine for the selected storage backend.

    - "memory": a private in-process SQLite database. A static pool keeps one
      connection alive so every session sees the same data.
    - "database": the configured DATABASE_URL (PostgreSQL or SQLite).
    """
    if storage_backend == "memory":
        engine = create_engine(
            MEMORY_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif storage_backend == "database":
        if not database_url:
            raise ValueError("database_url is required for the 'database' backend")
        url = normalize_database_url(database_url)
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        engine = create_engine(url, connect_args=connect_args)
    else:
        raise ValueError(f"Unknown storage backend: {storage_backend}")

    if engine.dialect.name == "sqlite":
        _enable_sqlite_foreign_keys(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def run_migrations(engine: Engine) -> None:
    """Upgrade the schema behind ``engine`` to the latest Alembic revision."""
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(str(ALEMBIC_INI_PATH))
    alembic_cfg.set_main_option(
        "script_location", str(ALEMBIC_INI_PATH.parent / "alembic")
    )
    with engine.begin() as connection:
        # env.py must reuse this connection; a new one would see an empty
        # in-memory database
        alembic_cfg.attributes["connection"] = connection
        alembic_cfg.attributes["configure_logger"] = False
        command.upgrade(alembic_cfg, "head")
