"""Database connection and initialization."""

import logging

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fitnest.config import settings

# Import all models so SQLModel registers them
import fitnest.models  # noqa: F401

logger = logging.getLogger(__name__)


def _is_sqlite(url: str) -> bool:
    return make_url(url).get_backend_name() == "sqlite"


def _is_sqlite_memory(url: str) -> bool:
    return _is_sqlite(url) and make_url(url).database in (None, "", ":memory:")


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: "str | None" = None) -> Engine:
    """Build an engine for ``url`` (defaults to the configured SQLite file).

    In-memory SQLite shares one connection across threads, otherwise every
    session would see its own empty database. That connection is not safe for
    concurrent requests, so ``sqlite://`` is meant for tests only.
    """
    url = url or settings.resolved_database_url()
    kwargs: dict = {"echo": settings.debug}
    if _is_sqlite(url):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(url):
            kwargs["poolclass"] = StaticPool

    db_engine = create_engine(url, **kwargs)
    if _is_sqlite(url):
        event.listen(db_engine, "connect", _enable_foreign_keys)
    return db_engine


engine = create_db_engine()


def init_db(bind: "Engine | None" = None) -> None:
    """Create all tables, enable WAL for file databases, seed health tips."""
    from fitnest.services.health_tip_service import seed_health_tips

    bind = bind or engine
    SQLModel.metadata.create_all(bind)

    url = bind.url.render_as_string(hide_password=False)
    if _is_sqlite(url) and not _is_sqlite_memory(url):
        with bind.connect() as conn:
            conn.exec_driver_sql("PRAGMA journal_mode=WAL")
            conn.exec_driver_sql("PRAGMA synchronous=NORMAL")
            conn.commit()

    if settings.seed_health_tips:
        with Session(bind) as session:
            seed_health_tips(session)

    logger.info("Database ready: %s", bind.url.render_as_string(hide_password=True))


def get_session():
    """FastAPI dependency: yields a database session."""
    with Session(engine) as session:
        yield session
