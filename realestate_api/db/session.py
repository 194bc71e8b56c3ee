# realestate_api/db/session.py
from __future__ import annotations
import logging

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from realestate_api.core.config import settings
from realestate_api.db.base import Base

logger = logging.getLogger(__name__)


def _sqlite_unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record):
    # builtin lower() folds ASCII only; ilike compiles to lower(x) LIKE lower(y)
    dbapi_connection.create_function("lower", 1, _sqlite_unicode_lower, deterministic=True)


def make_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise each checkout sees an empty db
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(url, **kwargs)
        event.listen(sqlite_engine, "connect", _register_sqlite_functions)
        return sqlite_engine
    return create_engine(url, pool_pre_ping=True)


engine = make_engine(settings.sqlalchemy_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_models(bind: Engine | None = None) -> None:
    # Import ALL model modules so metadata is populated before create_all
    from realestate_api.models import owner, property as prop, property_image, property_trace  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)


def drop_models(bind: Engine | None = None) -> None:
    from realestate_api.models import owner, property as prop, property_image, property_trace  # noqa: F401
    Base.metadata.drop_all(bind=bind or engine)


def ping(bind: Engine | None = None) -> None:
    with (bind or engine).connect() as conn:
        conn.execute(text("SELECT 1"))


def list_tables(bind: Engine | None = None) -> list[str]:
    return sorted(inspect(bind or engine).get_table_names())
