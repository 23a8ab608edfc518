"""PostgreSQL engine and session management for the plant care database."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_NAME = "plant_care"
DEFAULT_DATABASE_USER = "app"
DEFAULT_DATABASE_PORT = 5432
DEFAULT_POOL_SIZE = 5


def get_database_url() -> str:
    """Build the PostgreSQL URL from environment variables.

    DATABASE_HOST and APP_DB_PASSWORD are required. DATABASE_PORT,
    DATABASE_NAME and DATABASE_USER fall back to defaults.

    :returns: The database connection URL with the password included.
    :raises KeyError: If a required environment variable is not set.
    """
    url = URL.create(
        drivername="postgresql+psycopg2",
        username=os.environ.get("DATABASE_USER", DEFAULT_DATABASE_USER),
        password=os.environ["APP_DB_PASSWORD"],
        host=os.environ["DATABASE_HOST"],
        port=int(os.environ.get("DATABASE_PORT", DEFAULT_DATABASE_PORT)),
        database=os.environ.get("DATABASE_NAME", DEFAULT_DATABASE_NAME),
    )
    return url.render_as_string(hide_password=False)


def create_db_engine(*, echo: bool = False) -> Engine:
    """Create a SQLAlchemy engine for the plant care database.

    :param echo: If True, log all SQL statements.
    :returns: A configured engine that checks connections before use.
    """
    pool_size = int(os.environ.get("DATABASE_POOL_SIZE", DEFAULT_POOL_SIZE))
    engine = create_engine(
        get_database_url(),
        echo=echo,
        pool_pre_ping=True,
        pool_size=pool_size,
    )
    logger.info(f"Database engine created: host={engine.url.host}, db={engine.url.database}")
    return engine


@dataclass
class _DatabaseState:
    """Lazily created engine and session factory for this process."""

    engine: Engine | None = field(default=None)
    session_factory: sessionmaker[Session] | None = field(default=None)


_state = _DatabaseState()


def get_engine() -> Engine:
    """Get the process-wide engine, creating it on first use.

    :returns: The database engine.
    """
    if _state.engine is None:
        _state.engine = create_db_engine()
    return _state.engine


def get_session_factory() -> sessionmaker[Session]:
    """Get the process-wide session factory, creating it on first use.

    Objects stay usable after commit so callers can build responses from them.

    :returns: A sessionmaker bound to the database engine.
    """
    if _state.session_factory is None:
        _state.session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _state.session_factory


def dispose_engine() -> None:
    """Close pooled connections and forget the engine.

    Used by worker processes after a fork so each child opens its own pool.
    """
    if _state.engine is not None:
        _state.engine.dispose()
    _state.engine = None
    _state.session_factory = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Open a session that commits on success and rolls back on error.

    :yields: A database session.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
