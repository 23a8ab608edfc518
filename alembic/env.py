"""Alembic environment for the plant care schema."""

from logging.config import fileConfig

from dotenv import load_dotenv

from alembic import context
from plantcare.database.connection import create_db_engine, get_database_url
from plantcare.database.core import Base

# Register every table on Base.metadata
from plantcare.database.diary.models import *  # noqa: F403
from plantcare.database.notifications.models import *  # noqa: F403
from plantcare.database.plants.models import *  # noqa: F403
from plantcare.database.reminders.models import *  # noqa: F403
from plantcare.database.users.models import *  # noqa: F403

load_dotenv()

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Shared between offline and online runs
CONFIGURE_OPTIONS = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "compare_server_default": True,
}


def run_migrations_offline() -> None:
    """Emit migration SQL to the script output without connecting."""
    context.configure(
        url=get_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **CONFIGURE_OPTIONS,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations against the configured PostgreSQL database."""
    engine = create_db_engine()

    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **CONFIGURE_OPTIONS)

            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
