"""
Alembic Environment Configuration

The database URL comes from bookcatalog settings (DATABASE_URL), not from
alembic.ini, so migrations always target the same database as the app.

MIGRATION WORKFLOW:
===================
1. Change the models in bookcatalog/models/
2. alembic revision --autogenerate -m "description"
3. Review the file in alembic/versions/
4. alembic upgrade head
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from bookcatalog.config import get_settings
from bookcatalog.database import Base
from bookcatalog.models import Author, Book, BookAuthor  # noqa: F401 - registers tables

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Tables known to the models; autogenerate diffs the database against these
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Emit migration SQL without connecting.

    Usage:
        alembic upgrade head --sql > migration.sql
    """
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a live connection (alembic upgrade head)."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
