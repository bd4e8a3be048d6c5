"""
Alembic migration environment for the todo-list schema.

Migrations run on a SYNC engine (psycopg2) built from
`settings.DATABASE_URL_SYNC`; the application itself talks to the
same database through asyncpg. Pass `-x url=<sqlalchemy-url>` to
migrate a different database (e.g. a local SQLite file).
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from todo_app.core.config import settings
from todo_app.db.models import Base  # noqa: F401 — registers users, todolists, todos

config = context.config

migration_url = context.get_x_argument(as_dictionary=True).get("url") or settings.DATABASE_URL_SYNC
config.set_main_option("sqlalchemy.url", migration_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of touching a database."""
    context.configure(
        url=migration_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived, unpooled connection."""
    connectable = create_engine(migration_url, poolclass=pool.NullPool)
    try:
        with connectable.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
                render_as_batch=connection.dialect.name == "sqlite",
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
