import os
from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from alembic import context

from finboard.core.config import settings
from finboard.db.base import Base
from finboard.models.record import StoreRecord  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

url = os.environ.get("DATABASE_URL") or settings.database_url
connectable = create_engine(url, poolclass=pool.NullPool)

with connectable.connect() as connection:
    context.configure(connection=connection, target_metadata=Base.metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()
