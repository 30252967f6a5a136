import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from storage_api.core.config import settings
from storage_api.models.base import Base
from storage_api.models.user import User  # noqa: F401
from storage_api.models.api_key import ApiKey  # noqa: F401
from storage_api.models.location import Location  # noqa: F401
from storage_api.models.kitchen import Kitchen  # noqa: F401
from storage_api.models.storage_listing import StorageListing  # noqa: F401
from storage_api.models.platform_setting import PlatformSetting  # noqa: F401
from storage_api.models.audit_log import AuditLog  # noqa: F401


config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def run_migrations_offline():
    context.configure(url=settings.database_url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def do_run_migrations(connection):
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()

async def run_migrations_online():
    connectable = create_async_engine(settings.database_url, poolclass=pool.NullPool)
    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()

if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
