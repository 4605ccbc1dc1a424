# restopos/db.py
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from restopos.core.config import settings
from restopos.models.base import Base

DATABASE_URL = settings.database_url
if not DATABASE_URL:
    raise ValueError("❌ DATABASE_URL is not set!")


def make_engine(url: str, echo: bool = False):
    # SQLite connections are cheap; don't pool them across event loops
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, poolclass=NullPool)
    return create_async_engine(url, echo=echo)


# Create engine
engine = make_engine(DATABASE_URL, echo=settings.sql_echo)

# Async session maker
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


# Dependency
async def get_db():
    async with async_session() as session:
        yield session


async def create_db_and_tables(bind=None):
    import restopos.models  # registers tables on Base.metadata

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
