"""
Async engine and sessions for the blog database.

Request handlers never touch the engine: they receive a session from
:func:`get_session`, which commits when the request succeeds, rolls back
when it fails and always returns the connection to the pool.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import settings
from bloglist.errors import DatabaseInitializationError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

# Applied both server-side and as the asyncpg command timeout
STATEMENT_TIMEOUT_MS = 30_000

engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_size=settings.POOL_SIZE,
    max_overflow=settings.MAX_OVERFLOW,
    pool_timeout=settings.POOL_TIMEOUT,
    pool_recycle=settings.POOL_RECYCLE,
    pool_pre_ping=True,
    connect_args={
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {"statement_timeout": str(STATEMENT_TIMEOUT_MS)},
    },
)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    A session whose work is committed on exit and rolled back on error.

    Only database failures are logged here; application errors such as a
    refused blog mutation are rolled back and left to their own handlers.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        except Exception:
            await session.rollback()
            raise


async def get_session() -> AsyncGenerator[AsyncSession]:
    """FastAPI dependency wrapping each request in :func:`transaction`."""
    async with transaction() as session:
        yield session


async def init_db() -> None:
    """
    Create the ``users`` and ``blogs`` tables when they are missing.

    Raises:
        DatabaseInitializationError: If the schema cannot be created
    """
    # Registers both tables on SQLModel.metadata
    import bloglist.models  # noqa: F401, PLC0415

    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except (SQLAlchemyError, OSError) as e:
        logger.exception("Database initialization failed")
        raise DatabaseInitializationError from e
    logger.info("Database tables ready")


async def close_db() -> None:
    await engine.dispose()
    logger.info("Database connections closed")
