import os
import logging
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from docforms.core.config import settings

logger = logging.getLogger(__name__)

engine = None
async_session_maker = None


async def init_db():
    """Initialize database connection and create tables"""
    global engine, async_session_maker

    from docforms.core.database_url import get_database_url
    database_url = get_database_url()

    if database_url.startswith("sqlite"):
        # SQLite configuration for local development
        engine = create_async_engine(
            database_url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=settings.DEBUG
        )
    else:
        # PostgreSQL configuration for production
        connect_args = {}

        # Add SSL for RDS connections in Lambda
        if os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
            from docforms.core.database_url import create_ssl_context
            connect_args["ssl"] = create_ssl_context()

        engine = create_async_engine(
            database_url,
            pool_pre_ping=True,
            pool_recycle=300,  # 5 minutes
            echo=settings.DEBUG,
            connect_args=connect_args
        )

    async_session_maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    # Register every mapped class before create_all
    from docforms.models.base import Base
    import docforms.models.registry  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Close database connection"""
    global engine
    if engine:
        await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session"""
    from fastapi import HTTPException

    if engine is None or async_session_maker is None:
        try:
            await init_db()
        except Exception as e:
            logger.error(f"Failed to initialize database in get_db: {e}", exc_info=True)
            raise HTTPException(status_code=503, detail="Database connection unavailable")

    async with async_session_maker() as session:
        yield session


async def seed_catalog():
    """Load the built-in template catalog"""
    from docforms.templates.loader import catalog_loader

    async with async_session_maker() as db:
        return await catalog_loader.load(db)
