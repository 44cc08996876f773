from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from typing import AsyncGenerator, Optional
import config


metadata = MetaData()
Base = declarative_base(metadata=metadata)

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[sessionmaker] = None


def build_engine(url: str, echo: bool = False, isolation_level: Optional[str] = None) -> AsyncEngine:
    kwargs = {"echo": echo}
    if isolation_level:
        kwargs["isolation_level"] = isolation_level
    return create_async_engine(url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> sessionmaker:
    return sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


def get_engine() -> AsyncEngine:
    """Application engine, built from config on first use."""
    global _engine
    if _engine is None:
        if not config.DATABASE_URL:
            raise ValueError("DATABASE_URL is not set in the environment.")
        _engine = build_engine(
            config.DATABASE_URL,
            echo=config.DB_ECHO,
            isolation_level=config.DB_ISOLATION_LEVEL,
        )
    return _engine


def get_session_factory() -> sessionmaker:
    # Also used as a FastAPI dependency; order operations open their own
    # transaction from the factory instead of sharing a request session.
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory


# For FastAPI (used in Depends)
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with get_session_factory()() as session:
        yield session
