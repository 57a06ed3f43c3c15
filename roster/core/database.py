# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine factory."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from roster.core.config import settings

_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str | None = None) -> Engine:
    """Create an engine for ``url`` (defaults to ``settings.DATABASE_URL``)."""
    url = url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        # one shared connection for in-memory databases, else each
        # connection would see its own empty database
        if url in _MEMORY_URLS:
            return create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )
