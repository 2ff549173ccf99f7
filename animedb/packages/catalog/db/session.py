"""Database engine and session factory configuration."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from animedb.packages.catalog.core.config import get_settings

settings = get_settings()


def _connect_args(url: str) -> dict:
    # SQLite 连接默认禁止跨线程使用，而 FastAPI 会在线程池中执行同步路由
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


# ``pool_pre_ping`` keeps the connection pool healthy; ``echo`` mirrors SQL logs
# when enabled in settings for easier debugging.
engine = create_engine(
    settings.sql_database_url,
    pool_pre_ping=True,
    echo=settings.database_echo,
    connect_args=_connect_args(settings.sql_database_url),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
