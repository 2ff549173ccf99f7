"""Database bootstrapping utilities."""

from animedb.packages.catalog.db import session as db_session
from animedb.packages.catalog.models.base import Base
from animedb.packages.catalog import models  # noqa: F401 - 注册全部 ORM 实体


def init_db() -> None:
    """Create all database tables if they do not exist."""
    Base.metadata.create_all(bind=db_session.engine)
