# File: stalewatch/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from stalewatch.core.config.settings import settings

# check_same_thread=False is needed only for SQLite (Test Mode)
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Creates every registered table. Safe to call repeatedly."""
    from stalewatch.core.database.base import Base

    # Import all models so they register on Base
    import stalewatch.features.watch_config.data.sql_models  # noqa: F401
    import stalewatch.features.run_history.data.sql_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
