# File: tests/conftest.py

import pytest
import os
import sys
from datetime import datetime, timezone

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Force SQLite before Settings / engine are imported
os.environ["USE_SQLITE"] = "true"
os.environ.setdefault("SQLITE_PATH", "./test_stalewatch.db")

from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

from stalewatch.core.database.connection import engine, init_db
from stalewatch.features.staleness.domain.interfaces import IDirectoryLister
from stalewatch.features.staleness.domain.models import FileObservation


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures DB exists and all tables are created.
    """
    if not database_exists(engine.url):
        create_database(engine.url)

    init_db()
    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test. Empties every table.
    """
    from stalewatch.core.database.base import Base

    with engine.connect() as conn:
        trans = conn.begin()
        conn.execute(text("PRAGMA foreign_keys = OFF;"))
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON;"))
        trans.commit()

    yield


@pytest.fixture
def now():
    """Fixed reference instant so cutoffs are deterministic."""
    return datetime(2024, 3, 31, 12, 0, 0, tzinfo=timezone.utc)


class FakeLister(IDirectoryLister):
    """
    Serves pre-built observations; records which roots were listed.
    """
    def __init__(self, creation_times=None, error=None):
        self.creation_times = creation_times or {}
        self.error = error
        self.listed = []

    def list_files(self, root):
        self.listed.append(root)
        if self.error is not None:
            raise self.error
        for name, created in self.creation_times.items():
            yield FileObservation(path=root / name, creation_time=created)


@pytest.fixture
def fake_lister_factory():
    return FakeLister
