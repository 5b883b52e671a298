import sqlalchemy

from stalewatch.core.config.settings import settings
from stalewatch.core.database.connection import engine, init_db


def test_tables_are_created():
    init_db()

    tables = set(sqlalchemy.inspect(engine).get_table_names())

    assert {"watched_folders", "scan_runs", "scan_run_results"} <= tables


def test_sqlite_url_when_requested():
    assert settings.DATABASE_URL.startswith("sqlite:///")
