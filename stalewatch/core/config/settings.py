# File: stalewatch/core/config/settings.py

import os
from pathlib import Path


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Settings:
    # --- Paths ---
    # stalewatch/core/config/settings.py -> stalewatch/core/config -> stalewatch/core -> stalewatch -> ROOT
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent.parent
    CONFIG_FILE: str = os.getenv("STALEWATCH_CONFIG_FILE", str(BASE_DIR / "folders.json"))

    # --- Database ---
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "password")
    POSTGRES_SERVER: str = os.getenv("POSTGRES_SERVER", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "stalewatch_db")

    @property
    def DATABASE_URL(self) -> str:
        # Only fallback to SQLite if explicitly requested.
        if _env_flag("USE_SQLITE", "false"):
            sqlite_path = os.getenv("SQLITE_PATH", "./stalewatch.db")
            return f"sqlite:///{sqlite_path}"

        return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # --- Metrics Backend ---
    METRIC_NAMESPACE: str = os.getenv("STALEWATCH_METRIC_NAMESPACE", "Windows/Default")
    METRIC_NAME: str = "OldFileCount"
    AWS_REGION: str = os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION", "us-east-1"))

    # --- Host Identity ---
    # Empty means "fall back to the local hostname"
    INSTANCE_ID: str = os.getenv("STALEWATCH_INSTANCE_ID", "")
    INSTANCE_NAME: str = os.getenv("STALEWATCH_INSTANCE_NAME", "")

    # --- Scan / Report Policy ---
    TIMESTAMP_SOURCE: str = os.getenv("STALEWATCH_TIMESTAMP_SOURCE", "created")
    REPORT_ERROR_STATES: bool = _env_flag("STALEWATCH_REPORT_ERROR_STATES", "true")
    STOP_ON_REPORT_FAILURE: bool = _env_flag("STALEWATCH_STOP_ON_REPORT_FAILURE", "true")
    REPORT_FAILURE_EXIT_CODE: int = int(os.getenv("STALEWATCH_REPORT_FAILURE_EXIT_CODE", "99"))


settings = Settings()
