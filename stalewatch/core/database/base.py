# File: stalewatch/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. All feature models (WatchedFolder, ScanRun) inherit from this.
Base = declarative_base()
