from datetime import datetime, timezone
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from stalewatch.core.database.base import Base

def utc_now():
    return datetime.now(timezone.utc)

class WatchedFolderModel(Base):
    __tablename__ = "watched_folders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    path = Column(String, nullable=False)
    # Raw "<N><unit>" string; parsed at scan time
    time_interval = Column(String, nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utc_now)
