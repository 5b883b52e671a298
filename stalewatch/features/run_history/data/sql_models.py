import uuid
from datetime import datetime, timezone
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from stalewatch.core.database.base import Base
from stalewatch.core.common.enums import ScanStatus

def utc_now():
    return datetime.now(timezone.utc)

class ScanRunModel(Base):
    __tablename__ = "scan_runs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    started_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    total = Column(Integer, nullable=False, default=0)
    failed = Column(Integer, nullable=False, default=0)
    # None when the run did not report (e.g. scan-only)
    report_ok = Column(Boolean, nullable=True)

    results = relationship(
        "ScanRunResultModel",
        back_populates="run",
        cascade="all, delete-orphan",
        order_by="ScanRunResultModel.position"
    )

class ScanRunResultModel(Base):
    __tablename__ = "scan_run_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    run_id = Column(Uuid(as_uuid=True), ForeignKey("scan_runs.id"), nullable=False)
    position = Column(Integer, nullable=False)
    directory_path = Column(String, nullable=False, index=True)
    time_interval = Column(String, nullable=False)
    cutoff = Column(DateTime(timezone=True), nullable=True)
    stale_count = Column(Integer, nullable=False)
    status = Column(SQLEnum(ScanStatus), nullable=False)
    detail = Column(String, nullable=False, default="")

    run = relationship("ScanRunModel", back_populates="results")
