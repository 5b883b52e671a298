from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from stalewatch.core.database.connection import SessionLocal
from stalewatch.features.staleness.domain.models import ScanResult
from stalewatch.features.metric_reporting.domain.models import ReportSummary
from .sql_models import ScanRunModel, ScanRunResultModel
from ..domain.interfaces import IRunHistoryRepository

def _as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back out
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment

class SqlRunHistoryRepo(IRunHistoryRepository):

    def record_run(self,
                   results: List[ScanResult],
                   started_at: datetime,
                   summary: Optional[ReportSummary] = None) -> UUID:
        with SessionLocal() as db:
            try:
                run = ScanRunModel(
                    started_at=started_at,
                    total=len(results),
                    failed=sum(1 for r in results if not r.ok),
                    report_ok=summary.ok if summary is not None else None
                )
                for position, result in enumerate(results):
                    run.results.append(ScanRunResultModel(
                        position=position,
                        directory_path=result.directory_path,
                        time_interval=result.interval,
                        cutoff=result.cutoff,
                        stale_count=result.stale_count,
                        status=result.status,
                        detail=result.detail
                    ))

                db.add(run)
                db.commit()
                db.refresh(run)
                return run.id
            except Exception as e:
                db.rollback()
                raise e

    def latest_results(self, directory_path: str, limit: int = 10) -> List[ScanResult]:
        with SessionLocal() as db:
            rows = (
                db.query(ScanRunResultModel, ScanRunModel.started_at)
                .join(ScanRunModel, ScanRunResultModel.run_id == ScanRunModel.id)
                .filter(ScanRunResultModel.directory_path == directory_path)
                .order_by(ScanRunModel.started_at.desc())
                .limit(limit)
                .all()
            )

            return [
                ScanResult(
                    directory_path=row.directory_path,
                    interval=row.time_interval,
                    cutoff=_as_utc(row.cutoff),
                    stale_count=row.stale_count,
                    status=row.status,
                    scanned_at=_as_utc(started_at),
                    detail=row.detail or ""
                )
                for row, started_at in rows
            ]
