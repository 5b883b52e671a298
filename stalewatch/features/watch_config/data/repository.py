from typing import List

from stalewatch.core.database.connection import SessionLocal
from stalewatch.features.staleness.domain.models import ScanRequest
from .sql_models import WatchedFolderModel
from ..domain.interfaces import IWatchConfigSource

class SqlWatchConfigSource(IWatchConfigSource):
    """
    Folders stored in the `watched_folders` table.
    """

    def load(self) -> List[ScanRequest]:
        with SessionLocal() as db:
            rows = (
                db.query(WatchedFolderModel)
                .filter(WatchedFolderModel.enabled.is_(True))
                .order_by(WatchedFolderModel.id)
                .all()
            )
            return [ScanRequest(directory_path=row.path, interval=row.time_interval) for row in rows]

    def add_folder(self, path: str, interval: str) -> int:
        with SessionLocal() as db:
            row = WatchedFolderModel(path=path, time_interval=interval)
            db.add(row)
            db.commit()
            db.refresh(row)
            return row.id

    def disable_folder(self, folder_id: int) -> bool:
        """Returns False if no such folder exists."""
        with SessionLocal() as db:
            row = db.get(WatchedFolderModel, folder_id)
            if row is None:
                return False
            row.enabled = False
            db.commit()
            return True
