from pathlib import Path
from typing import List, Optional

from stalewatch.features.staleness.domain.models import ScanRequest
from ..domain.interfaces import IWatchConfigSource
from ..data.json_source import JsonWatchConfigSource

def build_config_source(config_file: Optional[str] = None, from_db: bool = False) -> IWatchConfigSource:
    """
    Picks the configuration store: the database table, or a JSON file.
    """
    if from_db:
        from ..data.repository import SqlWatchConfigSource
        return SqlWatchConfigSource()
    if not config_file:
        raise ValueError("A folder config file is required unless the database source is used.")
    return JsonWatchConfigSource(Path(config_file))

def load_scan_requests(source: IWatchConfigSource) -> List[ScanRequest]:
    return source.load()
