import json
import logging
from pathlib import Path
from typing import List

from stalewatch.features.staleness.domain.models import ScanRequest
from ..domain.interfaces import IWatchConfigSource

logger = logging.getLogger(__name__)

class JsonWatchConfigSource(IWatchConfigSource):
    """
    Reads folders from a JSON document:

        [{"Path": "D:\\inbound", "TimeInterval": "3d"}, ...]

    or the same list under a top-level "Folders" key.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[ScanRequest]:
        if not self.path.exists():
            raise FileNotFoundError(f"Folder config not found: {self.path}")

        try:
            document = json.loads(self.path.read_text(encoding="utf-8-sig"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Folder config is not valid JSON ({self.path}): {e}") from e

        if isinstance(document, dict):
            document = document.get("Folders")
        if not isinstance(document, list):
            raise ValueError(f"Folder config must be a list of folder records: {self.path}")

        requests = []
        for index, record in enumerate(document):
            if not isinstance(record, dict) or "Path" not in record or "TimeInterval" not in record:
                raise ValueError(f"Folder record #{index} needs 'Path' and 'TimeInterval': {record!r}")

            # Intervals stay raw; a bad one is reported per folder, not here
            requests.append(ScanRequest(
                directory_path=str(record["Path"]),
                interval=str(record["TimeInterval"])
            ))

        logger.info(f"Loaded {len(requests)} folders from {self.path}")
        return requests
