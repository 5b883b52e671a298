from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from .models import FileObservation

class IDirectoryLister(ABC):
    """
    Contract for reading the immediate files of a directory.
    Abstracts os.scandir and the platform's notion of "creation time".
    """
    @abstractmethod
    def list_files(self, root: Path) -> Iterator[FileObservation]:
        """
        Yields one observation per regular file directly inside root.
        Sub-directories are not entered.

        Raises:
            OSError: If the directory or a file entry cannot be read.
        """
        pass
