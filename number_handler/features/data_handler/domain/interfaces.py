from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .models import HandlingSummary, Predicate


class IFileWalker(ABC):
    """
    Contract for traversing a directory tree of data files.
    """
    @abstractmethod
    def walk(self, root: Path, extension: str, exclude: Optional[Path] = None) -> Iterator[Path]:
        """
        Yields data files depth-first, the files of a directory before its subdirectories.
        Files whose suffix differs from `extension` are skipped silently.
        """
        pass


class INumberReader(ABC):
    """
    Contract for parsing one data file.
    """
    @abstractmethod
    def read_into(self, path: Path, predicate: Predicate, sink: Callable[[int], None]) -> int:
        """
        Parses every line of `path` and passes values accepted by `predicate` to `sink`.

        Returns:
            Number of non-blank lines parsed.
        """
        pass


class IResultWriter(ABC):
    """
    Contract for persisting the final number set.
    """
    @abstractmethod
    def write(self, directory: Path, file_name: str, numbers: Iterable[int]) -> Path:
        """
        Writes `numbers` one per line, creating or overwriting the file.
        Returns the path of the written file.
        """
        pass


class IDataHandler(ABC):
    """
    Contract for the whole collect / filter / deduplicate / sort / write run.
    """
    @abstractmethod
    def handle_data_of_directory(self, from_dir: Path, to_file_name: str) -> HandlingSummary:
        """
        Processes every data file under `from_dir` and writes the result
        to `to_file_name` inside the same directory.
        """
        pass
