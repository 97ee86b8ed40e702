from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from .models import GenerationResult


class IDataGenerator(ABC):
    """
    Contract for populating a directory with random data files.
    """
    @abstractmethod
    def generate_data(self, root: Path, files_count: int) -> GenerationResult:
        """
        Clears `root` (creating it when missing) and writes `files_count` data files into it.
        """
        pass


class INumberFileWriter(ABC):
    @abstractmethod
    def write_file(self, directory: Path) -> Tuple[Path, int]:
        """
        Writes one new data file into `directory`.
        Returns: (file_path, numbers_written)
        """
        pass
