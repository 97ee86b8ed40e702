import random
import uuid
from pathlib import Path
from typing import Optional, Tuple

from ..domain.interfaces import INumberFileWriter
from ..domain.models import GeneratorConfig


class RandomFileWriter(INumberFileWriter):
    """
    Writes a file named {uuid4}{extension} holding a random count of random integers,
    one per line.
    """

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None,
                 extension: str = ".txt", encoding: str = "utf-8"):
        self.config = config
        self.rng = rng or random.Random()
        self.extension = extension
        self.encoding = encoding

    def write_file(self, directory: Path) -> Tuple[Path, int]:
        file_path = directory / f"{uuid.uuid4()}{self.extension}"
        count = self.config.numbers_count.pick(self.rng)

        with open(file_path, "w", encoding=self.encoding) as f:
            for _ in range(count):
                f.write(f"{self.config.number_value.pick(self.rng)}\n")

        return file_path, count
