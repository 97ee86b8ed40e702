import logging
import random
import shutil
from pathlib import Path
from typing import Optional, Union

from number_handler.core.config.settings import settings
from number_handler.core.errors import ConfigurationError, DataIOError

from ..data.random_writer import RandomFileWriter
from ..domain.interfaces import IDataGenerator, INumberFileWriter
from ..domain.models import GenerationResult, GeneratorConfig

logger = logging.getLogger(__name__)


class RandomDataGenerator(IDataGenerator):
    """
    Populates a directory with random integer files.
    Any previous contents of the target directory are deleted first.
    """

    def __init__(self, config: GeneratorConfig,
                 rng: Optional[random.Random] = None,
                 writer: Optional[INumberFileWriter] = None):
        self.config = config
        self.writer = writer or RandomFileWriter(
            config,
            rng=rng,
            extension=settings.DATA_FILE_EXTENSION,
            encoding=settings.FILE_ENCODING,
        )

    def generate_data(self, root: Union[str, Path], files_count: int) -> GenerationResult:
        if isinstance(files_count, bool) or not isinstance(files_count, int) or files_count < 0:
            raise ConfigurationError(f"Files count must be a non-negative integer: {files_count!r}")

        root = Path(root)
        self._create_empty_directory(root)
        result = GenerationResult(root_path=root)

        logger.info(f"Generating {files_count} files in: {root}")
        for _ in range(files_count):
            try:
                file_path, written = self.writer.write_file(root)
            except OSError as e:
                raise DataIOError(f"Cannot create data file: {e.strerror or e}", e.filename or root) from e

            result.files.append(file_path)
            result.numbers_written += written
            logger.info(f"Generated file '{file_path.name}' ({written} numbers)")

        return result

    def _create_empty_directory(self, root: Path) -> None:
        """
        Creates `root` if missing; wipes its contents if present.
        """
        try:
            if root.is_dir():
                shutil.rmtree(root)
            elif root.exists():
                raise DataIOError("Target path exists and is not a directory", root)
            root.mkdir(parents=True)
        except OSError as e:
            raise DataIOError(f"Cannot prepare directory: {e.strerror or e}", root) from e
