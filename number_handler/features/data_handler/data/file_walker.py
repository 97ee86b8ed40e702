import os
import logging
from pathlib import Path
from typing import Iterator, Optional

from number_handler.core.errors import DataIOError, DirectoryNotFound
from ..domain.interfaces import IFileWalker

logger = logging.getLogger(__name__)


def _raise_walk_error(error: OSError) -> None:
    # os.walk swallows listing errors unless onerror re-raises them
    raise DataIOError(f"Cannot list directory: {error.strerror or error}", error.filename) from error


class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using os.walk (top-down, depth-first).
    Directory symlinks are not followed, so the walk cannot loop.
    """

    def walk(self, root: Path, extension: str, exclude: Optional[Path] = None) -> Iterator[Path]:
        if not root.is_dir():
            raise DirectoryNotFound("Directory not found", root)

        suffix = extension.lower()
        excluded = exclude.resolve() if exclude is not None else None

        for dirpath, _dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            # Files of the current directory come first:
            # os.walk only descends into its subdirectories after this loop is consumed.
            for filename in filenames:
                file_path = Path(dirpath) / filename

                if file_path.suffix.lower() != suffix:
                    continue
                if not file_path.is_file():
                    continue
                if excluded is not None and file_path.resolve() == excluded:
                    continue

                logger.info(f"Processing file '{file_path}'.")
                yield file_path
