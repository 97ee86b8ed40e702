import os
import stat
import logging
import tempfile
from pathlib import Path
from typing import Iterable

from number_handler.core.errors import DataIOError
from ..domain.interfaces import IResultWriter

logger = logging.getLogger(__name__)


def _target_mode(destination: Path) -> int:
    """
    Keeps the permissions of an existing result; a new one gets 0666 minus the umask.
    """
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        # os.umask can only be read by setting it
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class AtomicResultWriter(IResultWriter):
    """
    Writes the result next to its destination and swaps it in with os.replace.
    A failed write leaves any previous result file untouched.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, directory: Path, file_name: str, numbers: Iterable[int]) -> Path:
        destination = directory / file_name
        tmp_path = None

        try:
            # Text mode translates "\n" to the platform line terminator
            with tempfile.NamedTemporaryFile(
                "w",
                dir=directory,
                prefix=f".{file_name}.",
                suffix=".part",
                encoding=self.encoding,
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                for number in numbers:
                    f.write(f"{number}\n")

            # mkstemp creates 0600; give the swapped-in file the mode a plain open() would
            os.chmod(tmp_path, _target_mode(destination))
            os.replace(tmp_path, destination)
        except OSError as e:
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise DataIOError(f"Cannot write result file: {e.strerror or e}", destination) from e

        logger.info(f"Result written to {destination}")
        return destination
