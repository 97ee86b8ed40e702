from pathlib import Path
from typing import Union

from number_handler.core.config.settings import settings
from ..domain.models import HandlingSummary, Predicate, is_three_mod_four
from .handler import DataHandler


def handle_directory(from_dir: Union[str, Path],
                     to_file_name: str = settings.RESULT_FILE_NAME,
                     predicate: Predicate = is_three_mod_four) -> HandlingSummary:
    """
    Standalone API: aggregates every data file under `from_dir` into
    `from_dir / to_file_name`. Raises a NumberHandlerError subclass on failure.
    """
    return DataHandler(predicate=predicate).handle_data_of_directory(from_dir, to_file_name)
