from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from number_handler.core.enums import HandlingState
from number_handler.core.errors import ConfigurationError

Predicate = Callable[[int], bool]


def is_three_mod_four(value: int) -> bool:
    """
    Default selection rule: keeps values whose remainder by 4 is 3.
    The remainder is taken toward zero, so negative values never qualify.
    """
    return value > 0 and value % 4 == 3


@dataclass(frozen=True)
class HandlingRequest:
    """
    User intent to aggregate the numbers found under a directory.
    Root existence is checked by the handler (VALIDATING state), not here.
    """
    root_path: Path
    result_file_name: str
    predicate: Predicate = is_three_mod_four
    extension: str = ".txt"

    def __post_init__(self):
        name = self.result_file_name.strip() if self.result_file_name else ""
        if not name:
            raise ConfigurationError("Result file name cannot be empty.")
        if Path(name).name != name:
            raise ConfigurationError(f"Result file name must not contain directories: {name}")
        if not self.extension.startswith("."):
            raise ConfigurationError(f"Extension must start with a dot: {self.extension}")

    @property
    def result_path(self) -> Path:
        return self.root_path / self.result_file_name


@dataclass
class HandlingSummary:
    """
    Report of a single handling run.
    """
    state: HandlingState = HandlingState.NOT_STARTED
    files_processed: int = 0
    lines_read: int = 0
    numbers_kept: int = 0
    result_path: Optional[Path] = None
    error: Optional[str] = None
    visited_files: List[Path] = field(default_factory=list)
