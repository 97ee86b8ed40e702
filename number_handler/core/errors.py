from pathlib import Path
from typing import Optional, Union


class NumberHandlerError(Exception):
    """
    Base class for every failure surfaced to the top-level caller.
    Carries a human readable message and, where one exists, the offending path.
    """
    kind: str = "error"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} (path: {self.path})"
        return self.message


class ConfigurationError(NumberHandlerError):
    """Invalid or missing range / count, detected before any I/O."""
    kind = "configuration"


class DirectoryNotFound(NumberHandlerError):
    """Handling root does not exist or is not a directory."""
    kind = "directory_not_found"


class FormatError(NumberHandlerError):
    """A data line could not be parsed as a base-10 integer."""
    kind = "format"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None,
                 line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        super().__init__(message, path)


class DataIOError(NumberHandlerError):
    """Underlying read / write / create / delete operation failed."""
    kind = "io"
