import re
from pathlib import Path
from typing import Callable

from number_handler.core.errors import DataIOError, FormatError
from ..domain.interfaces import INumberReader
from ..domain.models import Predicate

# int() alone would also accept "1_000" and non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_number(text: str) -> int:
    """Parses a base-10 signed integer, raising ValueError on anything else."""
    candidate = text.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(candidate)


class TextNumberReader(INumberReader):
    """
    Streams a newline-delimited integer file.
    Empty lines are skipped; any other unparsable line, whitespace-only included,
    aborts with FormatError.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read_into(self, path: Path, predicate: Predicate, sink: Callable[[int], None]) -> int:
        parsed = 0
        try:
            # newline=None accepts both \n and \r\n terminators
            with open(path, "r", encoding=self.encoding, newline=None) as f:
                for line_number, line in enumerate(f, start=1):
                    text = line.rstrip("\n")
                    if text == "":
                        continue

                    try:
                        number = parse_number(text)
                    except ValueError as e:
                        raise FormatError(
                            f"Line {line_number} is not an integer: {text!r}",
                            path,
                            line_number=line_number,
                            line=text,
                        ) from e

                    parsed += 1
                    if predicate(number):
                        sink(number)
        except UnicodeDecodeError as e:
            raise FormatError(f"File is not valid {self.encoding} text", path) from e
        except OSError as e:
            raise DataIOError(f"Cannot read file: {e.strerror or e}", path) from e

        return parsed
