# File: tests/conftest.py

import logging
from pathlib import Path
from typing import Dict, Iterable, List

import pytest


def write_numbers(path: Path, values: Iterable) -> Path:
    """Writes one value per line, creating parent folders as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{v}\n" for v in values))
    return path


def read_result(path: Path) -> List[int]:
    return [int(line) for line in path.read_text().splitlines()]


@pytest.fixture(scope="session", autouse=True)
def quiet_logs():
    """Keeps per-file progress logs out of the test output."""
    logging.getLogger("number_handler").setLevel(logging.WARNING)
    yield


@pytest.fixture
def make_tree(tmp_path):
    """
    Factory building a data tree under tmp_path/"data".
    Accepts {relative_path: values}.
    """
    root = tmp_path / "data"
    root.mkdir()

    def _make(files: Dict[str, Iterable]) -> Path:
        for relative, values in files.items():
            write_numbers(root / relative, values)
        return root

    return _make


@pytest.fixture
def numbers_file():
    return write_numbers


@pytest.fixture
def result_values():
    return read_result
