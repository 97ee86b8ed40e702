from pathlib import Path

import pytest

from number_handler.core.errors import (
    ConfigurationError,
    DataIOError,
    DirectoryNotFound,
    FormatError,
    NumberHandlerError,
)


@pytest.mark.parametrize("error_type, kind", [
    (ConfigurationError, "configuration"),
    (DirectoryNotFound, "directory_not_found"),
    (FormatError, "format"),
    (DataIOError, "io"),
])
def test_every_error_shares_the_base(error_type, kind):
    error = error_type("boom")

    assert isinstance(error, NumberHandlerError)
    assert error.kind == kind
    assert str(error) == "boom"


def test_message_includes_path():
    error = DirectoryNotFound("Directory not found", "/tmp/somewhere")

    assert error.path == Path("/tmp/somewhere")
    assert str(error) == f"Directory not found (path: {Path('/tmp/somewhere')})"


def test_format_error_keeps_line_details():
    error = FormatError("bad", Path("x.txt"), line_number=4, line="abc")

    assert error.line_number == 4
    assert error.line == "abc"
