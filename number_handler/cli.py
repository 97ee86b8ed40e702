from __future__ import annotations

import argparse
import logging
from typing import Optional

from number_handler.core.config.settings import settings
from number_handler.core.errors import NumberHandlerError
from number_handler.features.data_generator.domain.models import GeneratorConfig
from number_handler.features.data_generator.service.generator import RandomDataGenerator
from number_handler.features.data_handler.service.handler import DataHandler

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="number-handler",
        description="Generates random integer files, then collects the values matching "
                    "'n mod 4 == 3' into a single descending, duplicate-free result file.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        help="Directory to generate and process (prompted for when omitted).",
    )
    parser.add_argument(
        "--files-count",
        type=int,
        default=settings.FILES_COUNT,
        help=f"Number of files to generate (default: {settings.FILES_COUNT})",
    )
    parser.add_argument(
        "--result-name",
        default=settings.RESULT_FILE_NAME,
        help=f"Result file name, written inside the directory (default: {settings.RESULT_FILE_NAME})",
    )
    parser.add_argument(
        "--no-generate",
        action="store_true",
        help="Process the directory as it is, without clearing it and generating new data.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging verbosity (default: {settings.LOG_LEVEL})",
    )
    return parser


def _read_directory() -> Optional[str]:
    print("Enter the path to the directory for generating and processing data:")
    try:
        return input()
    except EOFError:
        return None


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    dir_name = args.directory if args.directory is not None else _read_directory()
    if dir_name is None or not dir_name.strip():
        print("The directory path is not correct.")
        return 2
    dir_name = dir_name.strip()

    try:
        if not args.no_generate:
            generator = RandomDataGenerator(GeneratorConfig.from_settings())
            generator.generate_data(dir_name, args.files_count)

        DataHandler().handle_data_of_directory(dir_name, args.result_name)
    except NumberHandlerError as e:
        print(f"The process failed: {e}")
        return 1

    print(
        f"Directory {dir_name} was successfully processed!\n"
        f"The result was written to a file {args.result_name} in the same directory."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
