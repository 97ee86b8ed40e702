import logging
from pathlib import Path
from typing import Optional, Union

from number_handler.core.config.settings import settings
from number_handler.core.enums import HandlingState
from number_handler.core.errors import DirectoryNotFound, NumberHandlerError

from ..data.file_walker import LocalFileWalker
from ..data.number_reader import TextNumberReader
from ..data.number_set import DescendingNumberSet
from ..data.result_writer import AtomicResultWriter
from ..domain.interfaces import IDataHandler, IFileWalker, INumberReader, IResultWriter
from ..domain.models import HandlingRequest, HandlingSummary, Predicate, is_three_mod_four

logger = logging.getLogger(__name__)


class DataHandler(IDataHandler):
    """
    Orchestrates one handling run:
    NOT_STARTED -> VALIDATING -> TRAVERSING -> WRITING -> DONE, or FAILED.

    Any failure is terminal. The summary is marked FAILED and the error is re-raised
    to the caller unchanged; nothing is retried.
    """

    def __init__(self,
                 predicate: Predicate = is_three_mod_four,
                 extension: Optional[str] = None,
                 walker: Optional[IFileWalker] = None,
                 reader: Optional[INumberReader] = None,
                 writer: Optional[IResultWriter] = None):
        # In a full DI framework, these would be injected.
        self.predicate = predicate
        self.extension = extension or settings.DATA_FILE_EXTENSION
        self.walker = walker or LocalFileWalker()
        self.reader = reader or TextNumberReader(encoding=settings.FILE_ENCODING)
        self.writer = writer or AtomicResultWriter(encoding=settings.FILE_ENCODING)
        self.summary = HandlingSummary()

    @property
    def state(self) -> HandlingState:
        return self.summary.state

    def handle_data_of_directory(self, from_dir: Union[str, Path], to_file_name: str) -> HandlingSummary:
        self.summary = HandlingSummary()
        self._enter(HandlingState.VALIDATING)
        try:
            request = HandlingRequest(
                root_path=Path(from_dir),
                result_file_name=to_file_name,
                predicate=self.predicate,
                extension=self.extension,
            )
        except NumberHandlerError as e:
            self._fail(e)
            raise
        return self.run(request)

    def run(self, request: HandlingRequest) -> HandlingSummary:
        """
        Executes a validated request against the filesystem.
        """
        if self.summary.state != HandlingState.VALIDATING:
            # Called directly rather than through handle_data_of_directory()
            self.summary = HandlingSummary()
            self._enter(HandlingState.VALIDATING)
        summary = self.summary

        try:
            # 1. Validate
            if not request.root_path.is_dir():
                raise DirectoryNotFound("Directory not found", request.root_path)

            # 2. Traverse, parse and aggregate
            self._enter(HandlingState.TRAVERSING)
            numbers = DescendingNumberSet()
            for file_path in self.walker.walk(request.root_path, request.extension,
                                              exclude=request.result_path):
                summary.lines_read += self.reader.read_into(file_path, request.predicate, numbers.add)
                summary.files_processed += 1
                summary.visited_files.append(file_path)
            summary.numbers_kept = len(numbers)

            # 3. Write
            self._enter(HandlingState.WRITING)
            summary.result_path = self.writer.write(request.root_path, request.result_file_name, numbers)

            self._enter(HandlingState.DONE)
            logger.info(
                f"Handling complete. Files: {summary.files_processed}, "
                f"lines: {summary.lines_read}, kept: {summary.numbers_kept}"
            )
            return summary

        except NumberHandlerError as e:
            self._fail(e)
            raise
        except Exception as e:
            logger.exception(f"Unexpected failure while {summary.state.value}: {e}")
            summary.error = str(e)
            summary.state = HandlingState.FAILED
            raise

    def _enter(self, state: HandlingState) -> None:
        logger.debug(f"Handling state: {self.summary.state.value} -> {state.value}")
        self.summary.state = state

    def _fail(self, error: NumberHandlerError) -> None:
        logger.error(f"Handling failed while {self.summary.state.value}: {error}")
        self.summary.error = str(error)
        self.summary.state = HandlingState.FAILED
