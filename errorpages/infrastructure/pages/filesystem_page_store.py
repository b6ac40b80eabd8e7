"""
Filesystem adapter for the ErrorPageStore port.

Serves error page files from a single read-only root directory
(``ERROR_FILES_PATH``, ``/www`` by default).
"""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from errorpages.domain.pages.errors import ErrorPageUnavailableError
from errorpages.domain.pages.ports import ErrorPage, ErrorPageStore

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class FileErrorPage(ErrorPage):
    """An open error page file. The handle is closed once streamed."""

    def __init__(self, path: Path, handle: BinaryIO) -> None:
        self.path = path
        self._handle = handle

    def chunks(self) -> Iterator[bytes]:
        try:
            while True:
                chunk = self._handle.read(CHUNK_SIZE)
                if not chunk:
                    break
                yield chunk
        finally:
            self.close()

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    @property
    def closed(self) -> bool:
        return self._handle.closed


class FileSystemErrorPageStore(ErrorPageStore):
    """Opens error pages relative to ``root``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    def describe(self, filename: str) -> str:
        return str(self._root / filename)

    def open(self, filename: str) -> FileErrorPage:
        path = self._root / filename
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise ErrorPageUnavailableError(filename, str(exc)) from exc
        return FileErrorPage(path, handle)
