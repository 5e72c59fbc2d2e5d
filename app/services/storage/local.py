"""Local filesystem document store"""

import logging
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from app.core.exceptions import DocumentStorageError

from .base import DocumentStore

logger = logging.getLogger(__name__)


class LocalDocumentStore(DocumentStore):
    """Writes documents into a directory served under ``<base_url>/files``.

    Writing a name that already exists replaces the file.
    """

    name = "local"

    def __init__(self, directory: Path, base_url: str):
        self.directory = Path(directory).resolve()
        self.base_url = base_url.rstrip("/")
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, filename: str) -> Path:
        path = (self.directory / filename).resolve()
        if path.parent != self.directory:
            raise DocumentStorageError(f"Invalid document name: {filename!r}")
        return path

    def url_for(self, filename: str) -> str:
        return f"{self.base_url}/files/{filename}"

    def _write(self, path: Path, data: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    async def save(self, filename: str, data: bytes) -> str:
        path = self.path_for(filename)
        try:
            await run_in_threadpool(self._write, path, data)
        except OSError as exc:
            raise DocumentStorageError(f"Could not write {path}") from exc

        logger.info("Saved %s (%d bytes) to %s", filename, len(data), self.directory)
        return self.url_for(filename)
