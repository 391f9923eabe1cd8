"""Single-writer JSON document store with atomic replacement."""

from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union
import asyncio
import json
import os
import tempfile

from infrastructure.logging import get_module_logger
from infrastructure.persistence.errors import StoreError
from infrastructure.persistence.write_queue import WriteQueue

logger = get_module_logger()

Document = Dict[str, Any]

# mkstemp creates 0600 files; the committed document is always 0644
DOCUMENT_MODE = 0o644


class JsonDocumentStore:
    """A JSON object persisted as one file, updated key by key.

    Readers load the whole document and are never blocked by writers.
    Writers go through the store's ``WriteQueue``: each update reads the
    current document, replaces a single key, writes the full document to a
    temp file in the same directory and renames it over the canonical file.
    Because the rename is atomic, a reader (or a restarted process) sees
    either the old or the new document, never a partial one.

    Disk I/O runs in worker threads via ``asyncio.to_thread``.

    Example:
        store = JsonDocumentStore(data_dir / "users.json")
        await store.update("U123", lambda current: {"doxyUrl": url})
        document = await store.read()
    """

    def __init__(self, path: Union[str, Path], queue: Optional[WriteQueue] = None):
        self._path = Path(path)
        self._queue = queue or WriteQueue()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def queue(self) -> WriteQueue:
        return self._queue

    async def read(self) -> Document:
        """Return the current document; a missing file reads as ``{}``.

        Raises:
            StoreError: If the file cannot be read or is not a JSON object.
        """
        return await asyncio.to_thread(self._read_document)

    async def get(self, key: str) -> Optional[Any]:
        document = await self.read()
        return document.get(key)

    async def update(self, key: str, build: Callable[[Optional[Any]], Any]) -> Any:
        """Replace the value under ``key`` with ``build(current_value)``.

        ``build`` runs inside the write slot, so it sees the value left by the
        previous writer. Other keys are carried over untouched.

        Returns:
            The value that was written.

        Raises:
            StoreError: If the document cannot be read or replaced. The
                previously committed document is left intact.
        """
        return await self._queue.run_exclusive(self._apply_update, key, build)

    async def _apply_update(
        self, key: str, build: Callable[[Optional[Any]], Any]
    ) -> Any:
        document = await asyncio.to_thread(self._read_document)
        value = build(document.get(key))
        document[key] = value
        await asyncio.to_thread(self._write_document, document)
        logger.debug("document_key_written", path=str(self._path), key=key)
        return value

    def _ensure_document(self) -> None:
        """Create an empty document if the file does not exist yet.

        ``{}`` is written to a temp file and hard-linked into place, so the
        canonical path never exists without a complete document. The link
        fails if another writer got there first; that document is kept.
        """
        if self._path.exists():
            return
        tmp_name = self._write_temp({})
        try:
            os.link(tmp_name, self._path)
        except FileExistsError:
            return
        except OSError as exc:
            raise StoreError(f"Cannot create {self._path}: {exc}") from exc
        finally:
            self._discard(tmp_name)

        self._sync_directory(self._path.parent)
        logger.info("document_created", path=str(self._path))

    def _read_document(self) -> Document:
        self._ensure_document()
        try:
            contents = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StoreError(f"Cannot read {self._path}: {exc}") from exc

        if not contents.strip():
            return {}
        try:
            document = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise StoreError(f"{self._path} is not valid JSON: {exc}") from exc

        if not isinstance(document, dict):
            raise StoreError(f"{self._path} does not contain a JSON object")
        return document

    def _write_temp(self, document: Document) -> str:
        """Write ``document`` to a synced temp file beside the canonical one.

        Returns:
            str: The temp file path. The caller moves it into place and
            discards it afterwards or on failure.
        """
        directory = self._path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f"{self._path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise StoreError(f"Cannot create temp file in {directory}: {exc}") from exc

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                os.fchmod(handle.fileno(), DOCUMENT_MODE)
                json.dump(document, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as exc:
            self._discard(tmp_name)
            raise StoreError(f"Cannot write {tmp_name}: {exc}") from exc
        except Exception:
            self._discard(tmp_name)
            raise
        return tmp_name

    def _write_document(self, document: Document) -> None:
        tmp_name = self._write_temp(document)
        try:
            os.replace(tmp_name, self._path)
        except OSError as exc:
            self._discard(tmp_name)
            raise StoreError(f"Cannot replace {self._path}: {exc}") from exc

        self._sync_directory(self._path.parent)

    @staticmethod
    def _discard(tmp_name: str) -> None:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("temp_file_cleanup_failed", path=tmp_name, error=str(exc))

    @staticmethod
    def _sync_directory(directory: Path) -> None:
        """Flush the rename to disk where the platform supports it."""
        if not hasattr(os, "O_DIRECTORY"):
            return
        try:
            dir_fd = os.open(directory, os.O_RDONLY | os.O_DIRECTORY)
        except OSError:
            return
        try:
            os.fsync(dir_fd)
        except OSError:
            pass  # not supported on every filesystem
        finally:
            os.close(dir_fd)
