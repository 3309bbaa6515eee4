"""
Single-file JSON document store.

Owns the on-disk representation of the Document (orders, pricing config,
settings). Every mutation is a full load, an in-memory change and a full
rewrite of the file; there is no in-memory cache between operations.
"""

import json
import os
import stat
import tempfile
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

import structlog

from ..domain.entities import Document
from ..domain.exceptions import StorageException
from ..metrics import track_store_operation, track_store_reset

logger = structlog.get_logger(__name__)

DEFAULT_FILE_MODE = 0o644


class DocumentStore:
    """
    Durable store for the service's single JSON document.

    ``load`` self-heals: a missing, empty, unreadable or non-object file is
    replaced with the default document. ``transaction`` serialises
    load-mutate-save cycles behind a re-entrant lock so concurrent requests
    in this process cannot lose each other's updates.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the JSON document
        """
        self.path = Path(path)
        self._lock = threading.RLock()

    def initialize(self) -> Document:
        """
        Prepare the document file at startup.

        Creates the parent directory, heals the file if needed and writes
        back the normalised document.

        Returns:
            The normalised document

        Raises:
            StorageException: If the file cannot be prepared
        """
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageException("initialize", str(e)) from e

            document = self.load()
            self.save(document)

        logger.info(
            "Document store initialized",
            path=str(self.path),
            orders=len(document.orders),
        )
        return document

    def load(self) -> Document:
        """
        Read the document from disk.

        Returns:
            The stored document, or the default document if the file had
            to be reset

        Raises:
            StorageException: If resetting the file fails
        """
        start_time = time.perf_counter()
        with self._lock:
            data, reason = self._read_object()
            if data is None:
                logger.warning(
                    "Document file unusable, reinitializing",
                    path=str(self.path),
                    reason=reason,
                )
                track_store_reset(reason)
                document = Document.default()
                self.save(document)
            else:
                document = Document.from_dict(data)

        track_store_operation("load", True, time.perf_counter() - start_time)
        return document

    def save(self, document: Document) -> None:
        """
        Replace the file with the full serialised document.

        Writes to a temporary file in the same directory and renames it
        over the target, so readers never observe a partial write.

        Raises:
            StorageException: If the document cannot be written
        """
        start_time = time.perf_counter()
        payload = json.dumps(document.to_dict(), indent=2)

        with self._lock:
            tmp_path: Optional[str] = None
            try:
                fd, tmp_path = tempfile.mkstemp(
                    dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    os.fchmod(handle.fileno(), self._file_mode())
                    handle.write(payload)
                    handle.write("\n")
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(tmp_path, self.path)
                tmp_path = None
            except OSError as e:
                track_store_operation("save", False, time.perf_counter() - start_time)
                logger.error("Failed to write document", path=str(self.path), error=str(e))
                raise StorageException("save", str(e)) from e
            finally:
                if tmp_path is not None and os.path.exists(tmp_path):
                    os.remove(tmp_path)

        track_store_operation("save", True, time.perf_counter() - start_time)

    def _file_mode(self) -> int:
        """Mode for the rewritten file: the current one, else 0644."""
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE

    @contextmanager
    def read(self) -> Iterator[Document]:
        """Load the document under the lock without saving it afterwards."""
        with self._lock:
            yield self.load()

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """
        Load, hand out the document for mutation, then save it.

        Nothing is written if the body raises.

        Example:
            with store.transaction() as document:
                document.orders.append(order.to_dict())
        """
        with self._lock:
            document = self.load()
            yield document
            self.save(document)

    def _read_object(self) -> tuple[Optional[dict[str, Any]], str]:
        """Return the parsed JSON object, or None and the reason it is unusable."""
        try:
            content = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None, "missing"
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Document file unreadable", path=str(self.path), error=str(e))
            return None, "unreadable"

        if not content:
            return None, "empty"

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Document file corrupted", path=str(self.path), error=str(e))
            return None, "corrupted"

        if not isinstance(data, dict):
            return None, "not_an_object"

        return data, "ok"
