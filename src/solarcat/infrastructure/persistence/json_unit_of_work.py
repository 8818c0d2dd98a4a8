"""JSON-file-backed implementation of CatalogUnitOfWork.

The whole catalog (products, packages, line items) lives in one JSON
document so that a package header and its line items can be committed
by a single file replacement.

A unit of work holds the document's lock from ``__enter__`` to
``__exit__``.  Commits write a temporary file next to the document and
``os.replace`` it into place, so no reader ever sees a half-written
document or a package whose line items are mid-replacement.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from solarcat.domain.exceptions import StorageError
from solarcat.domain.repository.unit_of_work import CatalogUnitOfWork
from solarcat.infrastructure.persistence.json_line_item_repository import (
    JsonLineItemRepository,
)
from solarcat.infrastructure.persistence.json_package_repository import (
    JsonPackageRepository,
)
from solarcat.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)

_TABLES = ("products", "solar_packages", "package_products")

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonCatalogUnitOfWork(CatalogUnitOfWork):

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path).resolve()
        self._lock = _lock_for(self._file_path)
        self._document: dict[str, list[dict]] = {}
        self._snapshot: dict[str, list[dict]] = {}
        self._ensure_file()

    # --- CatalogUnitOfWork interface -------------------------------------------

    def commit(self) -> None:
        self._persist(self._document)
        self._snapshot = copy.deepcopy(self._document)

    def rollback(self) -> None:
        self._document.clear()
        self._document.update(copy.deepcopy(self._snapshot))

    def _begin(self) -> None:
        self._lock.acquire()
        try:
            self._snapshot = self._load()
        except Exception:
            self._lock.release()
            raise
        self._document = copy.deepcopy(self._snapshot)
        self.products = JsonProductRepository(self._document)
        self.packages = JsonPackageRepository(self._document)
        self.line_items = JsonLineItemRepository(self._document)

    def _end(self) -> None:
        self._lock.release()

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, list[dict]]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.exception("Cannot read catalog document %s", self._file_path)
            raise StorageError(f"Catalog store unavailable: {exc}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"Catalog document {self._file_path} is not an object")
        for table in _TABLES:
            raw.setdefault(table, [])
        return raw

    def _persist(self, document: dict[str, list[dict]]) -> None:
        directory = self._file_path.parent
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._file_path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(document, indent=2, ensure_ascii=False) + "\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            logger.exception("Cannot write catalog document %s", self._file_path)
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Catalog write rejected: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        with self._lock:
            if self._file_path.exists():
                return
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageError(f"Cannot create catalog directory: {exc}") from exc
            self._persist({table: [] for table in _TABLES})
