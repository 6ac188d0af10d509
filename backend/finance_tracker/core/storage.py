"""JSON document store keyed by fixed storage keys.

The whole state (transactions, category catalog, budget) lives in one
JSON object on disk. Readers never fail: a missing or corrupt document
yields the caller's default, the same way the browser client treated
its local storage. Writers never build on a corrupt document: it is
moved aside to ``<name>.corrupt-<timestamp>`` before the new one lands.
"""

import json
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

import structlog

from finance_tracker.config import settings

logger = structlog.get_logger()

STORAGE_KEYS = {
    "transactions": "finance_tracker_transactions",
    "categories": "finance_tracker_categories",
    "budget": "finance_tracker_budget",
}


class JsonStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _parse_document(self) -> dict:
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return data

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            return self._parse_document()
        except (OSError, ValueError) as e:
            logger.warning("store_read_failed", path=str(self.path), error=str(e))
            return {}

    def _read_document_for_write(self) -> dict:
        """Current document, or ``{}`` after moving an unparseable one aside.

        I/O errors propagate so a file that merely can't be read right now is
        never replaced.
        """
        if not self.path.exists():
            return {}
        try:
            return self._parse_document()
        except ValueError as e:
            stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
            backup = self.path.with_name(f"{self.path.name}.corrupt-{stamp}")
            os.replace(self.path, backup)
            logger.error(
                "store_document_quarantined",
                path=str(self.path),
                backup=str(backup),
                error=str(e),
            )
            return {}

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``.

        Lock-free: writes replace the file atomically, so a reader sees
        either the previous document or the new one.
        """
        return self._read_document().get(key, default)

    def _write_document(self, document: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError:
            logger.error("store_write_failed", path=str(self.path))
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing the document atomically."""
        with self._lock:
            document = self._read_document_for_write()
            document[key] = value
            self._write_document(document)

    def update(self, key: str, fn: Callable[[Any], Any], default: Any = None) -> Any:
        """Replace the value under ``key`` with ``fn(current)`` in one locked step."""
        with self._lock:
            document = self._read_document_for_write()
            value = fn(document.get(key, default))
            document[key] = value
            self._write_document(document)
        return value

    def is_readable(self) -> bool:
        """True when the document is absent (fresh store) or parses."""
        if not self.path.exists():
            return True
        try:
            self._parse_document()
        except (OSError, ValueError):
            return False
        return True


_store: JsonStore | None = None


def get_store() -> JsonStore:
    """FastAPI dependency returning the process-wide store."""
    global _store
    if _store is None:
        _store = JsonStore(settings.data_file)
    return _store
