"""A list of JSON records kept in one file, replaced atomically on write.

Writes go to a temporary file in the same directory, which is then moved
over the original with ``os.replace``. Readers see either the old file or
the new one, never a half-written one.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from backoffice.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonRecordFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"{self._file_path} does not hold a list of records")
        return records

    def replace(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=f".{self._file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc
        logger.debug("Wrote %d records to %s", len(records), self._file_path)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self._file_path.parent}: {exc}") from exc
        self.replace([])
