"""
JSON file persistence adapter.

Each storage instance owns one file holding a JSON array of records of a
single entity type. The whole collection is read and rewritten every time;
there is no locking and no atomic rename.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """Base class for persistence failures."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.message = message
        self.path = path


class StorageReadError(StorageError):
    """Raised (or logged) when a file cannot be read or decoded."""


class StorageWriteError(StorageError):
    """Raised when the collection cannot be written back to disk."""


class JsonFileStorage(Generic[T]):
    """Maps an ordered collection of entities to a single JSON file."""

    def __init__(
        self,
        path: Path | str,
        decode: Callable[[Mapping[str, Any]], T],
        encode: Callable[[T], dict],
        *,
        strict: bool = False,
    ) -> None:
        self.path = Path(path)
        self._decode = decode
        self._encode = encode
        self.strict = strict

    def load(self) -> list[T]:
        if not self.path.exists():
            logger.debug("No data file at %s; starting empty", self.path)
            return []
        try:
            items = self._read()
        except StorageReadError as exc:
            if self.strict:
                raise
            logger.warning("Ignoring unreadable data file %s: %s", self.path, exc.message)
            return []
        logger.debug("Loaded %d records from %s", len(items), self.path)
        return items

    def _read(self) -> list[T]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(f"cannot read file ({exc})", self.path) from exc
        try:
            data = json.loads(raw, parse_float=Decimal)
        except ValueError as exc:
            raise StorageReadError(f"invalid JSON ({exc})", self.path) from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageReadError(f"expected a JSON array, got {type(data).__name__}", self.path)
        try:
            return [self._decode(record) for record in data]
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise StorageReadError(f"malformed record ({exc!r})", self.path) from exc

    def save(self, items: Iterable[T]) -> None:
        records = [self._encode(item) for item in items]
        payload = json.dumps(records, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise StorageWriteError(f"cannot write file ({exc})", self.path) from exc
        logger.debug("Saved %d records to %s", len(records), self.path)
