"""
Flat-file repository adapter - Implements RecordStore protocol.

Records live in a plain text file, one per line, fields joined by ","
in RECORD_FIELDS order. Values are not escaped: a value containing ","
or a line break makes its line unreadable on the next load.

Persistence model:
------------------
The whole file is hydrated into memory at load time. Every insert
mutates the in-memory list and then rewrites the entire file: the
serialized records go to a temporary file in the same directory, which
is then renamed over the original with os.replace(). Readers never see
a half-written file.

If the rewrite fails the new record is dropped from memory again, so
the in-memory list never claims a record the disk does not hold.
"""

import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from src.domain.exceptions import StorageReadFailure, StorageWriteFailure
from src.domain.ports import RECORD_FIELDS, Record

logger = logging.getLogger(__name__)

DELIMITER = ","


class FlatFileRecordStore:
    """
    Implements RecordStore protocol over a delimited text file.

    Uses structural subtyping - no explicit inheritance from Protocol.
    One instance owns one backing file; a re-entrant lock serializes
    load, insert and caller-held read-check-write sequences.
    """

    def __init__(self, path: str | Path) -> None:
        """
        Initialize the store. Call load() to hydrate from disk.

        Args:
            path: Backing file location; need not exist yet
        """
        self._path = Path(path)
        self._records: list[Record] = []
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of the stored records in insertion order."""
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the writer lock, e.g. around find_by_field() + insert()."""
        with self._lock:
            yield

    def load(self) -> None:
        """
        Replace the in-memory records with the backing file's contents.

        A missing file gives an empty store. An unreadable file is logged
        and also gives an empty store. Lines that do not split into exactly
        five fields, or whose id is not a positive integer, are skipped.
        """
        with self._lock:
            try:
                lines = self._read_lines()
            except StorageReadFailure as exc:
                logger.warning("Starting with empty store: %s", exc)
                lines = []

            records = []
            for line_number, line in enumerate(lines, start=1):
                record = self._parse_line(line)
                if record is None:
                    logger.debug("Skipping malformed line %d in %s", line_number, self._path)
                    continue
                records.append(record)

            self._records = records
            logger.info("Loaded %d records from %s", len(records), self._path)

    def find_by_field(self, field_name: str, value: str) -> Record | None:
        """
        Linear scan in insertion order for the first exact string match.

        Unknown field names never match.
        """
        if field_name not in RECORD_FIELDS:
            return None
        with self._lock:
            for record in self._records:
                if str(getattr(record, field_name)) == value:
                    return record
        return None

    def insert(self, name: str, company_name: str, email: str, password: str) -> Record:
        """
        Append a record with id = last id + 1 (or 1) and rewrite the file.

        Raises:
            StorageWriteFailure: If the file could not be rewritten. The
                record is removed from memory before raising.
        """
        with self._lock:
            next_id = self._records[-1].id + 1 if self._records else 1
            record = Record(
                id=next_id,
                name=name,
                company_name=company_name,
                email=email,
                password=password,
            )
            self._records.append(record)
            try:
                self._save()
            except StorageWriteFailure:
                self._records.pop()
                raise
            return record

    def _read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadFailure(str(self._path), "Can't read data file") from exc
        # Only line breaks written by _save() separate records
        return [line.rstrip("\r") for line in content.split("\n")] if content else []

    def _parse_line(self, line: str) -> Record | None:
        fields = line.split(DELIMITER)
        if len(fields) != len(RECORD_FIELDS):
            return None
        try:
            record_id = int(fields[0])
        except ValueError:
            return None
        if record_id < 1:
            return None
        return Record(record_id, *fields[1:])

    def _save(self) -> None:
        """Serialize every record to a temp file and rename it over the original."""
        content = "\n".join(DELIMITER.join(record.as_row()) for record in self._records)
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            logger.exception("Failed to write %s", self._path)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteFailure(str(self._path), "Can't save data into file") from exc
