"""Process-local record repository."""

from dataclasses import dataclass
from threading import Lock

from form_records.domain.records import Record
from form_records.services.records import RecordRepository


@dataclass
class InMemoryRecordRepository(RecordRepository):
    """In-memory record store for local runs.

    Ids come from a counter that only moves forward, so ids of deleted
    records are never handed out again.
    """

    _rows: dict[int, Record]
    _last_id: int
    _lock: Lock

    def __init__(self) -> None:
        self._rows = {}
        self._last_id = 0
        self._lock = Lock()

    def save(self, record: Record) -> Record:
        """Insert or replace a record and return the stored copy."""
        with self._lock:
            if record.id is None:
                self._last_id += 1
                stored = Record(id=self._last_id, name=record.name)
            else:
                stored = record
                self._last_id = max(self._last_id, record.id)
            self._rows[stored.id] = stored
            return stored

    def find_all(self) -> list[Record]:
        """Return every record ordered by id."""
        with self._lock:
            return [self._rows[key] for key in sorted(self._rows)]

    def find_by_id(self, record_id: int) -> Record | None:
        with self._lock:
            return self._rows.get(record_id)

    def delete_by_id(self, record_id: int) -> None:
        with self._lock:
            self._rows.pop(record_id, None)
