"""Record storage interfaces and the application service over them."""

import logging
from dataclasses import dataclass
from typing import Protocol

from form_records.domain.records import Record

logger = logging.getLogger(__name__)


class RecordRepository(Protocol):
    """Persistence interface for records."""

    def save(self, record: Record) -> Record:
        """Insert a record without an id, or upsert the row matching its id."""

    def find_all(self) -> list[Record]:
        """Return every stored record in ascending id order."""

    def find_by_id(self, record_id: int) -> Record | None:
        """Return the record with the given id, if present."""

    def delete_by_id(self, record_id: int) -> None:
        """Remove the record with the given id; absent ids are ignored."""


class RecordService(Protocol):
    """Record operations the HTTP layer depends on."""

    def save(self, record: Record) -> Record:
        """Persist a record and return it with its id populated."""

    def find_all(self) -> list[Record]:
        """Return every stored record."""

    def find_by_id(self, record_id: int) -> Record | None:
        """Return a record by id, if present."""

    def delete_by_id(self, record_id: int) -> None:
        """Delete a record by id."""


@dataclass
class RepositoryRecordService(RecordService):
    """Record service delegating directly to a repository."""

    repository: RecordRepository

    def save(self, record: Record) -> Record:
        logger.info("Saving record name=%r", record.name)
        return self.repository.save(record)

    def find_all(self) -> list[Record]:
        return self.repository.find_all()

    def find_by_id(self, record_id: int) -> Record | None:
        return self.repository.find_by_id(record_id)

    def delete_by_id(self, record_id: int) -> None:
        self.repository.delete_by_id(record_id)
