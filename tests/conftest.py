"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from form_records.adapters.memory_record_repository import InMemoryRecordRepository
from form_records.config import Settings
from form_records.containers import AppContainer
from form_records.domain.records import Record
from form_records.services.records import (
    RecordRepository,
    RecordService,
    RepositoryRecordService,
)


@dataclass
class RecordingRecordRepository(RecordRepository):
    """Repository fake returning canned values and recording every call."""

    records: list[Record] = field(default_factory=list)
    calls: list[tuple[str, object]] = field(default_factory=list)

    def save(self, record: Record) -> Record:
        self.calls.append(("save", record))
        return record

    def find_all(self) -> list[Record]:
        self.calls.append(("find_all", None))
        return list(self.records)

    def find_by_id(self, record_id: int) -> Record | None:
        self.calls.append(("find_by_id", record_id))
        return next((r for r in self.records if r.id == record_id), None)

    def delete_by_id(self, record_id: int) -> None:
        self.calls.append(("delete_by_id", record_id))


@dataclass
class FailingRecordService(RecordService):
    """Record service whose every call fails like a broken storage engine."""

    message: str = "storage unavailable"

    def save(self, record: Record) -> Record:
        raise RuntimeError(self.message)

    def find_all(self) -> list[Record]:
        raise RuntimeError(self.message)

    def find_by_id(self, record_id: int) -> Record | None:
        raise RuntimeError(self.message)

    def delete_by_id(self, record_id: int) -> None:
        raise RuntimeError(self.message)


@dataclass
class ClosableResources:
    closed: bool = False

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(record_store="memory")


@pytest.fixture
def record_repository() -> InMemoryRecordRepository:
    return InMemoryRecordRepository()


@pytest.fixture
def resources() -> ClosableResources:
    return ClosableResources()


@pytest.fixture
def container(
    settings: Settings,
    record_repository: InMemoryRecordRepository,
    resources: ClosableResources,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        record_service=RepositoryRecordService(record_repository),
        close_resources=resources.close,
    )


@pytest.fixture
def seeded_repository(
    record_repository: InMemoryRecordRepository,
) -> InMemoryRecordRepository:
    record_repository.save(Record(id=None, name="John Doe"))
    record_repository.save(Record(id=None, name="Jane Smith"))
    return record_repository
