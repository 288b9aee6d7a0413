"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from form_records.adapters.memory_record_repository import InMemoryRecordRepository
from form_records.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from form_records.config import Settings, require_supabase_credentials
from form_records.services.records import (
    RecordRepository,
    RecordService,
    RepositoryRecordService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    record_service: RecordService
    close_resources: Callable[[], Awaitable[None]]


def build_repository(settings: Settings) -> RecordRepository:
    """Create the record repository selected by settings."""
    if settings.record_store == "memory":
        return InMemoryRecordRepository()
    url, key = require_supabase_credentials(settings)
    return SupabaseRecordRepository(
        client=create_client(url, key), table=settings.records_table
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    record_service = RepositoryRecordService(build_repository(resolved_settings))

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        record_service=record_service,
        close_resources=close_resources,
    )
