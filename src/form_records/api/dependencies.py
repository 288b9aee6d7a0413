"""Request-scoped accessors for container-held dependencies."""

from fastapi import Request

from form_records.containers import AppContainer
from form_records.services.records import RecordService


def get_record_service(request: Request) -> RecordService:
    """Return the record service from the app's container."""
    container: AppContainer = request.app.state.container
    return container.record_service
