"""JSON CRUD endpoints for records."""

import logging

from fastapi import APIRouter, Depends, Response, status

from form_records.api.dependencies import get_record_service
from form_records.api.errors import RecordIdMismatchError, RecordNotFoundError
from form_records.api.records_models import RecordPayload, RecordRead
from form_records.domain.records import Record
from form_records.services.records import RecordService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/test-data", tags=["records"])


@router.get("", response_model=list[RecordRead])
async def list_records(
    service: RecordService = Depends(get_record_service),
) -> list[RecordRead]:
    """Return every stored record."""
    return [RecordRead.from_domain(record) for record in service.find_all()]


@router.get("/{record_id}", response_model=RecordRead)
async def get_record(
    record_id: int, service: RecordService = Depends(get_record_service)
) -> RecordRead:
    """Return a single record, or 404 when it does not exist."""
    return RecordRead.from_domain(_require_record(service, record_id))


@router.post("", response_model=RecordRead, status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: RecordPayload, service: RecordService = Depends(get_record_service)
) -> RecordRead:
    """Create a record; any id in the body is ignored."""
    created = service.save(Record(id=None, name=payload.name))
    logger.info("Created record", extra={"record_id": created.id})
    return RecordRead.from_domain(created)


@router.put("/{record_id}", response_model=RecordRead)
async def update_record(
    record_id: int,
    payload: RecordPayload,
    service: RecordService = Depends(get_record_service),
) -> RecordRead:
    """Replace the name of an existing record."""
    if payload.id != record_id:
        raise RecordIdMismatchError(record_id, payload.id)
    _require_record(service, record_id)
    updated = service.save(Record(id=record_id, name=payload.name))
    logger.info("Updated record", extra={"record_id": record_id})
    return RecordRead.from_domain(updated)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: int, service: RecordService = Depends(get_record_service)
) -> Response:
    """Delete an existing record."""
    _require_record(service, record_id)
    service.delete_by_id(record_id)
    logger.info("Deleted record", extra={"record_id": record_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _require_record(service: RecordService, record_id: int) -> Record:
    record = service.find_by_id(record_id)
    if record is None:
        raise RecordNotFoundError(record_id)
    return record
