"""Supabase-backed record repository."""

from dataclasses import dataclass

from supabase import Client

from form_records.domain.records import Record
from form_records.services.records import RecordRepository


@dataclass
class SupabaseRecordRepository(RecordRepository):
    """Supabase implementation for record persistence."""

    client: Client
    table: str = "test_form_data"

    def save(self, record: Record) -> Record:
        """Insert a new row, or upsert on id when the record already has one."""
        query = self.client.table(self.table)
        if record.id is None:
            response = query.insert({"name": record.name}).execute()
        else:
            response = query.upsert(
                {"id": record.id, "name": record.name}, on_conflict="id"
            ).execute()
        if not response.data:
            raise RuntimeError("Failed to save record in Supabase")
        return _parse_record(response.data[0])

    def find_all(self) -> list[Record]:
        """Return every record ordered by id."""
        response = (
            self.client.table(self.table).select("id, name").order("id").execute()
        )
        return [_parse_record(row) for row in response.data or []]

    def find_by_id(self, record_id: int) -> Record | None:
        """Return the record with the given id, if present."""
        response = (
            self.client.table(self.table)
            .select("id, name")
            .eq("id", record_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_record(response.data[0])

    def delete_by_id(self, record_id: int) -> None:
        """Delete the row with the given id."""
        self.client.table(self.table).delete().eq("id", record_id).execute()


def _parse_record(row: dict[str, object]) -> Record:
    return Record(id=int(row["id"]), name=str(row.get("name") or ""))
