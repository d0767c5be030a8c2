from __future__ import annotations

from vehicle_catalog.domain.named_record import (
    NamedRecord,
    NamedRecordChanges,
    NameFilters,
    NewNamedRecord,
)
from vehicle_catalog.domain.store import parse_active_flag, to_iso
from vehicle_catalog.entrypoints.http.dtos.named_records import (
    NamedRecordCreateDTO,
    NamedRecordResponseDTO,
    NamedRecordsQueryDTO,
    NamedRecordUpdateDTO,
)
from vehicle_catalog.entrypoints.http.mappers.common import parse_query_id


class NamedRecordMapper:
    """Maps between REST DTOs and domain models for brands and vehicle types."""

    @staticmethod
    def to_domain_filters(dto: NamedRecordsQueryDTO) -> NameFilters:
        return NameFilters(
            id=parse_query_id(dto.id, "id"),
            q=dto.q or None,
            active=parse_active_flag(dto.active),
        )

    @staticmethod
    def to_domain_draft(dto: NamedRecordCreateDTO) -> NewNamedRecord:
        return NewNamedRecord(name=dto.name)

    @staticmethod
    def to_domain_changes(dto: NamedRecordUpdateDTO) -> NamedRecordChanges:
        return NamedRecordChanges(id=dto.id, name=dto.name, is_active=dto.is_active)

    @staticmethod
    def to_response(record: NamedRecord) -> NamedRecordResponseDTO:
        """
        Converts a brand or vehicle type to its response DTO.

        Handles datetime -> ISO-8601 string conversion at the boundary.
        """
        return NamedRecordResponseDTO(
            id=record.id,
            name=record.name,
            is_active=record.is_active,
            created_at=to_iso(record.created_at),
            updated_at=to_iso(record.updated_at),
        )
