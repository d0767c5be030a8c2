from __future__ import annotations

from vehicle_catalog.domain.store import parse_active_flag, to_iso
from vehicle_catalog.domain.subtype import (
    NewSubtype,
    Subtype,
    SubtypeChanges,
    SubtypeFilters,
    SubtypeListing,
)
from vehicle_catalog.entrypoints.http.dtos.subtypes import (
    SubtypeCreateDTO,
    SubtypeListingResponseDTO,
    SubtypeResponseDTO,
    SubtypesQueryDTO,
    SubtypeUpdateDTO,
)
from vehicle_catalog.entrypoints.http.mappers.common import parse_query_id


class SubtypeMapper:
    """Maps between REST DTOs and domain models for subtypes."""

    @staticmethod
    def to_domain_filters(dto: SubtypesQueryDTO) -> SubtypeFilters:
        return SubtypeFilters(
            id=parse_query_id(dto.id, "id"),
            type_id=parse_query_id(dto.type_id, "type_id"),
            q=dto.q or None,
            active=parse_active_flag(dto.active),
        )

    @staticmethod
    def to_domain_draft(dto: SubtypeCreateDTO) -> NewSubtype:
        return NewSubtype(name=dto.name, type_id=dto.type_id, year=dto.year, version=dto.version)

    @staticmethod
    def to_domain_changes(dto: SubtypeUpdateDTO) -> SubtypeChanges:
        return SubtypeChanges(
            id=dto.id,
            name=dto.name,
            type_id=dto.type_id,
            year=dto.year,
            version=dto.version,
            is_active=dto.is_active,
        )

    @staticmethod
    def to_response(subtype: Subtype) -> SubtypeResponseDTO:
        return SubtypeResponseDTO(
            id=subtype.id,
            name=subtype.name,
            type_id=subtype.type_id,
            year=subtype.year,
            version=subtype.version,
            is_active=subtype.is_active,
            created_at=to_iso(subtype.created_at),
            updated_at=to_iso(subtype.updated_at),
        )

    @staticmethod
    def to_listing_response(listing: SubtypeListing) -> SubtypeListingResponseDTO:
        return SubtypeListingResponseDTO(
            **SubtypeMapper.to_response(listing.subtype).model_dump(),
            type_name=listing.type_name,
        )
