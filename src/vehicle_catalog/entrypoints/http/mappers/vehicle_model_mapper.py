from __future__ import annotations

from vehicle_catalog.domain.store import parse_active_flag, to_iso
from vehicle_catalog.domain.vehicle_model import (
    ModelFilters,
    NewVehicleModel,
    VehicleModel,
    VehicleModelChanges,
)
from vehicle_catalog.entrypoints.http.dtos.vehicle_models import (
    ModelCreateDTO,
    ModelResponseDTO,
    ModelsQueryDTO,
    ModelUpdateDTO,
)
from vehicle_catalog.entrypoints.http.mappers.common import parse_query_id


class VehicleModelMapper:
    """Maps between REST DTOs and domain models for vehicle models."""

    @staticmethod
    def to_domain_filters(dto: ModelsQueryDTO) -> ModelFilters:
        return ModelFilters(
            id=parse_query_id(dto.id, "id"),
            brand_id=parse_query_id(dto.brand_id, "brand_id"),
            q=dto.q or None,
            active=parse_active_flag(dto.active),
        )

    @staticmethod
    def to_domain_draft(dto: ModelCreateDTO) -> NewVehicleModel:
        return NewVehicleModel(
            name=dto.name,
            year=dto.year,
            version=dto.version,
            brand_id=dto.brand_id,
        )

    @staticmethod
    def to_domain_changes(dto: ModelUpdateDTO) -> VehicleModelChanges:
        return VehicleModelChanges(
            id=dto.id,
            name=dto.name,
            year=dto.year,
            version=dto.version,
            brand_id=dto.brand_id,
            is_active=dto.is_active,
        )

    @staticmethod
    def to_response(model: VehicleModel) -> ModelResponseDTO:
        return ModelResponseDTO(
            id=model.id,
            name=model.name,
            year=model.year,
            version=model.version,
            brand_id=model.brand_id,
            is_active=model.is_active,
            created_at=to_iso(model.created_at),
            updated_at=to_iso(model.updated_at),
        )
