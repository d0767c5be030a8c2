from __future__ import annotations

from vehicle_catalog.domain.client import Client, ClientChanges, ClientFilters, NewClient
from vehicle_catalog.domain.store import parse_active_flag, to_iso
from vehicle_catalog.entrypoints.http.dtos.clients import (
    ClientCreateDTO,
    ClientResponseDTO,
    ClientsQueryDTO,
    ClientUpdateDTO,
)
from vehicle_catalog.entrypoints.http.mappers.common import parse_query_id


class ClientMapper:
    """Maps between REST DTOs and domain models for clients."""

    @staticmethod
    def to_domain_filters(dto: ClientsQueryDTO) -> ClientFilters:
        return ClientFilters(
            id=parse_query_id(dto.id, "id"),
            brand_id=parse_query_id(dto.brand_id, "brand_id"),
            model_id=parse_query_id(dto.model_id, "model_id"),
            q=dto.q or None,
            active=parse_active_flag(dto.active),
        )

    @staticmethod
    def to_domain_draft(dto: ClientCreateDTO) -> NewClient:
        return NewClient(
            dni=dto.dni,
            placa=dto.placa,
            vin=dto.vin,
            kms=dto.kms,
            celular=dto.celular,
            email=dto.email,
            estado=bool(dto.estado),
            model_id=dto.model_id,
            brand_id=dto.brand_id,
        )

    @staticmethod
    def to_domain_changes(dto: ClientUpdateDTO) -> ClientChanges:
        return ClientChanges(**dto.model_dump())

    @staticmethod
    def to_response(client: Client) -> ClientResponseDTO:
        return ClientResponseDTO(
            id=client.id,
            dni=client.dni,
            placa=client.placa,
            vin=client.vin,
            kms=client.kms,
            celular=client.celular,
            email=client.email,
            estado=client.estado,
            model_id=client.model_id,
            brand_id=client.brand_id,
            created_at=to_iso(client.created_at),
            updated_at=to_iso(client.updated_at),
        )
