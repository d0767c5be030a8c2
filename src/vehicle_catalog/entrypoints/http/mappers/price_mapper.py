from __future__ import annotations

from typing import Any

from vehicle_catalog.domain.price import (
    Price,
    PriceChanges,
    PriceFilters,
    PriceListing,
    PriceMatrix,
    decimal_to_json,
)
from vehicle_catalog.domain.store import to_iso
from vehicle_catalog.entrypoints.http.dtos.prices import (
    PriceListingResponseDTO,
    PriceResponseDTO,
    PricesQueryDTO,
    PriceUpdateDTO,
)
from vehicle_catalog.entrypoints.http.mappers.common import parse_query_id


class PriceMapper:
    """Maps between REST DTOs and domain models for prices."""

    @staticmethod
    def to_domain_filters(dto: PricesQueryDTO) -> PriceFilters:
        return PriceFilters(
            id=parse_query_id(dto.id, "id"),
            model_id=parse_query_id(dto.model_id, "model_id"),
            subtype_id=parse_query_id(dto.subtype_id, "subtype_id"),
        )

    @staticmethod
    def to_domain_matrix(payload: dict[str, Any]) -> PriceMatrix:
        """
        Converts the raw {model_id: {subtype_id: price}} body to a PriceMatrix.

        Raises:
            ValidationError: If an identifier key is not an integer
        """
        return PriceMatrix.parse(payload)

    @staticmethod
    def to_domain_changes(dto: PriceUpdateDTO) -> PriceChanges:
        return PriceChanges(
            id=dto.id,
            model_id=dto.model_id,
            subtype_id=dto.subtype_id,
            price=dto.price,
        )

    @staticmethod
    def to_response(price: Price) -> PriceResponseDTO:
        """Decimal -> JSON number at the boundary (int when integral)."""
        return PriceResponseDTO(
            id=price.id,
            model_id=price.model_id,
            subtype_id=price.subtype_id,
            price=decimal_to_json(price.price),
            created_at=to_iso(price.created_at),
            updated_at=to_iso(price.updated_at),
        )

    @staticmethod
    def to_listing_response(listing: PriceListing) -> PriceListingResponseDTO:
        return PriceListingResponseDTO(
            **PriceMapper.to_response(listing.price).model_dump(),
            model_name=listing.model_name,
            year=listing.year,
            version=listing.version,
            brand_name=listing.brand_name,
            subtype_name=listing.subtype_name,
            type_name=listing.type_name,
        )
