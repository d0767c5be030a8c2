from typing import Any

from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.price import Price
from vehicle_catalog.entrypoints.http.dependencies import (
    get_delete_price_use_case,
    get_list_prices_use_case,
    get_update_price_use_case,
    get_upsert_prices_use_case,
)
from vehicle_catalog.entrypoints.http.dtos.common import EnvelopeDTO, OkDTO, RecordIdDTO
from vehicle_catalog.entrypoints.http.dtos.prices import (
    PriceListingResponseDTO,
    PriceResponseDTO,
    PricesQueryDTO,
    PriceUpdateDTO,
)
from vehicle_catalog.entrypoints.http.error_responses import ERROR_RESPONSES
from vehicle_catalog.entrypoints.http.mappers.price_mapper import PriceMapper
from vehicle_catalog.use_cases.delete_record import DeleteRecord
from vehicle_catalog.use_cases.prices import ListPrices, UpdatePrice, UpsertPrices

router = APIRouter(tags=["Prices"], responses=ERROR_RESPONSES)


@router.get(
    "/prices",
    response_model=list[PriceListingResponseDTO],
    summary="List prices",
    description="""
    List prices joined with their model, brand, subtype and type.

    Rows whose model or subtype is missing or inactive are left out.
    `brand_name` and `type_name` are null when that parent is missing.
    """,
)
def list_prices(
    query: PricesQueryDTO = Depends(),
    use_case: ListPrices = Depends(get_list_prices_use_case),
) -> list[PriceListingResponseDTO]:
    filters = PriceMapper.to_domain_filters(query)
    return [PriceMapper.to_listing_response(listing) for listing in use_case.execute(filters)]


@router.post(
    "/prices",
    response_model=OkDTO,
    summary="Upsert price matrix",
    description="""
    Bulk upsert from a `{model_id: {subtype_id: price}}` matrix.

    Existing (model, subtype) pairs are overwritten, new pairs are appended.
    Null, zero and non-numeric prices are skipped.

    ## Example
    ```
    POST /v1/prices
    {"1": {"2": 185000, "3": 199000}}
    ```
    """,
)
def upsert_prices(
    payload: dict[str, Any] = Body(..., examples=[{"1": {"2": 185000}}]),
    use_case: UpsertPrices = Depends(get_upsert_prices_use_case),
) -> OkDTO:
    use_case.execute(PriceMapper.to_domain_matrix(payload))
    return OkDTO()


@router.put(
    "/prices",
    response_model=EnvelopeDTO[PriceResponseDTO],
    summary="Update price",
)
def update_price(
    payload: PriceUpdateDTO = Body(...),
    use_case: UpdatePrice = Depends(get_update_price_use_case),
) -> EnvelopeDTO[PriceResponseDTO]:
    price = use_case.execute(PriceMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=PriceMapper.to_response(price))


@router.delete(
    "/prices",
    response_model=EnvelopeDTO[PriceResponseDTO],
    summary="Delete price",
)
def delete_price(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[Price] = Depends(get_delete_price_use_case),
) -> EnvelopeDTO[PriceResponseDTO]:
    price = use_case.execute(payload.id)
    return EnvelopeDTO(data=PriceMapper.to_response(price))
