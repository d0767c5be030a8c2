from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.entrypoints.http.dependencies import (
    get_create_brand_use_case,
    get_delete_brand_use_case,
    get_list_brands_use_case,
    get_update_brand_use_case,
)
from vehicle_catalog.entrypoints.http.dtos.common import EnvelopeDTO, RecordIdDTO
from vehicle_catalog.entrypoints.http.dtos.named_records import (
    NamedRecordCreateDTO,
    NamedRecordResponseDTO,
    NamedRecordsQueryDTO,
    NamedRecordUpdateDTO,
)
from vehicle_catalog.entrypoints.http.error_responses import ERROR_RESPONSES
from vehicle_catalog.entrypoints.http.mappers.named_record_mapper import NamedRecordMapper
from vehicle_catalog.use_cases.brands import CreateBrand, ListBrands, UpdateBrand
from vehicle_catalog.use_cases.delete_record import DeleteRecord

router = APIRouter(tags=["Brands"], responses=ERROR_RESPONSES)


@router.get(
    "/brands",
    response_model=list[NamedRecordResponseDTO],
    summary="List brands",
    description="""
    List brands in insertion order.

    ## Filters
    - All filters use AND semantics
    - `q`: case-insensitive substring of the name
    - `active`: only the literal strings `true` and `false` filter

    ## Example
    ```
    GET /v1/brands?q=toy&active=true
    ```
    """,
)
def list_brands(
    query: NamedRecordsQueryDTO = Depends(),
    use_case: ListBrands = Depends(get_list_brands_use_case),
) -> list[NamedRecordResponseDTO]:
    filters = NamedRecordMapper.to_domain_filters(query)
    brands = use_case.execute(filters)
    return [NamedRecordMapper.to_response(brand) for brand in brands]


@router.post(
    "/brands",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Create brand",
)
def create_brand(
    payload: NamedRecordCreateDTO = Body(...),
    use_case: CreateBrand = Depends(get_create_brand_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    brand = use_case.execute(NamedRecordMapper.to_domain_draft(payload))
    return EnvelopeDTO(data=NamedRecordMapper.to_response(brand))


@router.put(
    "/brands",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Update brand",
)
def update_brand(
    payload: NamedRecordUpdateDTO = Body(...),
    use_case: UpdateBrand = Depends(get_update_brand_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    brand = use_case.execute(NamedRecordMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=NamedRecordMapper.to_response(brand))


@router.delete(
    "/brands",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Delete brand",
    description="Removes the brand. Models referencing it are left untouched.",
)
def delete_brand(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[Brand] = Depends(get_delete_brand_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    brand = use_case.execute(payload.id)
    return EnvelopeDTO(data=NamedRecordMapper.to_response(brand))
