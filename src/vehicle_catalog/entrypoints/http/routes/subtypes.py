from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.subtype import Subtype
from vehicle_catalog.entrypoints.http.dependencies import (
    get_create_subtype_use_case,
    get_delete_subtype_use_case,
    get_list_subtypes_use_case,
    get_update_subtype_use_case,
)
from vehicle_catalog.entrypoints.http.dtos.common import EnvelopeDTO, RecordIdDTO
from vehicle_catalog.entrypoints.http.dtos.subtypes import (
    SubtypeCreateDTO,
    SubtypeListingResponseDTO,
    SubtypeResponseDTO,
    SubtypesQueryDTO,
    SubtypeUpdateDTO,
)
from vehicle_catalog.entrypoints.http.error_responses import ERROR_RESPONSES
from vehicle_catalog.entrypoints.http.mappers.subtype_mapper import SubtypeMapper
from vehicle_catalog.use_cases.delete_record import DeleteRecord
from vehicle_catalog.use_cases.subtypes import CreateSubtype, ListSubtypes, UpdateSubtype

router = APIRouter(tags=["Subtypes"], responses=ERROR_RESPONSES)


@router.get(
    "/subtypes",
    response_model=list[SubtypeListingResponseDTO],
    summary="List subtypes",
    description="Each row carries `type_name`, null when the parent type no longer exists.",
)
def list_subtypes(
    query: SubtypesQueryDTO = Depends(),
    use_case: ListSubtypes = Depends(get_list_subtypes_use_case),
) -> list[SubtypeListingResponseDTO]:
    filters = SubtypeMapper.to_domain_filters(query)
    return [SubtypeMapper.to_listing_response(listing) for listing in use_case.execute(filters)]


@router.post(
    "/subtypes",
    response_model=EnvelopeDTO[SubtypeResponseDTO],
    summary="Create subtype",
)
def create_subtype(
    payload: SubtypeCreateDTO = Body(...),
    use_case: CreateSubtype = Depends(get_create_subtype_use_case),
) -> EnvelopeDTO[SubtypeResponseDTO]:
    subtype = use_case.execute(SubtypeMapper.to_domain_draft(payload))
    return EnvelopeDTO(data=SubtypeMapper.to_response(subtype))


@router.put(
    "/subtypes",
    response_model=EnvelopeDTO[SubtypeResponseDTO],
    summary="Update subtype",
    description="Send `year: 0` to clear the year.",
)
def update_subtype(
    payload: SubtypeUpdateDTO = Body(...),
    use_case: UpdateSubtype = Depends(get_update_subtype_use_case),
) -> EnvelopeDTO[SubtypeResponseDTO]:
    subtype = use_case.execute(SubtypeMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=SubtypeMapper.to_response(subtype))


@router.delete(
    "/subtypes",
    response_model=EnvelopeDTO[SubtypeResponseDTO],
    summary="Delete subtype",
)
def delete_subtype(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[Subtype] = Depends(get_delete_subtype_use_case),
) -> EnvelopeDTO[SubtypeResponseDTO]:
    subtype = use_case.execute(payload.id)
    return EnvelopeDTO(data=SubtypeMapper.to_response(subtype))
