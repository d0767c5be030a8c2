from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.entrypoints.http.dependencies import (
    get_create_type_use_case,
    get_delete_type_use_case,
    get_list_types_use_case,
    get_update_type_use_case,
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
from vehicle_catalog.use_cases.delete_record import DeleteRecord
from vehicle_catalog.use_cases.vehicle_types import (
    CreateVehicleType,
    ListVehicleTypes,
    UpdateVehicleType,
)

router = APIRouter(tags=["Vehicle types"], responses=ERROR_RESPONSES)


@router.get(
    "/types",
    response_model=list[NamedRecordResponseDTO],
    summary="List vehicle types",
)
def list_types(
    query: NamedRecordsQueryDTO = Depends(),
    use_case: ListVehicleTypes = Depends(get_list_types_use_case),
) -> list[NamedRecordResponseDTO]:
    filters = NamedRecordMapper.to_domain_filters(query)
    return [NamedRecordMapper.to_response(vehicle_type) for vehicle_type in use_case.execute(filters)]


@router.post(
    "/types",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Create vehicle type",
)
def create_type(
    payload: NamedRecordCreateDTO = Body(...),
    use_case: CreateVehicleType = Depends(get_create_type_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    vehicle_type = use_case.execute(NamedRecordMapper.to_domain_draft(payload))
    return EnvelopeDTO(data=NamedRecordMapper.to_response(vehicle_type))


@router.put(
    "/types",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Update vehicle type",
)
def update_type(
    payload: NamedRecordUpdateDTO = Body(...),
    use_case: UpdateVehicleType = Depends(get_update_type_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    vehicle_type = use_case.execute(NamedRecordMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=NamedRecordMapper.to_response(vehicle_type))


@router.delete(
    "/types",
    response_model=EnvelopeDTO[NamedRecordResponseDTO],
    summary="Delete vehicle type",
)
def delete_type(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[VehicleType] = Depends(get_delete_type_use_case),
) -> EnvelopeDTO[NamedRecordResponseDTO]:
    vehicle_type = use_case.execute(payload.id)
    return EnvelopeDTO(data=NamedRecordMapper.to_response(vehicle_type))
