from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.vehicle_model import VehicleModel
from vehicle_catalog.entrypoints.http.dependencies import (
    get_create_model_use_case,
    get_delete_model_use_case,
    get_list_models_use_case,
    get_update_model_use_case,
)
from vehicle_catalog.entrypoints.http.dtos.common import EnvelopeDTO, RecordIdDTO
from vehicle_catalog.entrypoints.http.dtos.vehicle_models import (
    ModelCreateDTO,
    ModelResponseDTO,
    ModelsQueryDTO,
    ModelUpdateDTO,
)
from vehicle_catalog.entrypoints.http.error_responses import ERROR_RESPONSES
from vehicle_catalog.entrypoints.http.mappers.vehicle_model_mapper import VehicleModelMapper
from vehicle_catalog.use_cases.delete_record import DeleteRecord
from vehicle_catalog.use_cases.vehicle_models import (
    CreateVehicleModel,
    ListVehicleModels,
    UpdateVehicleModel,
)

router = APIRouter(tags=["Models"], responses=ERROR_RESPONSES)


@router.get(
    "/models",
    response_model=list[ModelResponseDTO],
    summary="List vehicle models",
    description="""
    List models in insertion order.

    ## Filters
    - `brand_id`: exact brand
    - `q`: case-insensitive substring of `"<name> <version>"`
    - `active`: `true` or `false`

    ## Example
    ```
    GET /v1/models?brand_id=1&q=cor
    ```
    """,
)
def list_models(
    query: ModelsQueryDTO = Depends(),
    use_case: ListVehicleModels = Depends(get_list_models_use_case),
) -> list[ModelResponseDTO]:
    filters = VehicleModelMapper.to_domain_filters(query)
    return [VehicleModelMapper.to_response(model) for model in use_case.execute(filters)]


@router.post(
    "/models",
    response_model=EnvelopeDTO[ModelResponseDTO],
    summary="Create vehicle model",
)
def create_model(
    payload: ModelCreateDTO = Body(...),
    use_case: CreateVehicleModel = Depends(get_create_model_use_case),
) -> EnvelopeDTO[ModelResponseDTO]:
    model = use_case.execute(VehicleModelMapper.to_domain_draft(payload))
    return EnvelopeDTO(data=VehicleModelMapper.to_response(model))


@router.put(
    "/models",
    response_model=EnvelopeDTO[ModelResponseDTO],
    summary="Update vehicle model",
)
def update_model(
    payload: ModelUpdateDTO = Body(...),
    use_case: UpdateVehicleModel = Depends(get_update_model_use_case),
) -> EnvelopeDTO[ModelResponseDTO]:
    model = use_case.execute(VehicleModelMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=VehicleModelMapper.to_response(model))


@router.delete(
    "/models",
    response_model=EnvelopeDTO[ModelResponseDTO],
    summary="Delete vehicle model",
)
def delete_model(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[VehicleModel] = Depends(get_delete_model_use_case),
) -> EnvelopeDTO[ModelResponseDTO]:
    model = use_case.execute(payload.id)
    return EnvelopeDTO(data=VehicleModelMapper.to_response(model))
