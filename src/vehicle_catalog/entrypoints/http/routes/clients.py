from fastapi import APIRouter, Body, Depends

from vehicle_catalog.domain.client import Client
from vehicle_catalog.entrypoints.http.dependencies import (
    get_create_client_use_case,
    get_delete_client_use_case,
    get_list_clients_use_case,
    get_update_client_use_case,
)
from vehicle_catalog.entrypoints.http.dtos.clients import (
    ClientCreateDTO,
    ClientResponseDTO,
    ClientsQueryDTO,
    ClientUpdateDTO,
)
from vehicle_catalog.entrypoints.http.dtos.common import EnvelopeDTO, RecordIdDTO
from vehicle_catalog.entrypoints.http.error_responses import ERROR_RESPONSES
from vehicle_catalog.entrypoints.http.mappers.client_mapper import ClientMapper
from vehicle_catalog.use_cases.clients import CreateClient, ListClients, UpdateClient
from vehicle_catalog.use_cases.delete_record import DeleteRecord

router = APIRouter(tags=["Clients"], responses=ERROR_RESPONSES)


@router.get(
    "/clients",
    response_model=list[ClientResponseDTO],
    summary="List clients",
    description="""
    List clients in insertion order.

    ## Filters
    - `brand_id`, `model_id`: exact match
    - `q`: case-insensitive substring of dni, placa, vin, email or celular
    - `active`: filters on `estado`
    """,
)
def list_clients(
    query: ClientsQueryDTO = Depends(),
    use_case: ListClients = Depends(get_list_clients_use_case),
) -> list[ClientResponseDTO]:
    filters = ClientMapper.to_domain_filters(query)
    return [ClientMapper.to_response(client) for client in use_case.execute(filters)]


@router.post(
    "/clients",
    response_model=EnvelopeDTO[ClientResponseDTO],
    summary="Register client",
    description="dni, email and placa must be unique. placa is stored upper-cased, email lower-cased.",
)
def create_client(
    payload: ClientCreateDTO = Body(...),
    use_case: CreateClient = Depends(get_create_client_use_case),
) -> EnvelopeDTO[ClientResponseDTO]:
    client = use_case.execute(ClientMapper.to_domain_draft(payload))
    return EnvelopeDTO(data=ClientMapper.to_response(client))


@router.put(
    "/clients",
    response_model=EnvelopeDTO[ClientResponseDTO],
    summary="Update client",
)
def update_client(
    payload: ClientUpdateDTO = Body(...),
    use_case: UpdateClient = Depends(get_update_client_use_case),
) -> EnvelopeDTO[ClientResponseDTO]:
    client = use_case.execute(ClientMapper.to_domain_changes(payload))
    return EnvelopeDTO(data=ClientMapper.to_response(client))


@router.delete(
    "/clients",
    response_model=EnvelopeDTO[ClientResponseDTO],
    summary="Delete client",
)
def delete_client(
    payload: RecordIdDTO = Body(...),
    use_case: DeleteRecord[Client] = Depends(get_delete_client_use_case),
) -> EnvelopeDTO[ClientResponseDTO]:
    client = use_case.execute(payload.id)
    return EnvelopeDTO(data=ClientMapper.to_response(client))
