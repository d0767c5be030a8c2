"""
Dependency injection for FastAPI routes.

Key principle: the store backend is a process-wide singleton because it owns
the per-collection write locks. Repositories and use cases are cheap and are
built fresh for every request.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.adapters.json_file_store_backend import JsonFileStoreBackend
from vehicle_catalog.adapters.sql_store_backend import SqlStoreBackend
from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.domain.client import Client
from vehicle_catalog.domain.price import Price
from vehicle_catalog.domain.subtype import Subtype
from vehicle_catalog.domain.vehicle_model import VehicleModel
from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.infra.config import data_dir, store_backend_name
from vehicle_catalog.ports.store_backend import StoreBackend
from vehicle_catalog.use_cases.brands import CreateBrand, ListBrands, UpdateBrand
from vehicle_catalog.use_cases.clients import CreateClient, ListClients, UpdateClient
from vehicle_catalog.use_cases.delete_record import DeleteRecord
from vehicle_catalog.use_cases.prices import ListPrices, UpdatePrice, UpsertPrices
from vehicle_catalog.use_cases.subtypes import CreateSubtype, ListSubtypes, UpdateSubtype
from vehicle_catalog.use_cases.vehicle_models import (
    CreateVehicleModel,
    ListVehicleModels,
    UpdateVehicleModel,
)
from vehicle_catalog.use_cases.vehicle_types import (
    CreateVehicleType,
    ListVehicleTypes,
    UpdateVehicleType,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_store_backend() -> StoreBackend:
    """
    Builds the configured store backend once per process.

    Selected by CATALOG_STORE_BACKEND:
    - "json" (default): one JSON file per collection under CATALOG_DATA_DIR
    - "sql": entity_stores table reached through DATABASE_URL

    Raises:
        RuntimeError: If the backend name or its settings are invalid
    """
    name = store_backend_name()
    logger.info("Store backend selected", extra={"backend": name})

    if name == "sql":
        return SqlStoreBackend()
    return JsonFileStoreBackend(data_dir())


# ==============================================================================
# Repositories
# ==============================================================================


def get_brand_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[Brand]:
    return EntityRepository(backend, Brand)


def get_type_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[VehicleType]:
    return EntityRepository(backend, VehicleType)


def get_model_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[VehicleModel]:
    return EntityRepository(backend, VehicleModel)


def get_subtype_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[Subtype]:
    return EntityRepository(backend, Subtype)


def get_price_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[Price]:
    return EntityRepository(backend, Price)


def get_client_repository(
    backend: StoreBackend = Depends(get_store_backend),
) -> EntityRepository[Client]:
    return EntityRepository(backend, Client)


# ==============================================================================
# Brands
# ==============================================================================


def get_list_brands_use_case(
    repository: EntityRepository[Brand] = Depends(get_brand_repository),
) -> ListBrands:
    return ListBrands(repository)


def get_create_brand_use_case(
    repository: EntityRepository[Brand] = Depends(get_brand_repository),
) -> CreateBrand:
    return CreateBrand(repository)


def get_update_brand_use_case(
    repository: EntityRepository[Brand] = Depends(get_brand_repository),
) -> UpdateBrand:
    return UpdateBrand(repository)


def get_delete_brand_use_case(
    repository: EntityRepository[Brand] = Depends(get_brand_repository),
) -> DeleteRecord[Brand]:
    return DeleteRecord(repository)


# ==============================================================================
# Vehicle types
# ==============================================================================


def get_list_types_use_case(
    repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> ListVehicleTypes:
    return ListVehicleTypes(repository)


def get_create_type_use_case(
    repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> CreateVehicleType:
    return CreateVehicleType(repository)


def get_update_type_use_case(
    repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> UpdateVehicleType:
    return UpdateVehicleType(repository)


def get_delete_type_use_case(
    repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> DeleteRecord[VehicleType]:
    return DeleteRecord(repository)


# ==============================================================================
# Vehicle models
# ==============================================================================


def get_list_models_use_case(
    repository: EntityRepository[VehicleModel] = Depends(get_model_repository),
) -> ListVehicleModels:
    return ListVehicleModels(repository)


def get_create_model_use_case(
    repository: EntityRepository[VehicleModel] = Depends(get_model_repository),
) -> CreateVehicleModel:
    return CreateVehicleModel(repository)


def get_update_model_use_case(
    repository: EntityRepository[VehicleModel] = Depends(get_model_repository),
) -> UpdateVehicleModel:
    return UpdateVehicleModel(repository)


def get_delete_model_use_case(
    repository: EntityRepository[VehicleModel] = Depends(get_model_repository),
) -> DeleteRecord[VehicleModel]:
    return DeleteRecord(repository)


# ==============================================================================
# Subtypes
# ==============================================================================


def get_list_subtypes_use_case(
    repository: EntityRepository[Subtype] = Depends(get_subtype_repository),
    type_repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> ListSubtypes:
    return ListSubtypes(repository, type_repository)


def get_create_subtype_use_case(
    repository: EntityRepository[Subtype] = Depends(get_subtype_repository),
) -> CreateSubtype:
    return CreateSubtype(repository)


def get_update_subtype_use_case(
    repository: EntityRepository[Subtype] = Depends(get_subtype_repository),
) -> UpdateSubtype:
    return UpdateSubtype(repository)


def get_delete_subtype_use_case(
    repository: EntityRepository[Subtype] = Depends(get_subtype_repository),
) -> DeleteRecord[Subtype]:
    return DeleteRecord(repository)


# ==============================================================================
# Prices
# ==============================================================================


def get_list_prices_use_case(
    repository: EntityRepository[Price] = Depends(get_price_repository),
    model_repository: EntityRepository[VehicleModel] = Depends(get_model_repository),
    brand_repository: EntityRepository[Brand] = Depends(get_brand_repository),
    subtype_repository: EntityRepository[Subtype] = Depends(get_subtype_repository),
    type_repository: EntityRepository[VehicleType] = Depends(get_type_repository),
) -> ListPrices:
    """Price listing fans out to four other collections for the join."""
    return ListPrices(
        repository,
        model_repository=model_repository,
        brand_repository=brand_repository,
        subtype_repository=subtype_repository,
        type_repository=type_repository,
    )


def get_upsert_prices_use_case(
    repository: EntityRepository[Price] = Depends(get_price_repository),
) -> UpsertPrices:
    return UpsertPrices(repository)


def get_update_price_use_case(
    repository: EntityRepository[Price] = Depends(get_price_repository),
) -> UpdatePrice:
    return UpdatePrice(repository)


def get_delete_price_use_case(
    repository: EntityRepository[Price] = Depends(get_price_repository),
) -> DeleteRecord[Price]:
    return DeleteRecord(repository)


# ==============================================================================
# Clients
# ==============================================================================


def get_list_clients_use_case(
    repository: EntityRepository[Client] = Depends(get_client_repository),
) -> ListClients:
    return ListClients(repository)


def get_create_client_use_case(
    repository: EntityRepository[Client] = Depends(get_client_repository),
) -> CreateClient:
    return CreateClient(repository)


def get_update_client_use_case(
    repository: EntityRepository[Client] = Depends(get_client_repository),
) -> UpdateClient:
    return UpdateClient(repository)


def get_delete_client_use_case(
    repository: EntityRepository[Client] = Depends(get_client_repository),
) -> DeleteRecord[Client]:
    return DeleteRecord(repository)
