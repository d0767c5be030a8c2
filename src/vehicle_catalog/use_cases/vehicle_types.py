from __future__ import annotations

from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.use_cases.named_records import (
    CreateNamedRecord,
    ListNamedRecords,
    UpdateNamedRecord,
)


class ListVehicleTypes(ListNamedRecords[VehicleType]):
    pass


class CreateVehicleType(CreateNamedRecord[VehicleType]):
    pass


class UpdateVehicleType(UpdateNamedRecord[VehicleType]):
    pass
