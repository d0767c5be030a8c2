from __future__ import annotations

from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.use_cases.named_records import (
    CreateNamedRecord,
    ListNamedRecords,
    UpdateNamedRecord,
)


class ListBrands(ListNamedRecords[Brand]):
    """Search brands by id, name substring and active flag."""


class CreateBrand(CreateNamedRecord[Brand]):
    """Create a brand; names are unique regardless of case ("Toyota" == "TOYOTA")."""


class UpdateBrand(UpdateNamedRecord[Brand]):
    """Rename and/or (de)activate a brand."""
