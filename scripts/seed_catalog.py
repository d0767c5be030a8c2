#!/usr/bin/env python3
"""
Seed the catalog stores with deterministic data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the use cases, so every rule (trimming, uniqueness, ids) applies
- Writes to the configured backend (CATALOG_STORE_BACKEND, CATALOG_DATA_DIR)

Usage:
    python scripts/seed_catalog.py
    CATALOG_DATA_DIR=/tmp/catalog python scripts/seed_catalog.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicle_catalog.adapters.entity_repository import EntityRepository
from vehicle_catalog.domain.brand import Brand
from vehicle_catalog.domain.client import Client
from vehicle_catalog.domain.named_record import NewNamedRecord
from vehicle_catalog.domain.price import Price, PriceMatrix
from vehicle_catalog.domain.subtype import NewSubtype, Subtype
from vehicle_catalog.domain.vehicle_model import NewVehicleModel, VehicleModel
from vehicle_catalog.domain.vehicle_type import VehicleType
from vehicle_catalog.entrypoints.http.dependencies import get_store_backend
from vehicle_catalog.ports.store_backend import StoreBackend, StoreSnapshot
from vehicle_catalog.use_cases.brands import CreateBrand
from vehicle_catalog.use_cases.prices import UpsertPrices
from vehicle_catalog.use_cases.subtypes import CreateSubtype
from vehicle_catalog.use_cases.vehicle_models import CreateVehicleModel
from vehicle_catalog.use_cases.vehicle_types import CreateVehicleType


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results

COLLECTIONS = (Brand, VehicleType, VehicleModel, Subtype, Price, Client)


# ==============================================================================
# Catalog Data
# ==============================================================================

MODELS_BY_BRAND = {
    "Toyota": [("Corolla", "XEi CVT"), ("Hilux", "SRV 4x4"), ("Yaris", "XLS")],
    "Nissan": [("Versa", "Advance"), ("Kicks", "Exclusive")],
    "Volkswagen": [("Jetta", "Comfortline"), ("Tiguan", "Highline")],
    "Kia": [("Rio", "EX"), ("Sportage", "SX")],
}

SUBTYPES_BY_TYPE = {
    "Sedán": [("Sedán 4 puertas", "Base"), ("Sedán 4 puertas", "Full")],
    "SUV": [("SUV 5 puertas", "Base"), ("SUV 7 asientos", "Full")],
    "Pick-up": [("Doble cabina", "Base")],
}

YEARS = range(2019, 2025)

# Base prices per (model name) in PEN, before the random variance
BASE_PRICES = {
    "Corolla": 95000,
    "Hilux": 165000,
    "Yaris": 70000,
    "Versa": 65000,
    "Kicks": 88000,
    "Jetta": 98000,
    "Tiguan": 150000,
    "Rio": 60000,
    "Sportage": 120000,
}


# ==============================================================================
# Seed Generation
# ==============================================================================


def clear_stores(backend: StoreBackend) -> None:
    """Reset every collection to an empty store (counter back to 0)."""
    for record_type in COLLECTIONS:
        with backend.write_lock(record_type.COLLECTION):
            backend.persist(record_type.COLLECTION, StoreSnapshot())


def price_for(model_name: str, year: int) -> Decimal:
    """Base price depreciated ~7% per year, +/- 5% noise, rounded to 500."""
    years_old = max(YEARS) - year
    value = BASE_PRICES[model_name] * (1 - 0.07 * years_old) * random.uniform(0.95, 1.05)
    return Decimal(int(round(value / 500.0)) * 500)


def seed_catalog(seed: int = RANDOM_SEED) -> None:
    """
    Seed brands, types, models, subtypes and the price matrix.

    Args:
        seed: Random seed for deterministic results
    """
    random.seed(seed)
    backend = get_store_backend()

    print(f"🌱 Seeding catalog (seed={seed})...")

    print("🗑️  Clearing existing stores...")
    clear_stores(backend)

    create_brand = CreateBrand(EntityRepository(backend, Brand))
    create_type = CreateVehicleType(EntityRepository(backend, VehicleType))
    create_model = CreateVehicleModel(EntityRepository(backend, VehicleModel))
    create_subtype = CreateSubtype(EntityRepository(backend, Subtype))
    upsert_prices = UpsertPrices(EntityRepository(backend, Price))

    models: list[VehicleModel] = []
    for brand_name, catalog in MODELS_BY_BRAND.items():
        brand = create_brand.execute(NewNamedRecord(name=brand_name))
        for model_name, version in catalog:
            year = random.choice(YEARS)
            models.append(
                create_model.execute(
                    NewVehicleModel(name=model_name, year=year, version=version, brand_id=brand.id)
                )
            )

    subtypes: list[Subtype] = []
    for type_name, catalog in SUBTYPES_BY_TYPE.items():
        vehicle_type = create_type.execute(NewNamedRecord(name=type_name))
        for subtype_name, version in catalog:
            subtypes.append(
                create_subtype.execute(
                    NewSubtype(name=subtype_name, type_id=vehicle_type.id, version=version)
                )
            )

    # Each model is priced for a random pair of subtypes
    matrix = {
        model.id: {
            subtype.id: price_for(model.name, model.year)
            for subtype in random.sample(subtypes, k=2)
        }
        for model in models
    }
    result = upsert_prices.execute(PriceMatrix.parse(matrix))

    print(f"✅ Seeded {len(MODELS_BY_BRAND)} brands, {len(models)} models, "
          f"{len(subtypes)} subtypes, {result.created} prices")

    print("\n📊 Sample models:")
    for i, model in enumerate(models[:5], 1):
        print(f"   {i}. {model.year} {model.name} {model.version}")

    if len(models) > 5:
        print(f"   ... and {len(models) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_catalog()
    except Exception as e:
        print(f"❌ Error seeding catalog: {e}", file=sys.stderr)
        sys.exit(1)
