from vehicle_catalog.infra.db.models.entity_store import EntityStoreRow

__all__ = ["EntityStoreRow"]
