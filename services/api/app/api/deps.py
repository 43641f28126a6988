from __future__ import annotations

from app.core.config import settings
from app.services.availability.service import AvailabilityQueryService
from app.services.catalog.factory import get_catalog_store
from app.services.catalog.store import CatalogStore
from fastapi import Depends


def get_catalog() -> CatalogStore:
    return get_catalog_store()


def get_query_service(catalog: CatalogStore = Depends(get_catalog)) -> AvailabilityQueryService:
    return AvailabilityQueryService(
        catalog, cancel_check_every=settings.availability_cancel_check_every
    )
