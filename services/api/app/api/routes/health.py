from __future__ import annotations

from app.api.deps import get_catalog
from app.schemas.availability import CatalogHealthOut, HealthOut
from app.services.catalog.store import CatalogStore
from fastapi import APIRouter, Depends

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(catalog: CatalogStore = Depends(get_catalog)) -> HealthOut:
    return HealthOut(
        status="ok",
        catalog=CatalogHealthOut(provider=catalog.provider, properties=len(catalog)),
    )
