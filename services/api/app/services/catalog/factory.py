from __future__ import annotations

import logging
from functools import lru_cache

from app.core.config import settings
from app.services.catalog.fixture_provider import FixtureCatalogProvider
from app.services.catalog.provider import CatalogProvider
from app.services.catalog.seed_provider import SeedCatalogProvider, SeedOptions
from app.services.catalog.store import CatalogStore

logger = logging.getLogger(__name__)


def get_provider() -> CatalogProvider:
    if settings.catalog_provider == "seed":
        return SeedCatalogProvider(SeedOptions.from_settings(settings))
    if settings.catalog_provider == "fixture":
        return FixtureCatalogProvider(fixture_path=settings.fixture_catalog_path)
    raise ValueError(f"Unknown catalog provider: {settings.catalog_provider}")


@lru_cache
def get_catalog_store() -> CatalogStore:
    provider = get_provider()
    entries = provider.load()
    logger.info("Loaded %d properties from %s catalog provider", len(entries), provider.name)
    return CatalogStore(entries, provider=provider.name)
