from datetime import date

import pytest
from app.api.deps import get_catalog
from app.domain.property import CatalogEntry
from app.main import app
from app.services.catalog.seed_provider import SeedCatalogProvider, SeedOptions
from app.services.catalog.store import CatalogStore
from fastapi.testclient import TestClient


def entry(property_id: str, name: str, *days: date) -> CatalogEntry:
    return CatalogEntry.build(property_id, name, days)


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    # Rate limiting fails open without Redis; keep tests independent of a local server.
    monkeypatch.setattr("app.api.rate_limit.get_redis", lambda: None)


@pytest.fixture(scope="session")
def seeded_store() -> CatalogStore:
    provider = SeedCatalogProvider(SeedOptions(generate_count=300, random_seed=7))
    return CatalogStore(provider.load(), provider=provider.name)


@pytest.fixture()
def scenario_store() -> CatalogStore:
    """Three homes: two share a name, one has nothing inside 2025-07-10..12."""
    return CatalogStore(
        {
            "A": entry("A", "Zeta", date(2025, 7, 10)),
            "B": entry("B", "Alpha", date(2025, 7, 12), date(2025, 7, 10), date(2025, 7, 11)),
            "C": entry("C", "Alpha", date(2025, 7, 20)),
        }
    )


@pytest.fixture()
def client_for():
    def _make(store: CatalogStore) -> TestClient:
        app.dependency_overrides[get_catalog] = lambda: store
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture()
def client(client_for, seeded_store):
    with client_for(seeded_store) as c:
        yield c
