from __future__ import annotations

import json
from pathlib import Path

from app.domain.property import CatalogEntry, PropertyId
from app.services.catalog.types import FixtureCatalog


class FixtureCatalogProvider:
    name = "fixture"

    def __init__(self, fixture_path: str):
        self.fixture_path = fixture_path

    def _read(self) -> FixtureCatalog:
        p = Path(self.fixture_path)
        if not p.exists():
            raise FileNotFoundError(f"Fixture file not found: {p}")
        raw = p.read_text(encoding="utf-8")
        return FixtureCatalog.model_validate(json.loads(raw))

    def load(self) -> dict[PropertyId, CatalogEntry]:
        fixture = self._read()
        out: dict[PropertyId, CatalogEntry] = {}
        for it in fixture.properties:
            if it.id in out:
                raise ValueError(f"Duplicate property id in fixture: {it.id}")
            out[it.id] = it.to_entry()
        return out
