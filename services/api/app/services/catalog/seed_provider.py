from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import TYPE_CHECKING

from app.domain.property import CatalogEntry, PropertyId

if TYPE_CHECKING:
    from app.core.config import Settings

ID_OFFSET = 1000

DEFAULT_LOCALES = (
    "Bakı", "Gəncə", "Sumqayıt", "Şəki", "Qəbələ",
    "Quba", "Lənkəran", "Naxçıvan", "Mingəçevir", "Şuşa",
)

DEFAULT_ADJECTIVES = (
    "Sahil", "Dağlıq", "Sakit", "Gözəl", "Yaşıl",
    "Tarixi", "Müasir", "Ənənəvi", "Panoramlı", "Mərmərli",
    "Qonaqlı", "Minimalist", "Baxımlı", "Təpəlik",
)

DEFAULT_SHAPES = (
    "Mənzil", "Villa", "Bağ Evi", "Dağ Evi", "Kottec",
    "Həyət Evi", "Qəsr", "Bina", "Loft", "Otaq",
)


@dataclass(frozen=True)
class SeedOptions:
    generate_count: int = 2000
    random_seed: int | None = None

    start: date = date(2025, 7, 1)
    end: date = date(2025, 9, 30)

    blocks_per_property: tuple[int, int] = (1, 4)
    block_nights: tuple[int, int] = (1, 5)
    gap_days: tuple[int, int] = (0, 2)

    locales: tuple[str, ...] = field(default=DEFAULT_LOCALES)
    adjectives: tuple[str, ...] = field(default=DEFAULT_ADJECTIVES)
    shapes: tuple[str, ...] = field(default=DEFAULT_SHAPES)

    @classmethod
    def from_settings(cls, s: "Settings") -> "SeedOptions":
        return cls(
            generate_count=s.seed_generate_count,
            random_seed=s.seed_random_seed,
            start=s.seed_start,
            end=s.seed_end,
            blocks_per_property=(s.seed_blocks_min, s.seed_blocks_max),
            block_nights=(s.seed_block_nights_min, s.seed_block_nights_max),
            gap_days=(s.seed_gap_days_min, s.seed_gap_days_max),
        )


class SeedCatalogProvider:
    """Generates a synthetic catalog of homes with runs of bookable nights.

    Every property gets a few blocks of consecutive dates inside the seeding
    window, separated by small gaps. With ``random_seed`` set the output is
    reproducible.
    """

    name = "seed"

    def __init__(self, options: SeedOptions | None = None):
        self.options = options or SeedOptions()

    def load(self) -> dict[PropertyId, CatalogEntry]:
        opts = self.options
        rng = random.Random(opts.random_seed)

        start, end = opts.start, opts.end
        if end < start:
            start, end = end, start
        total_days = (end - start).days + 1

        out: dict[PropertyId, CatalogEntry] = {}
        for i in range(opts.generate_count):
            property_id = str(ID_OFFSET + i)
            name = self._name(rng, i)
            slots = self._slots(rng, start, end, total_days)
            out[property_id] = CatalogEntry.build(property_id, name, slots)
        return out

    def _name(self, rng: random.Random, i: int) -> str:
        opts = self.options
        city = rng.choice(opts.locales)
        adj = rng.choice(opts.adjectives)
        shape = rng.choice(opts.shapes)
        return f"{city} {adj} {shape} #{ID_OFFSET + i}"

    def _slots(self, rng: random.Random, start: date, end: date, total_days: int) -> set[date]:
        opts = self.options
        slots: set[date] = set()

        blocks = rng.randint(*opts.blocks_per_property)
        cursor = start + timedelta(days=rng.randrange(max(1, total_days)))

        for _ in range(blocks):
            if cursor > end:
                break

            nights = rng.randint(*opts.block_nights)
            for k in range(nights):
                day = cursor + timedelta(days=k)
                if day > end:
                    break
                slots.add(day)

            gap = rng.randint(*opts.gap_days)
            cursor += timedelta(days=nights + gap + rng.randint(1, 3))

        return slots
