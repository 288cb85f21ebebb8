"""
In-memory specialist store.

The store is written once at startup (seeding) and read for the rest of the
process lifetime. Records are held as a Polars DataFrame in insertion order so
the search engine can filter them with column expressions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import polars as pl

from specialist_search.core.config import settings
from specialist_search.core.logger import service_logger


SPECIALIST_SCHEMA: Dict[str, pl.DataType] = {
    "id": pl.Int64,
    "name": pl.Utf8,
    "specialty": pl.Utf8,
    "city": pl.Utf8,
}

# (name, specialty, city)
SEED_SPECIALISTS: Tuple[Tuple[str, str, str], ...] = (
    ("Jane Smith", "Legal", "New York"),
    ("Mark Lee", "Accounting", "Chicago"),
    ("Sarah Chen", "Marketing", "New York"),
    ("David Rodriguez", "Legal", "Miami"),
    ("Anna Kowalski", "Accounting", "Chicago"),
    ("Tom Harris", "Marketing", "Dallas"),
    ("Ethan Hunt", "Legal", "Los Angeles"),
    ("Peter Jones", "Accounting", "New York"),
)


class StoreUnavailableError(RuntimeError):
    """Raised when the specialist store has not been provisioned."""


class StoreFrozenError(RuntimeError):
    """Raised when writing to a store after seeding has finished."""


class InvalidSpecialistError(ValueError):
    """Raised when a record is missing a required field."""


@dataclass(frozen=True)
class Specialist:
    id: int
    name: str
    specialty: str
    city: str


def _require_text(field_name: str, value: object) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidSpecialistError(f"{field_name} must be a non-empty string")
    return value


class SpecialistStore:
    def __init__(self) -> None:
        self._rows: List[Dict[str, object]] = []
        self._next_id = 1
        self._frozen = False
        self._frame: Optional[pl.DataFrame] = None

    def add(self, name: str, specialty: str, city: str) -> Specialist:
        if self._frozen:
            raise StoreFrozenError("Specialist store is read-only after seeding")

        record = Specialist(
            id=self._next_id,
            name=_require_text("name", name),
            specialty=_require_text("specialty", specialty),
            city=_require_text("city", city),
        )
        self._next_id += 1
        self._rows.append(
            {
                "id": record.id,
                "name": record.name,
                "specialty": record.specialty,
                "city": record.city,
            }
        )
        self._frame = None
        return record

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def to_frame(self) -> pl.DataFrame:
        """Return all records, in insertion order, as a DataFrame."""
        if self._frame is None:
            self._frame = pl.DataFrame(self._rows, schema=SPECIALIST_SCHEMA)
        return self._frame

    def all(self) -> List[Specialist]:
        return [Specialist(**row) for row in self.to_frame().to_dicts()]

    def __len__(self) -> int:
        return len(self._rows)


def build_seeded_store(seed: bool = settings.SEED_SAMPLE_DATA) -> SpecialistStore:
    """
    Construct the process-wide store, load the sample rows and freeze it.

    With `seed=False` the returned store is empty (and still frozen).
    """
    store = SpecialistStore()

    if seed:
        service_logger.log_event("Populating store with sample specialist data...")
        for name, specialty, city in SEED_SPECIALISTS:
            store.add(name, specialty, city)
        service_logger.log_event("Sample data loaded", extra={"records": len(store)})

    store.freeze()
    return store
