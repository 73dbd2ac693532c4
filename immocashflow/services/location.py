"""City and department lookup.

Records follow the geo.api.gouv.fr shape (nom, code, codesPostaux,
population) so a downloaded commune list can be loaded as is.
"""

from __future__ import annotations

import json
from typing import Protocol

from pydantic import BaseModel, Field

from immocashflow.core.logging import get_logger

log = get_logger(__name__)

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 50


class LocationRecord(BaseModel):
    """A commune, or a whole department when ``is_department`` is set."""

    name: str = Field(..., alias="nom")
    code: str
    postal_codes: list[str] = Field(default_factory=list, alias="codesPostaux")
    population: int = 0
    is_department: bool = Field(default=False, alias="isDepartment")

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def main_postal_code(self) -> str | None:
        return self.postal_codes[0] if self.postal_codes else None


class LocationLookup(Protocol):
    def search(self, query: str) -> list[LocationRecord]: ...


class InMemoryLocationLookup:
    """Substring search over a fixed list of communes."""

    def __init__(
        self,
        records: list[LocationRecord],
        departments: dict[str, str] | None = None,
    ):
        self.records = records
        self.departments = departments or {}

    @classmethod
    def from_json(cls, path: str, departments: dict[str, str] | None = None) -> InMemoryLocationLookup:
        """Load communes from a JSON array file."""
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        records = [LocationRecord.model_validate(item) for item in raw]
        log.info("cities_loaded", path=path, count=len(records))
        return cls(records, departments)

    def search(self, query: str) -> list[LocationRecord]:
        """Match by name substring or postal code prefix, at most 50 results.

        A two-digit query naming a known department is answered first with
        a record covering the whole department.
        """
        q = (query or "").strip().lower()
        if len(q) < MIN_QUERY_LENGTH:
            return []

        results: list[LocationRecord] = []
        if len(q) == 2 and q.isdigit() and q in self.departments:
            results.append(
                LocationRecord(
                    name=f"{q} - {self.departments[q]} (Tout le département)",
                    code=q,
                    postal_codes=[q],
                    population=0,
                    is_department=True,
                )
            )

        matches = [
            r for r in self.records
            if q in r.name.lower() or any(cp.startswith(q) for cp in r.postal_codes)
        ]
        return (results + matches)[:MAX_RESULTS]
