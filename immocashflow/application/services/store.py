"""Saved simulation storage.

``SimulationStore`` keeps simulations in memory, in save order.
``JsonSimulationStore`` mirrors every change to a JSON file.
"""

from __future__ import annotations

import json
import os
from typing import Any

from pydantic import ValidationError

from immocashflow.core.exceptions import SimulationNotFoundError, StoreError
from immocashflow.core.logging import get_logger
from immocashflow.domain.models.simulation import SavedSimulation

log = get_logger(__name__)


class SimulationStore:
    """In-memory mapping from identifier to saved simulation."""

    def __init__(self, simulations: list[SavedSimulation] | None = None):
        self._items: dict[str, SavedSimulation] = {}
        for sim in simulations or []:
            self._items[sim.id] = sim

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, simulation_id: str) -> bool:
        return simulation_id in self._items

    def add(self, sim: SavedSimulation) -> SavedSimulation:
        self._items[sim.id] = sim
        self._persist()
        log.info("simulation_saved", id=sim.id, name=sim.name, score=sim.score)
        return sim

    def list(self) -> list[SavedSimulation]:
        return list(self._items.values())

    def get(self, simulation_id: str) -> SavedSimulation:
        try:
            return self._items[simulation_id]
        except KeyError:
            raise SimulationNotFoundError(simulation_id) from None

    def remove(self, simulation_id: str) -> bool:
        """Delete a simulation. Returns False if it did not exist."""
        if self._items.pop(simulation_id, None) is None:
            return False
        self._persist()
        log.info("simulation_removed", id=simulation_id)
        return True

    def clear(self) -> None:
        self._items.clear()
        self._persist()

    def _persist(self) -> None:
        pass


class JsonSimulationStore(SimulationStore):
    """Simulation store backed by a JSON file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(self._load())

    def _load(self) -> list[SavedSimulation]:
        if not os.path.exists(self.path):
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                payload: dict[str, Any] = json.load(f)
            sims = [SavedSimulation.model_validate(item) for item in payload.get("simulations", [])]
        except (OSError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            log.warning("simulations_load_failed", path=self.path, error=str(e))
            return []

        log.info("simulations_loaded", path=self.path, count=len(sims))
        return sims

    def _persist(self) -> None:
        payload = {
            "count": len(self._items),
            "simulations": [sim.model_dump(mode="json") for sim in self._items.values()],
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
        except OSError as e:
            log.error("simulations_save_failed", path=self.path, error=str(e))
            raise StoreError(f"Cannot write simulations to {self.path}") from e
