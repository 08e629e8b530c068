# world/tile.py — single cell of the colony grid and its construction job

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from core.errors import InvariantViolation
from settings import CLASS_EMPTY, CONSTRUCTION_COSTS


@dataclass
class Construction:
    target_class: int
    remaining_time: float
    resources_needed: int


@dataclass
class Tile:
    """
    A tile under construction keeps class EMPTY until the job completes.
    Time only progresses once every resource unit has been delivered.
    """
    tile_class: int = CLASS_EMPTY
    construction: Optional[Construction] = None

    def is_solid(self) -> bool:
        return self.tile_class != CLASS_EMPTY

    def is_under_construction(self) -> bool:
        return self.construction is not None

    def set_class(self, tile_class: int) -> None:
        self.construction = None
        self.tile_class = tile_class

    def start_construction(self, target_class: int) -> None:
        build_time, resources = CONSTRUCTION_COSTS[target_class]
        self.tile_class = CLASS_EMPTY
        self.construction = Construction(target_class, build_time, resources)

    def needs_resources(self) -> bool:
        return self._job().resources_needed > 0

    def apply_resource(self) -> None:
        job = self._job()
        if job.resources_needed <= 0:
            raise InvariantViolation("resource delivered to a site that needs none")
        job.resources_needed -= 1

    def apply_build_time(self, delta: float) -> bool:
        """Spend delta seconds of building. True if construction just completed."""
        job = self._job()
        job.remaining_time -= delta
        if job.remaining_time <= 0:
            self.set_class(job.target_class)
            return True
        return False

    def _job(self) -> Construction:
        if self.construction is None:
            raise InvariantViolation("tile is not under construction")
        return self.construction
