# world/colony.py — the simulated world: tiles, items, robots and the work queue

from __future__ import annotations
import logging
import random
from typing import Optional, TYPE_CHECKING

from items.item_registry import ItemRegistry
from items.spawner import FoodSpawner
from production.work_queue import WorkQueue
from settings import (
    FOOD_SPAWN_INTERVAL, PREWARM_DELTA, PREWARM_ROUNDS, PREWARM_STEPS,
    ROBOT_SPAWN_LIMIT,
)
from workers.robot import StepContext
from workers.robot_manager import RobotManager
from world.layout import Layout, parse_layout

if TYPE_CHECKING:
    from core.event_bus import EventBus
    from world.tilemap import TileMap

logger = logging.getLogger(__name__)


class Colony:
    """
    Top-level simulation state. All mutation happens inside update().

    Tick order is fixed:
      1. item physics and lifetime
      2. food spawning
      3. scheduler pass (idle robots <- unassigned work)
      4. robots step one at a time, in creation order

    Rendering and input only read tiles/items/robots and call
    start_construction().
    """

    def __init__(self, layout: Layout, rng: random.Random, event_bus: EventBus) -> None:
        if len(layout.spawners) != 1:
            raise ValueError(f"layout must define exactly one food spawner, found {len(layout.spawners)}")

        self._rng = rng
        self._bus = event_bus

        self.tiles: TileMap = layout.tiles
        self.food_spawners = [FoodSpawner(region) for region in layout.spawners]
        self.items = ItemRegistry()
        self.robots = RobotManager()
        self.work_queue = WorkQueue(event_bus)

        self.elapsed: float = 0.0
        self._food_spawn_accum: float = 0.0

        event_bus.subscribe("WORK_FINISHED", self._on_work_finished)

    @classmethod
    def load(cls, layout_text: str, rng: random.Random, event_bus: EventBus) -> "Colony":
        """
        Build a colony from an ASCII layout: publish work for every initial
        construction site, put robots on the first sites, and let some food
        fall into place before the first frame.
        """
        colony = cls(parse_layout(layout_text), rng, event_bus)

        sites = colony.tiles.construction_sites()
        for site in sites:
            colony.work_queue.publish(site)

        for x, y in sites[:ROBOT_SPAWN_LIMIT]:
            colony.robots.spawn(colony.tiles.tile_center(x, y))

        for _ in range(PREWARM_ROUNDS):
            for _ in range(PREWARM_STEPS):
                colony.items.update(colony.tiles, PREWARM_DELTA)
            colony.spawn_food()

        logger.info(
            "Colony loaded: %dx%d tiles, %d construction sites, %d robots, %d items",
            colony.tiles.width, colony.tiles.height, len(sites), len(colony.robots), len(colony.items),
        )
        return colony

    # ------------------------------------------------------------------
    # Input entry point
    # ------------------------------------------------------------------

    def start_construction(self, tile_pos: tuple[int, int], tile_class: int) -> Optional[int]:
        """
        Flip a tile into construction and publish matching work.
        Returns the work entry id, or None if the tile is off the map or
        already under construction.
        """
        x, y = tile_pos
        tile = self.tiles.get(x, y)
        if tile is None or tile.is_under_construction():
            return None

        tile.start_construction(tile_class)
        entry_id = self.work_queue.publish((x, y))
        logger.info("Construction of class %d started at (%d, %d)", tile_class, x, y)
        return entry_id

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def update(self, delta: float) -> None:
        self.elapsed += delta

        self.items.update(self.tiles, delta)

        self._food_spawn_accum += delta
        while self._food_spawn_accum > FOOD_SPAWN_INTERVAL:
            self._food_spawn_accum -= FOOD_SPAWN_INTERVAL
            self.spawn_food()

        self.robots.assign_work(self.work_queue)

        ctx = StepContext(
            delta=delta,
            items=self.items,
            tiles=self.tiles,
            work_queue=self.work_queue,
            rng=self._rng,
        )
        self.robots.update(ctx)

    def close(self) -> None:
        """Stop listening on the event bus. The colony must not be updated afterwards."""
        self._bus.unsubscribe("WORK_FINISHED", self._on_work_finished)

    def _on_work_finished(self, data: dict) -> None:
        # other colonies on a shared bus finish their own entries
        if data["queue"] is not self.work_queue:
            return
        x, y = data["entry"].target_tile
        tile_class = self.tiles.get_mut(x, y).tile_class
        logger.info("Construction of class %d completed at (%d, %d)", tile_class, x, y)
        self._bus.publish("CONSTRUCTION_COMPLETE", {"tile": (x, y), "tile_class": tile_class})

    def spawn_food(self) -> int:
        item = self.food_spawners[0].spawn(self._rng)
        item_id = self.items.add(item)
        self._bus.publish("ITEM_SPAWNED", {"item_id": item_id, "item": item})
        return item_id
