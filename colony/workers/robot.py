# workers/robot.py — autonomous builder robot with a stack-based state machine

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import pygame

from core.errors import InvariantViolation
from items.item import ItemState
from world.tilemap import TileMap
from settings import (
    CARRY_OFFSET, PICKUP_OFFSET, PICKUP_RADIUS, RETRY_SLEEP,
    ROBOT_SPEED, WANDER_RADIUS, WANDER_SLEEP, WANDER_SPEED,
)

if TYPE_CHECKING:
    from items.item_registry import ItemRegistry
    from production.work_queue import WorkQueue


# ----------------------------------------------------------------------
# States
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Waiting:
    pass


@dataclass(frozen=True)
class Building:
    target_tile: tuple[int, int]


@dataclass(frozen=True)
class Moving:
    target: tuple[float, float]
    speed_multiplier: float


@dataclass(frozen=True)
class Sleep:
    remaining: float


@dataclass(frozen=True)
class PickUp:
    item_id: int


RobotState = Waiting | Building | Moving | Sleep | PickUp


@dataclass
class StepContext:
    """Everything one robot step may read or mutate, passed in explicitly."""
    delta: float
    items: ItemRegistry
    tiles: TileMap
    work_queue: WorkQueue
    rng: random.Random


class Robot:
    """
    Autonomous builder.

    A state that needs a sub-task (moving somewhere, waiting) pushes it and
    is resumed unmodified when the sub-task pops. Exactly one transition runs
    per tick.

    A robot owns at most one item (inventory) and at most one work entry
    (assigned_work). A carried item's position is rewritten from the robot's
    position at the start of every step.
    """

    def __init__(self, robot_id: int, position) -> None:
        self.robot_id = robot_id
        self.position = pygame.Vector2(position)

        self.assigned_work: Optional[int] = None
        self.inventory: Optional[int] = None

        self.state: RobotState = Waiting()
        self.state_stack: list[RobotState] = []

    # ------------------------------------------------------------------
    # State stack
    # ------------------------------------------------------------------

    def push_state(self, state: RobotState) -> None:
        """Suspend the current state and run `state` until it pops."""
        self.state_stack.append(self.state)
        self.state = state

    def pop_state(self) -> None:
        if not self.state_stack:
            raise InvariantViolation(f"robot {self.robot_id} popped {self.state!r} with nothing to resume")
        self.state = self.state_stack.pop()

    def reset_state(self, state: RobotState) -> None:
        self.state_stack.clear()
        self.state = state

    @property
    def is_waiting(self) -> bool:
        return isinstance(self.state, Waiting)

    @property
    def tile_position(self) -> tuple[int, int]:
        return TileMap.cell_of(self.position)

    # ------------------------------------------------------------------
    # Main update
    # ------------------------------------------------------------------

    def update(self, ctx: StepContext) -> None:
        if self.inventory is not None:
            carried = ctx.items.get_mut(self.inventory)
            carried.position = self.position + pygame.Vector2(CARRY_OFFSET)

        {
            Waiting:  self._update_waiting,
            Building: self._update_building,
            Moving:   self._update_moving,
            Sleep:    self._update_sleep,
            PickUp:   self._update_pick_up,
        }[type(self.state)](self.state, ctx)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _update_waiting(self, state: Waiting, ctx: StepContext) -> None:
        if self.assigned_work is not None:
            entry = ctx.work_queue.get(self.assigned_work)
            self.state = Building(entry.target_tile)
            return

        # Nothing to do: amble around the current tile, then rest
        tx, ty = self.tile_position
        wander = (
            tx + 0.5 + ctx.rng.uniform(-WANDER_RADIUS, WANDER_RADIUS),
            ty + 0.5 + ctx.rng.uniform(-WANDER_RADIUS, WANDER_RADIUS),
        )
        self.push_state(Sleep(WANDER_SLEEP))
        self.push_state(Moving(wander, WANDER_SPEED))

    def _update_building(self, state: Building, ctx: StepContext) -> None:
        tile = ctx.tiles.get_mut(*state.target_tile)

        if tile.needs_resources():
            if self.inventory is not None:
                if self.tile_position == state.target_tile:
                    ctx.items.remove(self.inventory)
                    self.inventory = None
                    tile.apply_resource()
                else:
                    center = ctx.tiles.tile_center(*state.target_tile)
                    self.push_state(Moving((center.x, center.y), 1.0))
                return

            item_id = ctx.items.claim_resource(self.position)
            if item_id is not None:
                self.push_state(PickUp(item_id))
            else:
                self.push_state(Sleep(RETRY_SLEEP))
            return

        if tile.apply_build_time(ctx.delta):
            if self.assigned_work is None:
                raise InvariantViolation(f"robot {self.robot_id} built {state.target_tile} without an assignment")
            ctx.work_queue.finish(self.assigned_work, self.robot_id)
            self.assigned_work = None
            self.reset_state(Waiting())

    def _update_moving(self, state: Moving, ctx: StepContext) -> None:
        target = pygame.Vector2(state.target)
        remaining = target - self.position
        step = ctx.delta * ROBOT_SPEED * state.speed_multiplier

        if step >= remaining.length():
            self.position = target
            self.pop_state()
        else:
            self.position += remaining.normalize() * step

    def _update_sleep(self, state: Sleep, ctx: StepContext) -> None:
        remaining = state.remaining - ctx.delta
        if remaining <= 0:
            self.pop_state()
        else:
            self.state = Sleep(remaining)

    def _update_pick_up(self, state: PickUp, ctx: StepContext) -> None:
        item = ctx.items.get_mut(state.item_id)
        grab_point = item.position + pygame.Vector2(PICKUP_OFFSET)

        if self.position.distance_to(grab_point) <= PICKUP_RADIUS:
            self.inventory = state.item_id
            item.state = ItemState.CARRIED
            self.pop_state()
        else:
            self.push_state(Moving((item.position.x, item.position.y), 1.0))

    def __repr__(self) -> str:
        return (f"Robot({self.robot_id} @({self.position.x:.2f}, {self.position.y:.2f}) "
                f"{self.state!r} stack={len(self.state_stack)})")
