# main.py — entry point: windowed game or headless simulation run

import argparse
import logging
import random
from pathlib import Path
from typing import Optional

from core.event_bus import EventBus, bus
from settings import DEFAULT_LAYOUT
from world.colony import Colony

logger = logging.getLogger(__name__)


def run_headless(layout_text: str, seed: int, ticks: int, delta: float,
                 event_bus: Optional[EventBus] = None) -> Colony:
    """Run a colony for a fixed number of ticks on its own bus unless one is given."""
    event_bus = event_bus or EventBus()
    colony = Colony.load(layout_text, random.Random(seed), event_bus)
    for _ in range(ticks):
        colony.update(delta)

    logger.info(
        "headless_done t=%.1f items=%d robots_busy=%d/%d work_open=%d built=%d",
        colony.elapsed, len(colony.items), colony.robots.busy_count(), len(colony.robots),
        len(colony.work_queue), event_bus.count("CONSTRUCTION_COMPLETE"),
    )
    colony.close()
    return colony


def main() -> None:
    parser = argparse.ArgumentParser(description="Robot colony simulation")
    parser.add_argument("--headless", action="store_true", help="run simulation without graphics")
    parser.add_argument("--ticks", type=int, default=600, help="headless ticks to run")
    parser.add_argument("--delta", type=float, default=0.1, help="headless timestep in seconds")
    parser.add_argument("--seed", type=int, default=7, help="random seed for spawns and wandering")
    parser.add_argument("--layout", type=Path, help="ASCII layout file (defaults to the built-in map)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    layout_text = args.layout.read_text(encoding="utf-8") if args.layout else DEFAULT_LAYOUT

    if args.headless:
        run_headless(layout_text, args.seed, args.ticks, args.delta)
        return

    from core.game import Game
    Game(layout_text, args.seed, bus).run()


if __name__ == "__main__":
    main()
