# world/layout.py — builds a tile map and spawner regions from an ASCII layout

from __future__ import annotations
from dataclasses import dataclass, field

from settings import LAYOUT_CHARS, SPAWNER_CHAR
from world.tilemap import TileMap


@dataclass
class Layout:
    tiles: TileMap
    spawners: list[tuple[float, float, float, float]] = field(default_factory=list)


def parse_layout(text: str) -> Layout:
    """
    Rows are given top to bottom; the last row becomes world row 0.
    Every SPAWNER_CHAR cell is part of one food spawner whose region is the
    bounding box of those cells, in world units.
    """
    rows = [line.rstrip("\n") for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("layout is empty")

    width = len(rows[0])
    height = len(rows)
    tiles = TileMap(width, height)
    spawn_cells: list[tuple[int, int]] = []

    for row_index, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(f"layout row {row_index} is {len(line)} wide, expected {width}: {line!r}")
        y = height - row_index - 1
        for x, char in enumerate(line):
            if char not in LAYOUT_CHARS:
                raise ValueError(f"layout row {row_index} has unknown tile {char!r}: {line!r}")
            tile_class, construction = LAYOUT_CHARS[char]
            tile = tiles.get_mut(x, y)
            tile.set_class(tile_class)
            if construction is not None:
                tile.start_construction(construction)
            if char == SPAWNER_CHAR:
                spawn_cells.append((x, y))

    spawners = []
    if spawn_cells:
        xs = [x for x, _ in spawn_cells]
        ys = [y for _, y in spawn_cells]
        left, bottom = min(xs), min(ys)
        spawners.append((float(left), float(bottom),
                         float(max(xs) + 1 - left), float(max(ys) + 1 - bottom)))

    return Layout(tiles=tiles, spawners=spawners)
