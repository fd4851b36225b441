from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from tilecrawl.errors import OutOfBoundsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    """A single map cell.

    ``blocked`` and ``block_sight`` are independent: a tile can stop movement
    without stopping sight (a barred window) and the other way round.
    """
    blocked: bool
    block_sight: bool

    @classmethod
    def empty(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)


class Grid:
    """Fixed-size tile grid backed by one flat list indexed ``x * height + y``."""

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int, fill: Tile | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        tile = fill if fill is not None else Tile.wall()
        self._tiles: List[Tile] = [tile] * (self._w * self._h)

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile) -> "Grid":
        return cls(width, height, fill=tile)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._w and 0 <= y < self._h

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self._w, self._h)
        return x * self._h + y

    def tile_at(self, x: int, y: int) -> Tile:
        return self._tiles[self._index(x, y)]

    def carve(self, x: int, y: int) -> None:
        """Clear a cell to an empty tile. Only map generation calls this."""
        self._tiles[self._index(x, y)] = Tile.empty()

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        for x in range(self._w):
            base = x * self._h
            for y in range(self._h):
                yield x, y, self._tiles[base + y]

    def to_lines(self) -> List[str]:
        """ASCII dump, one string per row: '#' blocked, '.' passable."""
        return [
            "".join("#" if self.tile_at(x, y).blocked else "." for x in range(self._w))
            for y in range(self._h)
        ]


class World:
    """Owns the map grid; the single answer to "can something stand here"."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def in_bounds(self, x: int, y: int) -> bool:
        return self._grid.in_bounds(x, y)

    def tile_at(self, x: int, y: int) -> Tile:
        return self._grid.tile_at(x, y)

    def is_blocked(self, x: int, y: int) -> bool:
        # off-map counts as solid rock
        if not self.in_bounds(x, y):
            return True
        return self._grid.tile_at(x, y).blocked
