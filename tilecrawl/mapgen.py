from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from tilecrawl.config import GameConfig
from tilecrawl.errors import ConfigError
from tilecrawl.state.world import Grid, Tile, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rect:
    """A rectangle on the map, used to characterise a room."""
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)


HORIZONTAL = "h"
VERTICAL = "v"


@dataclass(frozen=True)
class Tunnel:
    """A straight corridor from ``a`` to ``b`` along one axis.

    For a horizontal tunnel ``a``/``b`` are x coordinates and ``fixed`` is the
    row; for a vertical one they are y coordinates and ``fixed`` is the column.
    """
    orientation: str
    a: int
    b: int
    fixed: int


@dataclass(frozen=True)
class Layout:
    rooms: Tuple[Rect, ...] = ()
    tunnels: Tuple[Tunnel, ...] = ()
    # entity start cells, player first
    spawns: Tuple[Tuple[int, int], ...] = ()

    def extent(self) -> Tuple[int, int]:
        """Smallest (width, height) that holds every room, tunnel and spawn."""
        w = h = 0
        for room in self.rooms:
            w = max(w, room.x2)
            h = max(h, room.y2)
        for t in self.tunnels:
            if t.orientation == HORIZONTAL:
                w = max(w, t.a + 1, t.b + 1)
                h = max(h, t.fixed + 1)
            else:
                w = max(w, t.fixed + 1)
                h = max(h, t.a + 1, t.b + 1)
        for x, y in self.spawns:
            w = max(w, x + 1)
            h = max(h, y + 1)
        return w, h


DEMO_LAYOUT = Layout(
    rooms=(Rect.from_size(20, 15, 10, 15), Rect.from_size(50, 15, 10, 15)),
    tunnels=(Tunnel(HORIZONTAL, 25, 55, 23),),
    spawns=((25, 23), (55, 23)),
)


def carve_room(grid: Grid, room: Rect) -> None:
    # interior only: the room keeps a one-tile wall on every side
    for x in range(room.x1 + 1, room.x2):
        for y in range(room.y1 + 1, room.y2):
            grid.carve(x, y)


def carve_h_tunnel(grid: Grid, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.carve(x, y)


def carve_v_tunnel(grid: Grid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.carve(x, y)


def carve_tunnel(grid: Grid, tunnel: Tunnel) -> None:
    if tunnel.orientation == HORIZONTAL:
        carve_h_tunnel(grid, tunnel.a, tunnel.b, tunnel.fixed)
    elif tunnel.orientation == VERTICAL:
        carve_v_tunnel(grid, tunnel.a, tunnel.b, tunnel.fixed)
    else:
        raise ValueError(f"Unknown tunnel orientation: {tunnel.orientation!r}")


def make_map(width: int, height: int, layout: Layout = DEMO_LAYOUT) -> Grid:
    """Start from solid rock and carve the layout's rooms, then its tunnels.

    No connectivity check is made; an unreachable room stays unreachable.
    """
    grid = Grid.filled(width, height, Tile.wall())
    for room in layout.rooms:
        logger.debug("Carving room %s", room)
        carve_room(grid, room)
    for tunnel in layout.tunnels:
        logger.debug("Carving tunnel %s", tunnel)
        carve_tunnel(grid, tunnel)
    return grid


def check_fits(width: int, height: int, layout: Layout) -> None:
    need_w, need_h = layout.extent()
    if need_w > width or need_h > height:
        raise ConfigError(
            f"map {width}x{height} is too small for the layout, which needs {need_w}x{need_h}"
        )


def make_world(cfg: GameConfig, layout: Layout = DEMO_LAYOUT) -> World:
    check_fits(cfg.map_width, cfg.map_height, layout)
    grid = make_map(cfg.map_width, cfg.map_height, layout)
    logger.info(
        "Generated %dx%d map with %d rooms and %d tunnels",
        grid.width, grid.height, len(layout.rooms), len(layout.tunnels),
    )
    return World(grid)
