# tilecrawl/state/entities.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from tilecrawl.config import Color, WHITE
from tilecrawl.state.world import World

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]


@dataclass
class Entity:
    """Something drawn on a map cell: the player, a marker, a monster.

    Entities only collide with tiles. Two entities may share a cell.
    """
    x: int
    y: int
    glyph: str = "?"
    color: Color = WHITE
    name: str = ""

    @property
    def pos(self) -> Pos:
        return (self.x, self.y)

    def move_by(self, world: World, dx: int, dy: int) -> bool:
        """Step by (dx, dy) unless the destination is blocked or off the map.

        A rejected move is not an error: the position is left as it was and
        False is returned.
        """
        x = self.x + dx
        y = self.y + dy
        if world.is_blocked(x, y):
            logger.debug("%s blocked at (%d, %d)", self.name or self.glyph, x, y)
            return False
        self.x = x
        self.y = y
        return True
