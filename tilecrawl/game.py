from __future__ import annotations

from typing import List, Optional

from tilecrawl.config import GameConfig, WHITE, YELLOW
from tilecrawl.mapgen import DEMO_LAYOUT, make_world
from tilecrawl.state.entities import Entity
from tilecrawl.state.world import World


class Game:
    """A play session: the world plus every entity on it. Entity 0 is the player."""

    def __init__(self, world: World, entities: List[Entity]) -> None:
        if not entities:
            raise ValueError("a game needs at least the player entity")
        self.world = world
        self.entities = entities

    @classmethod
    def new(cls, cfg: Optional[GameConfig] = None) -> "Game":
        cfg = cfg or GameConfig()
        world = make_world(cfg, DEMO_LAYOUT)
        (px, py), (mx, my) = DEMO_LAYOUT.spawns
        entities = [
            Entity(px, py, "@", WHITE, name="player"),
            Entity(mx, my, "X", YELLOW, name="marker"),
        ]
        return cls(world, entities)

    @property
    def player(self) -> Entity:
        return self.entities[0]
