"""Composes the map and its entities into character-cell frames."""
from typing import Iterable

from tilecrawl.config import Color, GameConfig
from tilecrawl.render.console import Console, blit
from tilecrawl.state.entities import Entity
from tilecrawl.state.world import Tile, World


class AsciiRenderer:
    def __init__(self, cfg: GameConfig) -> None:
        self.cfg = cfg
        self.wall_color = cfg.color_dark_wall
        self.ground_color = cfg.color_dark_ground

    def background_for(self, tile: Tile) -> Color:
        return self.wall_color if tile.block_sight else self.ground_color

    def draw_entities(self, con: Console, entities: Iterable[Entity]) -> None:
        default = con.default_foreground
        try:
            for ent in entities:
                if not con.in_bounds(ent.x, ent.y):
                    continue
                con.set_default_foreground(ent.color)
                con.put_char(ent.x, ent.y, ent.glyph)
        finally:
            con.set_default_foreground(default)

    def draw_map(self, con: Console, world: World) -> None:
        for x, y, tile in world.grid.cells():
            con.set_char_background(x, y, self.background_for(tile))

    def render_all(self, con: Console, root: Console, world: World, entities: Iterable[Entity]) -> None:
        """Draw entities and tile backgrounds into ``con``, then copy it onto ``root``.

        Glyphs and backgrounds are separate channels, so drawing the
        entities first does not get them painted over.
        """
        self.draw_entities(con, entities)
        self.draw_map(con, world)
        blit(con, (0, 0), (world.width, world.height), root, (0, 0), 1.0, 1.0)
