"""Pygame window that shows a root Console and reads the keyboard."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

import pygame

from tilecrawl.config import Color, GameConfig
from tilecrawl.game_input import NO_KEY, KeyEvent, key_event_from_pygame
from tilecrawl.render.console import Console

logger = logging.getLogger(__name__)


class Window:
    def __init__(self, cfg: GameConfig) -> None:
        pygame.init()
        try:
            self._open(cfg)
        except Exception:
            pygame.quit()
            raise

    def _open(self, cfg: GameConfig) -> None:
        self.cfg = cfg
        self.tile = cfg.tile_size
        self.width = cfg.screen_width * self.tile
        self.height = cfg.screen_height * self.tile
        self.surface_flags = 0
        # render surface at native resolution; display may be larger in fullscreen
        self.surface = pygame.Surface((self.width, self.height))
        self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        pygame.display.set_caption(cfg.title)
        self.font = pygame.font.SysFont(cfg.font_name, self.tile)
        self.root = Console(cfg.screen_width, cfg.screen_height)
        self.clock = pygame.time.Clock()
        self.fps = 0
        self.fullscreen = False
        self.closed = False
        self.glyph_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def set_target_fps(self, fps: int) -> None:
        """Advisory cap applied when frames are presented. 0 means uncapped."""
        self.fps = fps

    def is_closed(self) -> bool:
        return self.closed

    def is_fullscreen(self) -> bool:
        return self.fullscreen

    def set_fullscreen(self, fullscreen: bool) -> None:
        if fullscreen == self.fullscreen:
            return
        if fullscreen:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
        self.fullscreen = fullscreen
        logger.info("Fullscreen %s", "on" if fullscreen else "off")

    def _glyph(self, glyph: str, color: Color) -> pygame.Surface:
        key = (glyph, color)
        surf = self.glyph_cache.get(key)
        if surf is None:
            surf = self.font.render(glyph, True, color)
            self.glyph_cache[key] = surf
        return surf

    def present(self) -> None:
        root = self.root
        t = self.tile
        for x in range(root.width):
            for y in range(root.height):
                glyph, fg, bg = root.cell(x, y)
                cell = pygame.Rect(x * t, y * t, t, t)
                self.surface.fill(bg, cell)
                if glyph != " ":
                    text = self._glyph(glyph, fg)
                    # center the glyph in its cell
                    self.surface.blit(text, text.get_rect(center=cell.center))

        # letterbox: keep the grid centered and unscaled when the display is larger
        dw, dh = self.display.get_size()
        self.display.fill((0, 0, 0))
        self.display.blit(self.surface, (max(0, (dw - self.width) // 2), max(0, (dh - self.height) // 2)))
        pygame.display.flip()
        if self.fps:
            self.clock.tick(self.fps)

    def wait_for_key(self) -> KeyEvent:
        """Block until a key is pressed or the window is closed."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                logger.debug("Window close requested")
                self.closed = True
                return NO_KEY
            if event.type == pygame.KEYDOWN:
                return key_event_from_pygame(event)

    def teardown(self) -> None:
        pygame.quit()
