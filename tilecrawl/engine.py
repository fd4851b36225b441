from __future__ import annotations

"""
Engine: owns the frame loop.

Each frame clears the map console, renders, presents, then blocks for
exactly one key and applies it. Nothing else suspends the loop, so one input
event is handled between two presented frames.
"""

import logging
from enum import Enum
from typing import Optional, Protocol

from tilecrawl import config
from tilecrawl.game import Game
from tilecrawl.game_input import KeyEvent, format_key
from tilecrawl.render.ascii import AsciiRenderer
from tilecrawl.render.console import Console
from tilecrawl.systems.actions import Exit, Move, ToggleFullscreen, resolve_key

logger = logging.getLogger(__name__)


class LoopState(Enum):
    RUNNING = "running"
    EXITING = "exiting"


class WindowLike(Protocol):
    """What the loop needs from the window it draws into."""

    root: Console

    def set_target_fps(self, fps: int) -> None: ...
    def is_closed(self) -> bool: ...
    def present(self) -> None: ...
    def wait_for_key(self) -> KeyEvent: ...
    def is_fullscreen(self) -> bool: ...
    def set_fullscreen(self, fullscreen: bool) -> None: ...


class Engine:
    def __init__(self, cfg: config.GameConfig, window: WindowLike, game: Optional[Game] = None) -> None:
        self.cfg = cfg
        self.window = window
        self.game = game or Game.new(cfg)
        self.renderer = AsciiRenderer(cfg)
        self.con = Console(cfg.map_width, cfg.map_height)
        self.state = LoopState.RUNNING
        self.frames = 0

    def step(self) -> LoopState:
        """Run one frame: clear, draw, present, wait for a key, act on it."""
        if self.window.is_closed():
            self.state = LoopState.EXITING
            return self.state

        self.con.clear()
        self.renderer.render_all(self.con, self.window.root, self.game.world, self.game.entities)
        self.window.present()
        self.frames += 1

        key = self.window.wait_for_key()
        self.handle_key(key)
        return self.state

    def handle_key(self, key: KeyEvent) -> None:
        action = resolve_key(key)
        logger.debug("Key %s -> %s", format_key(key), action)
        if isinstance(action, Move):
            self.game.player.move_by(self.game.world, action.dx, action.dy)
        elif isinstance(action, ToggleFullscreen):
            self.window.set_fullscreen(not self.window.is_fullscreen())
        elif isinstance(action, Exit):
            self.state = LoopState.EXITING

    def run(self) -> int:
        """Step until the loop exits; returns the number of frames presented."""
        self.window.set_target_fps(self.cfg.limit_fps)
        while self.state is LoopState.RUNNING:
            self.step()
        logger.info("Loop finished after %d frames", self.frames)
        return self.frames
