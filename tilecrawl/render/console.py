"""Offscreen character-cell buffers.

A Console holds a glyph, a foreground colour and a background colour per
cell. Glyph/foreground and background are independent channels: putting a
glyph leaves the background alone and setting a background leaves the glyph
alone.
"""
from __future__ import annotations

from typing import List, Tuple

from tilecrawl.config import BLACK, WHITE, Color
from tilecrawl.errors import OutOfBoundsError


def _lerp(c1: Color, c2: Color, t: float) -> Color:
    return (
        int(c1[0] + (c2[0] - c1[0]) * t),
        int(c1[1] + (c2[1] - c1[1]) * t),
        int(c1[2] + (c2[2] - c1[2]) * t),
    )


class Console:
    def __init__(
        self,
        width: int,
        height: int,
        default_foreground: Color = WHITE,
        default_background: Color = BLACK,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Console dimensions must be positive")
        self.width = width
        self.height = height
        self.default_foreground = default_foreground
        self.default_background = default_background
        size = width * height
        self._chars: List[str] = [" "] * size
        self._fg: List[Color] = [default_foreground] * size
        self._bg: List[Color] = [default_background] * size

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return x * self.height + y

    def clear(self) -> None:
        size = self.width * self.height
        self._chars = [" "] * size
        self._fg = [self.default_foreground] * size
        self._bg = [self.default_background] * size

    def set_default_foreground(self, color: Color) -> None:
        self.default_foreground = color

    def put_char(self, x: int, y: int, glyph: str) -> None:
        """Draw ``glyph`` in the default foreground colour; background untouched."""
        i = self._index(x, y)
        self._chars[i] = glyph
        self._fg[i] = self.default_foreground

    def set_char_background(self, x: int, y: int, color: Color) -> None:
        self._bg[self._index(x, y)] = color

    def get_char(self, x: int, y: int) -> str:
        return self._chars[self._index(x, y)]

    def get_fg(self, x: int, y: int) -> Color:
        return self._fg[self._index(x, y)]

    def get_bg(self, x: int, y: int) -> Color:
        return self._bg[self._index(x, y)]

    def cell(self, x: int, y: int) -> Tuple[str, Color, Color]:
        i = self._index(x, y)
        return self._chars[i], self._fg[i], self._bg[i]


def blit(
    src: Console,
    src_pos: Tuple[int, int],
    size: Tuple[int, int],
    dest: Console,
    dest_pos: Tuple[int, int],
    fg_alpha: float = 1.0,
    bg_alpha: float = 1.0,
) -> None:
    """Copy a ``size`` region of ``src`` at ``src_pos`` onto ``dest`` at ``dest_pos``.

    Cells falling outside either console are skipped. With both alphas at 1.0
    this is a straight copy; lower values blend over what ``dest`` holds.
    """
    sx0, sy0 = src_pos
    dx0, dy0 = dest_pos
    w, h = size
    for ox in range(w):
        for oy in range(h):
            sx, sy = sx0 + ox, sy0 + oy
            dx, dy = dx0 + ox, dy0 + oy
            if not src.in_bounds(sx, sy) or not dest.in_bounds(dx, dy):
                continue
            si = src._index(sx, sy)
            di = dest._index(dx, dy)
            if bg_alpha >= 1.0:
                dest._bg[di] = src._bg[si]
            elif bg_alpha > 0.0:
                dest._bg[di] = _lerp(dest._bg[di], src._bg[si], bg_alpha)
            if fg_alpha > 0.0:
                dest._chars[di] = src._chars[si]
                if fg_alpha >= 1.0:
                    dest._fg[di] = src._fg[si]
                else:
                    dest._fg[di] = _lerp(dest._bg[di], src._fg[si], fg_alpha)
