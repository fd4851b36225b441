from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

import pygame


class KeyCode(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"
    NONE = "none"  # no key: the wait ended because the window closed


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    alt: bool = False
    char: str = ""


NO_KEY = KeyEvent(KeyCode.NONE)

PYGAME_KEYCODES: Dict[int, KeyCode] = {
    pygame.K_UP: KeyCode.UP,
    pygame.K_DOWN: KeyCode.DOWN,
    pygame.K_LEFT: KeyCode.LEFT,
    pygame.K_RIGHT: KeyCode.RIGHT,
    pygame.K_RETURN: KeyCode.ENTER,
    pygame.K_KP_ENTER: KeyCode.ENTER,
    pygame.K_ESCAPE: KeyCode.ESCAPE,
}

# Movement bindings (key -> (dx, dy))
DEFAULT_MOVE_BINDINGS: Dict[KeyCode, Tuple[int, int]] = {
    KeyCode.UP: (0, -1),
    KeyCode.DOWN: (0, 1),
    KeyCode.LEFT: (-1, 0),
    KeyCode.RIGHT: (1, 0),
}


def key_event_from_pygame(event) -> KeyEvent:
    """Translate a pygame KEYDOWN event into a KeyEvent."""
    code = PYGAME_KEYCODES.get(event.key, KeyCode.OTHER)
    alt = bool(getattr(event, "mod", 0) & pygame.KMOD_ALT)
    return KeyEvent(code, alt=alt, char=getattr(event, "unicode", "") or "")


def format_key(key: KeyEvent) -> str:
    parts = []
    if key.alt:
        parts.append("Alt")
    parts.append(key.char if key.code is KeyCode.OTHER and key.char else key.code.value)
    return "+".join(parts)
