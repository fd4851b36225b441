"""What a key press means: movement, fullscreen toggling or leaving."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Union

from tilecrawl.game_input import DEFAULT_MOVE_BINDINGS, KeyCode, KeyEvent


@dataclass(frozen=True)
class Move:
    dx: int
    dy: int


@dataclass(frozen=True)
class ToggleFullscreen:
    pass


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class NoAction:
    pass


Action = Union[Move, ToggleFullscreen, Exit, NoAction]


def resolve_key(
    key: KeyEvent,
    move_bindings: Dict[KeyCode, Tuple[int, int]] = DEFAULT_MOVE_BINDINGS,
) -> Action:
    # arrows move whatever modifiers are held; Enter only counts with Alt
    delta = move_bindings.get(key.code)
    if delta is not None:
        return Move(*delta)
    if key.code is KeyCode.ENTER and key.alt:
        return ToggleFullscreen()
    if key.code is KeyCode.ESCAPE:
        return Exit()
    return NoAction()
