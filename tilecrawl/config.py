from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from tilecrawl.errors import ConfigError

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class GameConfig:
    # character cells
    screen_width: int = 80
    screen_height: int = 50
    map_width: int = 80
    map_height: int = 45
    limit_fps: int = 20
    color_dark_wall: Color = (0, 0, 100)
    color_dark_ground: Color = (50, 50, 150)
    # window presentation
    title: str = "Roguelike"
    tile_size: int = 16  # pixels per character cell
    font_name: str = "consolas"

    def validate(self) -> "GameConfig":
        for name in ("screen_width", "screen_height", "map_width", "map_height", "tile_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.limit_fps < 0:
            raise ConfigError(f"limit_fps must not be negative, got {self.limit_fps}")
        if self.map_width > self.screen_width or self.map_height > self.screen_height:
            raise ConfigError(
                f"map {self.map_width}x{self.map_height} does not fit the screen "
                f"{self.screen_width}x{self.screen_height}"
            )
        # the generator always carves the demo layout
        from tilecrawl.mapgen import DEMO_LAYOUT, check_fits

        check_fits(self.map_width, self.map_height, DEMO_LAYOUT)
        return self


_COLOR_FIELDS = ("color_dark_wall", "color_dark_ground")


def _to_color(name: str, value: Any) -> Color:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigError(f"{name} must be a list of three integers, got {value!r}")
    out = []
    for c in value:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ConfigError(f"{name} components must be integers in 0..255, got {value!r}")
        out.append(c)
    return (out[0], out[1], out[2])


def config_from_mapping(data: Dict[str, Any], base: Optional[GameConfig] = None) -> GameConfig:
    """Apply a mapping of overrides on top of ``base`` (defaults if omitted)."""
    base = base or GameConfig()
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    overrides: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _COLOR_FIELDS:
            overrides[key] = _to_color(key, value)
        elif key in ("title", "font_name"):
            overrides[key] = str(value)
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            overrides[key] = value
    return replace(base, **overrides).validate()


def load_config(path: Optional[str | Path] = None) -> GameConfig:
    """Load a GameConfig, reading optional overrides from a YAML file."""
    if path is None:
        logger.debug("No config file given; using defaults")
        return GameConfig().validate()

    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: invalid YAML") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    cfg = config_from_mapping(raw)
    logger.info("Loaded config overrides from %s: %s", path, sorted(raw))
    return cfg
