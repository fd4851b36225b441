import os

import pytest

# Headless pygame: no real window or audio device during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from tilecrawl.config import GameConfig
from tilecrawl.mapgen import make_world


@pytest.fixture
def cfg() -> GameConfig:
    return GameConfig()


@pytest.fixture
def world(cfg):
    return make_world(cfg)
