from __future__ import annotations

import argparse
import logging
from typing import Optional

from tilecrawl import config
from tilecrawl.errors import ConfigError
from tilecrawl.engine import Engine
from tilecrawl.render.window import Window

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tilecrawl", description="Walk a carved tile map.")
    parser.add_argument("--config", metavar="PATH", help="YAML file with GameConfig overrides")
    parser.add_argument("--verbose", action="store_true", help="log at DEBUG level")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        cfg = config.load_config(args.config)
    except (OSError, ConfigError) as exc:
        logger.error("Could not load config: %s", exc)
        return 2

    logger.info("Starting %s (%dx%d cells)", cfg.title, cfg.screen_width, cfg.screen_height)
    window = None
    try:
        window = Window(cfg)
        Engine(cfg, window).run()
        return 0
    except Exception:
        logger.exception("Unhandled exception in game loop")
        return 1
    finally:
        if window is not None:
            window.teardown()


if __name__ == "__main__":
    raise SystemExit(main())
