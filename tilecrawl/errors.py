class TilecrawlError(Exception):
    """Base error for tilecrawl exceptions."""


class OutOfBoundsError(TilecrawlError, IndexError):
    """Raised when a cell outside a grid or console is addressed."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinates out of bounds: ({x}, {y}) for grid {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class ConfigError(TilecrawlError, ValueError):
    """Raised when a configuration file or value is invalid."""
