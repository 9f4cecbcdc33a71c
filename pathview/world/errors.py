from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathview.world.point import Point


class PathviewError(Exception):
    """Base class for every error raised by the grid model."""


class InvalidMapError(PathviewError, ValueError):
    """Raised when a Map is built with bad dimensions or tile data."""


class MapIndexError(PathviewError, IndexError):
    """Raised when a Scene is asked to show a map it does not hold."""


class NoActiveMapError(MapIndexError):
    """Raised when a Scene is used before any map has been shown."""


class UnreachableTargetError(PathviewError):
    """
    Raised by Scene.get_path when the target has no route from the origin.
    """
    def __init__(self, origin: "Point", target: "Point"):
        self.origin = origin
        self.target = target
        super().__init__(
            f"target ({target.x}, {target.y}) is not reachable "
            f"from origin ({origin.x}, {origin.y})"
        )
