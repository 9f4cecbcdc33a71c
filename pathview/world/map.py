from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from pathview.world.errors import InvalidMapError
from pathview.world.point import Point


class TileType(IntEnum):
    WALKABLE = 0
    WALL = 1


# Enumeration order is top, left, bottom, right. BFS tie-breaks depend on it.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


@dataclass(frozen=True)
class Map:
    width: int
    height: int
    tiles: Tuple[int, ...]

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidMapError(
                f"map dimensions must be positive, got {self.width}x{self.height}"
            )
        tiles = tuple(self.tiles)
        for i, code in enumerate(tiles):
            if not isinstance(code, int) or isinstance(code, bool):
                raise InvalidMapError(f"tile {i} has non-integer code {code!r}")
        tiles = tuple(int(code) for code in tiles)
        if len(tiles) != self.width * self.height:
            raise InvalidMapError(
                f"expected {self.width * self.height} tiles for a "
                f"{self.width}x{self.height} map, got {len(tiles)}"
            )
        object.__setattr__(self, "tiles", tiles)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Map":
        """Build a map from a list of equal-length rows, top row first."""
        if not rows or not rows[0]:
            raise InvalidMapError("map rows must not be empty")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidMapError(
                    f"row {y} has {len(row)} tiles, expected {width}"
                )
        tiles = tuple(code for row in rows for code in row)
        return cls(width=width, height=len(rows), tiles=tiles)

    def clamp(self, point: Point) -> Point:
        return point.clamp(self.width, self.height)

    def contains(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def get_tile(self, point: Point) -> int:
        """
        Tile code at `point`. Out-of-range points are clamped to the
        nearest edge cell instead of raising.
        """
        point = self.clamp(point)
        return self.tiles[point.x + point.y * self.width]

    def is_walkable(self, point: Point) -> bool:
        if not self.contains(point):
            return False
        return self.get_tile(point) == TileType.WALKABLE

    def get_neighbors(self, point: Point) -> List[Point]:
        point = self.clamp(point)
        neighbors: List[Point] = []
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = Point(point.x + dx, point.y + dy)
            if self.is_walkable(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def count(self, tile_code: int) -> int:
        return self.tiles.count(tile_code)
