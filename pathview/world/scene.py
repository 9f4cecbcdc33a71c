import logging
from collections import deque
from types import MappingProxyType
from typing import Deque, Dict, Iterable, List, Mapping, Optional, Tuple

from pathview.world.errors import MapIndexError, NoActiveMapError, UnreachableTargetError
from pathview.world.map import Map
from pathview.world.point import Point

logger = logging.getLogger("Scene")


class Scene:
    """
    Owns the loaded maps, the origin/target selection and the BFS
    reachability tree for the active map.

    The tree maps every cell reachable from the origin to the cell it was
    first discovered from. It is rebuilt whenever the origin or the active
    map changes, so path queries always see a tree that matches both.
    """
    def __init__(self, maps: Optional[Iterable[Map]] = None):
        self._maps: List[Map] = []
        self._active: Optional[int] = None
        self._origin = Point(0, 0)
        self._target = Point(0, 0)
        self._came_from: Dict[Point, Point] = {}

        for map_ in maps or ():
            self.add_map(map_)
        if self._maps:
            self.show_map(0)

    # ── Read access ───────────────────────────────────────────────────

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def target(self) -> Point:
        return self._target

    @property
    def active_index(self) -> Optional[int]:
        return self._active

    @property
    def map_count(self) -> int:
        return len(self._maps)

    @property
    def maps(self) -> Tuple[Map, ...]:
        return tuple(self._maps)

    @property
    def reachable(self) -> Mapping[Point, Point]:
        """Read-only view of the reachability tree (cell -> predecessor)."""
        return MappingProxyType(self._came_from)

    def map(self) -> Map:
        if self._active is None:
            raise NoActiveMapError("no map has been shown yet")
        return self._maps[self._active]

    # ── Mutation ──────────────────────────────────────────────────────

    def add_map(self, map_: Map) -> int:
        self._maps.append(map_)
        return len(self._maps) - 1

    def show_map(self, index: int) -> None:
        if not 0 <= index < len(self._maps):
            raise MapIndexError(
                f"map index {index} out of range (scene has {len(self._maps)} maps)"
            )
        self._active = index
        active = self._maps[index]
        self._origin = active.clamp(Point(0, 0))
        self._target = active.clamp(Point(0, 0))
        logger.info(f"Showing map {index} ({active.width}x{active.height})")
        self._rebuild_tree()

    def set_origin(self, x: int, y: int) -> None:
        self._origin = self.map().clamp(Point(x, y))
        self._rebuild_tree()

    def set_target(self, x: int, y: int) -> None:
        self._target = self.map().clamp(Point(x, y))

    # ── Queries ───────────────────────────────────────────────────────

    def is_reachable(self, point: Optional[Point] = None) -> bool:
        self.map()
        return (self._target if point is None else point) in self._came_from

    def get_path(self) -> List[Point]:
        """
        Shortest path from origin to target, origin first and target last.

        Raises UnreachableTargetError when the target was never reached by
        the last BFS pass.
        """
        self.map()
        if self._target not in self._came_from:
            raise UnreachableTargetError(self._origin, self._target)

        current = self._target
        path: List[Point] = [current]
        while current != self._origin:
            current = self._came_from[current]
            path.append(current)
        path.reverse()
        return path

    def _rebuild_tree(self) -> None:
        nav_map = self.map()
        origin = self._origin

        came_from: Dict[Point, Point] = {origin: origin}
        frontier: Deque[Point] = deque([origin])
        while frontier:
            current = frontier.popleft()
            for neighbor in nav_map.get_neighbors(current):
                if neighbor not in came_from:
                    came_from[neighbor] = current
                    frontier.append(neighbor)

        self._came_from = came_from
        logger.debug(
            f"Reachability rebuilt from ({origin.x}, {origin.y}): "
            f"{len(came_from)} cells reachable"
        )
