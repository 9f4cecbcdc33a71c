from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate. Hashable, so it can key the BFS tree."""
    x: int
    y: int

    def clamp(self, width: int, height: int) -> "Point":
        """Return the nearest point inside a width x height grid."""
        x = min(max(self.x, 0), width - 1)
        y = min(max(self.y, 0), height - 1)
        if x == self.x and y == self.y:
            return self
        return Point(x, y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)
