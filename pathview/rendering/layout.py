"""
Pixel-space layout for the viewer: where the map sits inside the window
and how screen pixels map onto grid cells.

Kept free of pygame so it can be tested headless.
"""
from dataclasses import dataclass

from pathview.world.map import Map
from pathview.world.point import Point


@dataclass
class Rectangle:
    x: float
    y: float
    width: float
    height: float

    def right(self) -> float:
        return self.x + self.width

    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.right() and self.y <= py < self.bottom()


def map_bbox(viewport: Rectangle, nav_map: Map, margin: int, top_bar_height: int) -> Rectangle:
    """
    Largest box with square cells that fits `nav_map` inside the viewport,
    below the top bar and inset by `margin`, centered in the free area.
    """
    free_x = viewport.x + margin
    free_y = viewport.y + top_bar_height + margin
    free_w = max(0.0, viewport.width - 2 * margin)
    free_h = max(0.0, viewport.height - top_bar_height - 2 * margin)

    cell = min(free_w / nav_map.width, free_h / nav_map.height)
    width = cell * nav_map.width
    height = cell * nav_map.height
    return Rectangle(
        x=free_x + (free_w - width) / 2,
        y=free_y + (free_h - height) / 2,
        width=width,
        height=height,
    )


def cell_rect(bbox: Rectangle, nav_map: Map, point: Point, padding: float = 0.0) -> Rectangle:
    cell_w = bbox.width / nav_map.width
    cell_h = bbox.height / nav_map.height
    return Rectangle(
        x=bbox.x + point.x * cell_w + padding,
        y=bbox.y + point.y * cell_h + padding,
        width=cell_w - 2 * padding,
        height=cell_h - 2 * padding,
    )


def cell_at(bbox: Rectangle, nav_map: Map, px: float, py: float) -> Point:
    """
    Grid cell under a pixel. Pixels outside the box give out-of-range
    cells; the Scene clamps them.
    """
    cell_w = bbox.width / nav_map.width
    cell_h = bbox.height / nav_map.height
    return Point(int((px - bbox.x) // cell_w), int((py - bbox.y) // cell_h))
