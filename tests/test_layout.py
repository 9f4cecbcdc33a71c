import unittest

from pathview.rendering.layout import Rectangle, cell_at, cell_rect, map_bbox
from pathview.world.map import Map
from pathview.world.point import Point


class TestLayout(unittest.TestCase):
    def setUp(self):
        self.map = Map(width=4, height=2, tiles=(0,) * 8)
        # 400 wide, 200 tall after a 10px top bar and 20px margins
        self.viewport = Rectangle(0, 0, 440, 250)

    def test_rectangle_edges(self) -> None:
        rect = Rectangle(10, 20, 30, 40)
        self.assertEqual(rect.right(), 40)
        self.assertEqual(rect.bottom(), 60)
        self.assertTrue(rect.contains(10, 20))
        self.assertFalse(rect.contains(40, 30))

    def test_map_bbox_uses_square_cells(self) -> None:
        bbox = map_bbox(self.viewport, self.map, margin=20, top_bar_height=10)
        self.assertEqual(bbox.width / self.map.width, bbox.height / self.map.height)
        self.assertEqual(bbox.width, 400)
        self.assertEqual(bbox.height, 200)
        self.assertEqual(bbox.x, 20)
        self.assertEqual(bbox.y, 30)

    def test_map_bbox_is_centered(self) -> None:
        tall = Map(width=2, height=2, tiles=(0,) * 4)
        bbox = map_bbox(self.viewport, tall, margin=20, top_bar_height=10)
        self.assertEqual(bbox.width, 200)
        self.assertEqual(bbox.x, 20 + 100)

    def test_cell_rect_and_cell_at_agree(self) -> None:
        bbox = map_bbox(self.viewport, self.map, margin=20, top_bar_height=10)
        for y in range(self.map.height):
            for x in range(self.map.width):
                rect = cell_rect(bbox, self.map, Point(x, y))
                cx = rect.x + rect.width / 2
                cy = rect.y + rect.height / 2
                self.assertEqual(cell_at(bbox, self.map, cx, cy), Point(x, y))

    def test_cell_rect_padding(self) -> None:
        bbox = Rectangle(0, 0, 400, 200)
        rect = cell_rect(bbox, self.map, Point(1, 1), padding=2)
        self.assertEqual((rect.x, rect.y, rect.width, rect.height), (102, 102, 96, 96))

    def test_cell_at_outside_box_is_out_of_range(self) -> None:
        bbox = Rectangle(0, 0, 400, 200)
        self.assertEqual(cell_at(bbox, self.map, -10, 500), Point(-1, 5))
        self.assertEqual(self.map.clamp(cell_at(bbox, self.map, -10, 500)), Point(0, 1))


if __name__ == "__main__":
    unittest.main()
