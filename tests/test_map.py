import unittest

from pathview.world.errors import InvalidMapError
from pathview.world.map import Map, TileType
from pathview.world.maps import COURTYARD, load_default_maps
from pathview.world.point import Point


class TestMap(unittest.TestCase):
    def setUp(self):
        self.map = Map.from_rows([
            [0, 1, 0],
            [0, 0, 0],
            [2, 0, 1],
        ])

    def test_rejects_tile_count_mismatch(self) -> None:
        with self.assertRaises(InvalidMapError):
            Map(width=3, height=2, tiles=(0, 0, 0, 0, 0))

    def test_rejects_non_positive_dimensions(self) -> None:
        with self.assertRaises(InvalidMapError):
            Map(width=0, height=3, tiles=())
        with self.assertRaises(ValueError):
            Map(width=2, height=-1, tiles=(0, 0))

    def test_from_rows_rejects_ragged_rows(self) -> None:
        with self.assertRaises(InvalidMapError):
            Map.from_rows([[0, 0], [0]])
        with self.assertRaises(InvalidMapError):
            Map.from_rows([])

    def test_rejects_non_integer_codes(self) -> None:
        with self.assertRaises(InvalidMapError):
            Map(width=2, height=1, tiles=(0, 0.7))
        with self.assertRaises(InvalidMapError):
            Map(width=2, height=2, tiles="0110")
        with self.assertRaises(InvalidMapError):
            Map(width=2, height=1, tiles=(0, True))

    def test_accepts_tile_type_members(self) -> None:
        nav_map = Map(width=2, height=1, tiles=(TileType.WALKABLE, TileType.WALL))
        self.assertEqual(nav_map.tiles, (0, 1))
        self.assertIs(type(nav_map.tiles[1]), int)

    def test_tiles_are_immutable(self) -> None:
        nav_map = Map(width=2, height=1, tiles=[0, 1])
        self.assertIsInstance(nav_map.tiles, tuple)
        with self.assertRaises(AttributeError):
            nav_map.width = 5

    def test_get_tile_matches_construction(self) -> None:
        for y in range(COURTYARD.height):
            for x in range(COURTYARD.width):
                expected = COURTYARD.tiles[x + y * COURTYARD.width]
                self.assertEqual(COURTYARD.get_tile(Point(x, y)), expected)
                self.assertEqual(COURTYARD.get_tile(Point(x, y)), expected)

    def test_get_tile_clamps_out_of_range(self) -> None:
        self.assertEqual(self.map.get_tile(Point(200, 0)), self.map.get_tile(Point(2, 0)))
        self.assertEqual(self.map.get_tile(Point(-4, 9)), self.map.get_tile(Point(0, 2)))

    def test_reserved_codes_are_not_walkable(self) -> None:
        self.assertFalse(self.map.is_walkable(Point(0, 2)))
        self.assertFalse(self.map.is_walkable(Point(1, 0)))
        self.assertTrue(self.map.is_walkable(Point(1, 1)))
        self.assertFalse(self.map.is_walkable(Point(3, 1)))

    def test_neighbors_order_is_top_left_bottom_right(self) -> None:
        open_map = Map(width=3, height=3, tiles=(0,) * 9)
        self.assertEqual(
            open_map.get_neighbors(Point(1, 1)),
            [Point(1, 0), Point(0, 1), Point(1, 2), Point(2, 1)],
        )

    def test_neighbors_skip_walls_and_edges(self) -> None:
        self.assertEqual(self.map.get_neighbors(Point(0, 0)), [Point(0, 1)])
        # (0, 2) holds a reserved code and (1, 1) is the only walkable side of (1, 2)
        self.assertEqual(self.map.get_neighbors(Point(1, 2)), [Point(1, 1)])

    def test_count(self) -> None:
        self.assertEqual(self.map.count(TileType.WALL), 2)
        self.assertEqual(self.map.count(TileType.WALKABLE), 6)

    def test_default_maps_are_valid(self) -> None:
        maps = load_default_maps()
        self.assertGreaterEqual(len(maps), 2)
        for nav_map in maps:
            self.assertEqual(len(nav_map.tiles), nav_map.width * nav_map.height)
            self.assertTrue(nav_map.is_walkable(Point(0, 0)))


if __name__ == "__main__":
    unittest.main()
