import pygame
import logging
from typing import List, Optional, Tuple

from pathview.core.config import ViewerConfig
from pathview.core.engine import InputEvent, QUIT, SET_ORIGIN, SET_TARGET, SHOW_MAP
from pathview.rendering.layout import Rectangle, cell_rect
from pathview.world.map import Map, TileType
from pathview.world.point import Point

logger = logging.getLogger("Renderer")


# ══════════════════════════════════════════════════════════════════════
#  RENDERER
# ══════════════════════════════════════════════════════════════════════

class PathRenderer:
    """
    Draws the active map, the current path and the origin/target markers
    with Pygame, and turns mouse/keyboard input into viewer events.

    Layout:  [ top bar ]
             [ margin | map box | margin ]
    """

    MAP_KEYS = {
        pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2,
        pygame.K_4: 3, pygame.K_5: 4, pygame.K_6: 5,
        pygame.K_7: 6, pygame.K_8: 7, pygame.K_9: 8,
    }

    # ── Initialisation ────────────────────────────────────────────────

    def __init__(self):
        self.config = ViewerConfig()
        pygame.init()

        self.screen = pygame.display.set_mode((self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT))
        pygame.display.set_caption(self.config.TITLE)
        self.clock = pygame.time.Clock()

        self.font = pygame.font.SysFont("Consolas", 15)

        # Map geometry only changes when the active map does
        self._map_surface: Optional[pygame.Surface] = None
        self._map_key: Optional[Tuple[Map, Tuple[float, float, float, float]]] = None
        self._bbox: Optional[Rectangle] = None
        self._map: Optional[Map] = None

    # ── Public API ────────────────────────────────────────────────────

    def get_events(self) -> List[InputEvent]:
        events: List[InputEvent] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events.append(InputEvent(QUIT))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    events.append(InputEvent(QUIT))
                elif event.key in self.MAP_KEYS:
                    events.append(InputEvent(SHOW_MAP, index=self.MAP_KEYS[event.key]))
            elif event.type == pygame.MOUSEBUTTONDOWN:
                selected = self._event_from_pointer(event.pos, event.button == 1, event.button == 3, False)
                if selected:
                    events.append(selected)
            elif event.type == pygame.MOUSEMOTION:
                left, _, right = event.buttons
                selected = self._event_from_pointer(event.pos, left, right, True)
                if selected:
                    events.append(selected)
        return events

    def render(self, viewer) -> None:
        scene = viewer.scene
        self.screen.fill(self.config.BACKGROUND)

        if scene.active_index is not None:
            nav_map = scene.map()
            self._update_map(nav_map, viewer.map_box())
            self.screen.blit(self._map_surface, (0, 0))
            self._render_path(viewer.path)
            self._render_marker(scene.origin, self.config.ORIGIN, 0.35)
            self._render_marker(scene.target, self.config.TARGET, 0.25)

        self._render_top_bar(viewer)
        pygame.display.flip()

    def tick(self, fps: int):
        self.clock.tick(fps)

    def quit(self):
        pygame.quit()

    # ── Input ─────────────────────────────────────────────────────────

    def _event_from_pointer(self, pos, left: bool, right: bool, dragging: bool) -> Optional[InputEvent]:
        if not (left or right):
            return None
        # The viewer maps pixels to cells against the map active at that point
        return InputEvent(SET_ORIGIN if left else SET_TARGET, pixel=tuple(pos), dragging=dragging)

    # ══════════════════════════════════════════════════════════════════
    #  MAP  TILES
    # ══════════════════════════════════════════════════════════════════

    def _update_map(self, nav_map: Map, bbox: Rectangle) -> None:
        key = (nav_map, (bbox.x, bbox.y, bbox.width, bbox.height))
        if key == self._map_key:
            return

        logger.debug(f"Rebuilding map surface for {nav_map.width}x{nav_map.height} map")
        surface = pygame.Surface((self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT), pygame.SRCALPHA)
        for y in range(nav_map.height):
            for x in range(nav_map.width):
                point = Point(x, y)
                if nav_map.get_tile(point) == TileType.WALKABLE:
                    color = self.config.WALKABLE
                    padding = self.config.CELL_PADDING
                else:
                    color = self.config.WALL
                    padding = 0
                pygame.draw.rect(surface, color, self._to_pygame(cell_rect(bbox, nav_map, point, padding)))

        self._map_surface = surface
        self._map_key = key
        self._bbox = bbox
        self._map = nav_map

    # ══════════════════════════════════════════════════════════════════
    #  PATH  &  MARKERS
    # ══════════════════════════════════════════════════════════════════

    def _render_path(self, path: List[Point]) -> None:
        if len(path) < 2:
            return
        centers = [self._cell_center(point) for point in path]
        width = max(2, int(self._bbox.width / self._map.width * 0.15))
        pygame.draw.lines(self.screen, self.config.PATH, False, centers, width)
        for center in centers:
            pygame.draw.circle(self.screen, self.config.PATH, center, width)

    def _render_marker(self, point: Point, color, scale: float) -> None:
        cell = cell_rect(self._bbox, self._map, point)
        half = cell.width * scale
        cx, cy = self._cell_center(point)
        pygame.draw.rect(self.screen, color, pygame.Rect(cx - half, cy - half, half * 2, half * 2))

    def _render_top_bar(self, viewer) -> None:
        scene = viewer.scene
        if scene.active_index is None:
            text = "No map loaded"
        else:
            origin, target = scene.origin, scene.target
            if viewer.reachable:
                route = f"path: {len(viewer.path) - 1} steps"
            else:
                route = "target unreachable"
            text = (
                f"Map {scene.active_index + 1}/{scene.map_count}  |  "
                f"origin ({origin.x}, {origin.y})  target ({target.x}, {target.y})  |  {route}"
            )
        label = self.font.render(text, True, self.config.TEXT)
        top = (self.config.TOP_BAR_HEIGHT - label.get_height()) // 2
        self.screen.blit(label, (self.config.VIEWPORT_MARGIN, top))

    # ── Helpers ───────────────────────────────────────────────────────

    def _cell_center(self, point: Point) -> Tuple[int, int]:
        cell = cell_rect(self._bbox, self._map, point)
        return (int(cell.x + cell.width / 2), int(cell.y + cell.height / 2))

    @staticmethod
    def _to_pygame(rect: Rectangle) -> pygame.Rect:
        return pygame.Rect(int(rect.x), int(rect.y), int(rect.width + 0.5), int(rect.height + 0.5))
