import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from pathview.core.config import ViewerConfig
from pathview.rendering.layout import Rectangle, cell_at, map_bbox
from pathview.world.errors import MapIndexError, UnreachableTargetError
from pathview.world.point import Point
from pathview.world.scene import Scene

logger = logging.getLogger("Viewer")


@dataclass(frozen=True)
class InputEvent:
    """
    Renderer-independent user action.

    Selections carry either a grid `cell` or a window `pixel`; pixels are
    resolved against whichever map is active when the event is applied.
    """
    type: str
    cell: Optional[Point] = None
    index: int = 0
    pixel: Optional[Tuple[int, int]] = None
    dragging: bool = False


QUIT = "QUIT"
SET_ORIGIN = "SET_ORIGIN"
SET_TARGET = "SET_TARGET"
SHOW_MAP = "SHOW_MAP"


class Viewer:
    """
    Drives the path viewer: feeds input events into the Scene and keeps the
    last reconstructed path for the renderer.
    """
    def __init__(self, scene: Scene, renderer=None):
        self.config = ViewerConfig()
        self.viewport = Rectangle(0, 0, self.config.SCREEN_WIDTH, self.config.SCREEN_HEIGHT)
        self.scene = scene
        self.renderer = renderer
        self.is_running = False
        self.frames = 0

        self.path: List[Point] = []
        self.reachable = False
        self._refresh_path()

    def apply_event(self, event: InputEvent) -> None:
        if event.type == QUIT:
            self.is_running = False
            return

        if event.type in (SET_ORIGIN, SET_TARGET):
            if self.scene.active_index is None:
                logger.warning("Ignoring selection: no map is shown.")
                return
            cell = self._resolve_cell(event)
            if cell is None:
                return
            if event.type == SET_ORIGIN:
                self.scene.set_origin(cell.x, cell.y)
            else:
                if self.scene.target == self.scene.map().clamp(cell):
                    return
                self.scene.set_target(cell.x, cell.y)
        elif event.type == SHOW_MAP:
            try:
                self.scene.show_map(event.index)
            except MapIndexError as e:
                logger.warning(f"Ignoring map switch: {e}")
                return
        else:
            logger.error(f"Unknown input event {event.type}.")
            return

        self._refresh_path()

    def map_box(self) -> Rectangle:
        """Pixel box of the active map inside the window."""
        return map_bbox(
            self.viewport, self.scene.map(),
            self.config.VIEWPORT_MARGIN, self.config.TOP_BAR_HEIGHT,
        )

    def _resolve_cell(self, event: InputEvent) -> Optional[Point]:
        if event.cell is not None:
            return event.cell
        if event.pixel is None:
            return None
        px, py = event.pixel
        bbox = self.map_box()
        # Clicks must land on the map; drags may leave it and get clamped
        if not event.dragging and not bbox.contains(px, py):
            return None
        return cell_at(bbox, self.scene.map(), px, py)

    def _refresh_path(self) -> None:
        if self.scene.active_index is None:
            self.path = []
            self.reachable = False
            return
        try:
            self.path = self.scene.get_path()
            self.reachable = True
        except UnreachableTargetError as e:
            logger.debug(str(e))
            self.path = []
            self.reachable = False

    def handle_input(self):
        """Process input events."""
        if self.renderer:
            for event in self.renderer.get_events():
                self.apply_event(event)

    def render(self):
        if self.renderer:
            self.renderer.render(self)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Main loop. Returns the number of frames drawn."""
        self.is_running = True
        logger.info("Viewer loop started.")
        while self.is_running:
            if max_frames is not None and self.frames >= max_frames:
                self.is_running = False
                break

            self.handle_input()
            if not self.is_running:
                break
            self.render()
            self.frames += 1

            if self.renderer:
                self.renderer.tick(self.config.FPS)

        logger.info("Viewer loop ended.")
        return self.frames
