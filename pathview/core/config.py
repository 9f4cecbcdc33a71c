from dataclasses import dataclass

@dataclass(frozen=True)
class ViewerConfig:
    """Global configuration constants for the path viewer."""
    SCREEN_WIDTH: int = 800
    SCREEN_HEIGHT: int = 640
    FPS: int = 30
    TITLE: str = "Pathview - BFS Path Viewer"
    VIEWPORT_MARGIN: int = 30
    TOP_BAR_HEIGHT: int = 30
    CELL_PADDING: int = 1
    LOG_LEVEL: str = "INFO"

    # Colors
    BACKGROUND: tuple = (255, 255, 255)
    WALKABLE: tuple = (230, 230, 230)
    WALL: tuple = (178, 178, 178)
    PATH: tuple = (70, 130, 220)
    ORIGIN: tuple = (40, 180, 80)
    TARGET: tuple = (220, 60, 60)
    TEXT: tuple = (40, 40, 48)
