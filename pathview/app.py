import sys
import logging

from pathview.core.config import ViewerConfig
from pathview.core.engine import Viewer
from pathview.rendering.renderer import PathRenderer
from pathview.world.maps import load_default_maps
from pathview.world.scene import Scene


def main():
    config = ViewerConfig()
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    scene = Scene(load_default_maps())
    renderer = PathRenderer()
    viewer = Viewer(scene, renderer=renderer)

    print("Left click: origin | Right click: target | 1-9: switch map | Esc: quit")
    try:
        viewer.run()
    finally:
        renderer.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
