"""Window, main loop steps and the program entry point."""

from __future__ import annotations

import logging
import sys

import pygame

from ecsengine.assets import AssetError, AssetManager, get_asset_manager
from ecsengine.entity import ComponentInitError, Entity, EntityManager
from ecsengine.sprite import Sprite
from ecsengine.transform import Transform
from ecsengine.vector import Vect2D

logger = logging.getLogger(__name__)

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
WINDOW_TITLE = "Game Engine"
CLEAR_COLOR = (30, 30, 30, 255)
TEXTURE_ID = "test"
TEXTURE_PATH = "assets/test.png"
FRAME_RATE = 60


class Engine:
    """Owns the window and the entity manager and runs one frame at a time."""

    def __init__(self) -> None:
        self.running = False
        self.manager: EntityManager | None = None
        self.renderer: pygame.Surface | None = None
        self.clear_color = CLEAR_COLOR
        self.assets: AssetManager = get_asset_manager()
        self.texture_id = TEXTURE_ID
        self.texture_path = TEXTURE_PATH

    def init(self) -> bool:
        """Open the window and build the scene; return whether the engine is running."""
        pygame.init()
        try:
            self.renderer = pygame.display.set_mode(
                (SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE
            )
            pygame.display.set_caption(WINDOW_TITLE)
            self.assets.load_texture(self.texture_id, self.texture_path)
            self.manager = EntityManager()
            entity = Entity()
            entity.get_component(Transform).pos = Vect2D(100, 100)
            entity.add_component(Sprite(self.renderer, self.texture_id, self.assets))
            self.manager.add_entity(entity)
        except (pygame.error, AssetError, ComponentInitError) as exc:
            logger.error("engine init failed: %s", exc)
            return False
        self.running = True
        return True

    def clean(self) -> bool:
        self.assets.clean()
        pygame.display.quit()
        pygame.quit()
        return True

    def quit(self) -> None:
        self.running = False

    def event(self) -> None:
        """Handle pending events: closing the window or pressing Escape quits."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.quit()

    def update(self) -> None:
        self.manager.update()

    def render(self) -> None:
        self.renderer.fill(self.clear_color)
        self.manager.draw()
        pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Run the engine until the window is closed."""
    engine = Engine()
    if not engine.init():
        print("Engine initialization failed!", file=sys.stderr)
    clock = pygame.time.Clock()
    while engine.running:
        engine.event()
        engine.update()
        engine.render()
        clock.tick(FRAME_RATE)
    engine.clean()
    return 0


if __name__ == "__main__":
    sys.exit(main())