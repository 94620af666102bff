"""Component that draws a texture at its entity's transform."""

from __future__ import annotations

import logging

import pygame

from ecsengine.assets import AssetManager, get_asset_manager
from ecsengine.component import Component
from ecsengine.transform import Transform

logger = logging.getLogger(__name__)


class Sprite(Component):
    """Draws a whole texture scaled and rotated by the entity's Transform."""

    def __init__(
        self,
        target: pygame.Surface | None = None,
        texture_id: str = "",
        assets: AssetManager | None = None,
    ) -> None:
        super().__init__()
        self.target = target
        self.texture_id = texture_id
        self.assets = assets
        self.width = 0
        self.height = 0
        self.src_rect = pygame.Rect(0, 0, 0, 0)
        self.dest_rect = pygame.Rect(0, 0, 0, 0)
        self.transform: Transform | None = None
        self.texture: pygame.Surface | None = None
        self.flip_x = False
        self.flip_y = False

    def init(self) -> bool:
        self.transform = self.entity.get_component(Transform) if self.entity else None
        if self.transform is None:
            logger.error("Transform component not found")
            return False
        assets = self.assets if self.assets is not None else get_asset_manager()
        self.texture = assets.get_texture(self.texture_id)
        if self.texture is None:
            logger.error("texture [%s] not found", self.texture_id)
            return False
        self.width, self.height = self.texture.get_size()
        self.src_rect = pygame.Rect(0, 0, self.width, self.height)
        return True

    def draw(self) -> None:
        """Blit the texture into the destination rectangle, rotated clockwise about its centre."""
        if self.target is None or self.texture is None:
            return
        image = self.texture.subsurface(self.src_rect)
        image = pygame.transform.scale(image, self.dest_rect.size)
        if self.flip_x or self.flip_y:
            image = pygame.transform.flip(image, self.flip_x, self.flip_y)
        if self.transform.rotation:
            image = pygame.transform.rotate(image, -self.transform.rotation)
            self.target.blit(image, image.get_rect(center=self.dest_rect.center))
        else:
            self.target.blit(image, self.dest_rect.topleft)

    def update(self) -> None:
        pos = self.transform.pos
        scale = self.transform.scale
        self.dest_rect = pygame.Rect(
            int(pos.x),
            int(pos.y),
            max(0, int(self.width * scale.x)),
            max(0, int(self.height * scale.y)),
        )