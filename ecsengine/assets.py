"""Loading and caching of textures and fonts by identifier."""

from __future__ import annotations

import functools
import logging

import pygame

logger = logging.getLogger(__name__)


class AssetError(RuntimeError):
    """Raised when a texture or font cannot be loaded."""


class AssetManager:
    """Keeps loaded textures and fonts under string identifiers."""

    def __init__(self) -> None:
        pygame.font.init()
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}

    def load_texture(self, id: str, path: str) -> None:
        """Load the image at ``path`` as ``id`` unless that id is already loaded."""
        if id in self._textures:
            return
        try:
            texture = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise AssetError(f"cannot load texture {path!r}: {exc}") from exc
        self._textures[id] = texture
        logger.info("texture [%s] loaded", path)

    def get_texture(self, id: str) -> pygame.Surface | None:
        return self._textures.get(id)

    def load_font(self, id: str, path: str | None, size: int) -> None:
        """Open the font at ``path`` in ``size`` points as ``id``, replacing any old one."""
        try:
            font = pygame.font.Font(path, size)
        except (pygame.error, OSError) as exc:
            raise AssetError(f"cannot load font {path!r}: {exc}") from exc
        self._fonts[id] = font
        logger.info("font [%s] loaded", path)

    def get_font(self, id: str) -> pygame.font.Font | None:
        return self._fonts.get(id)

    def clean(self) -> None:
        """Drop every texture and font and shut the font system down."""
        self._textures.clear()
        self._fonts.clear()
        pygame.font.quit()


@functools.cache
def get_asset_manager() -> AssetManager:
    """Return the shared asset manager, creating it on first use."""
    return AssetManager()