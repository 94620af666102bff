"""Position, scale and rotation component."""

from __future__ import annotations

from ecsengine.component import Component
from ecsengine.vector import Vect2D


class Transform(Component):
    """Where an entity is, how large it is drawn, and its rotation in degrees."""

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        scx: float = 1.0,
        scy: float = 1.0,
        rot: float = 0.0,
    ) -> None:
        super().__init__()
        self.pos = Vect2D(x, y)
        self.scale = Vect2D(scx, scy)
        self.rotation = rot

    def init(self) -> bool:
        return True

    def draw(self) -> None:
        """A transform has nothing to draw."""