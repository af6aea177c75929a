"""Fruit the snake can eat."""

from __future__ import annotations

from enum import Enum

import pygame

from .geometry import Rect, Vector


class FruitColor(Enum):
    """Fruit colours; the value lets a random integer pick one."""

    BROWN = 0
    RED = 1
    BLUE = 2
    GREEN = 3


_RGB = {
    FruitColor.BROWN: (139, 69, 19),
    FruitColor.RED: (255, 0, 0),
    FruitColor.BLUE: (0, 0, 255),
    FruitColor.GREEN: (0, 255, 0),
}


def to_rgb(color: FruitColor) -> tuple[int, int, int]:
    """Return the RGB triple used to draw a fruit of ``color``."""
    return _RGB.get(color, _RGB[FruitColor.BROWN])


class Fruit:
    """A round fruit whose position is the top-left of its bounding box."""

    RADIUS = 5.0

    def __init__(
        self,
        position: Vector = Vector(0.0, 0.0),
        color: FruitColor = FruitColor.BROWN,
    ) -> None:
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"Fruit({self.position!r}, {self.color})"

    def bounds(self) -> Rect:
        """Return the box covered by the fruit."""
        diameter = 2 * self.RADIUS
        return Rect(self.position.x, self.position.y, diameter, diameter)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the fruit onto ``surface``."""
        center = (self.position.x + self.RADIUS, self.position.y + self.RADIUS)
        pygame.draw.circle(surface, to_rgb(self.color), center, self.RADIUS)