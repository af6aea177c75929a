"""A single segment of the snake: the head or one body part."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import ClassVar, Optional

import pygame

from .geometry import Rect, Vector

_PI = 3.14159

YELLOW = (255, 255, 0)
BLACK = (0, 0, 0)
HEAD_COLOR = (0, 170, 0)


class NodeType(Enum):
    """The kind of segment, which decides its shape."""

    HEAD = auto()
    BODY_CIRCLE = auto()
    BODY_RECTANGLE = auto()


class SnakeNode:
    """One segment, positioned by its centre."""

    WIDTH: ClassVar[float] = 10.0
    HEIGHT: ClassVar[float] = 10.0

    #: Image drawn for the head; a plain disc is drawn when unset.
    head_image: ClassVar[Optional[pygame.Surface]] = None

    def __init__(
        self,
        position: Vector = Vector(0.0, 0.0),
        node_type: NodeType = NodeType.BODY_CIRCLE,
    ) -> None:
        self.position = position
        self.node_type = node_type
        self.rotation = 0.0  # degrees, in [0, 360)

    def __repr__(self) -> str:
        return f"SnakeNode({self.position!r}, {self.node_type})"

    def move(self, x_offset: float, y_offset: float) -> None:
        """Shift the node by the given offsets."""
        self.position = self.position + Vector(x_offset, y_offset)

    def set_rotation(self, angle: float) -> None:
        """Orient the node along ``angle`` radians; round bodies ignore it."""
        degrees = angle * 180.0 / _PI
        if self.node_type is NodeType.HEAD:
            self.rotation = (degrees + 90.0) % 360.0
        elif self.node_type is NodeType.BODY_RECTANGLE:
            self.rotation = degrees % 360.0

    def _rectangle_corners(self) -> list[tuple[float, float]]:
        theta = math.radians(self.rotation)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        half_w, half_h = self.WIDTH / 2, self.HEIGHT / 2
        cx, cy = self.position.x, self.position.y
        return [
            (cx + dx * cos_t - dy * sin_t, cy + dx * sin_t + dy * cos_t)
            for dx, dy in ((-half_w, -half_h), (half_w, -half_h), (half_w, half_h), (-half_w, half_h))
        ]

    def bounds(self) -> Rect:
        """Return the axis-aligned box the node occupies."""
        if self.node_type is NodeType.BODY_RECTANGLE:
            corners = self._rectangle_corners()
            xs = [x for x, _ in corners]
            ys = [y for _, y in corners]
            return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        return Rect(
            self.position.x - self.WIDTH / 2,
            self.position.y - self.HEIGHT / 2,
            self.WIDTH,
            self.HEIGHT,
        )

    def render(self, surface: pygame.Surface) -> None:
        """Draw the node onto ``surface``."""
        center = (self.position.x, self.position.y)
        if self.node_type is NodeType.HEAD:
            image = type(self).head_image
            if image is None:
                pygame.draw.circle(surface, HEAD_COLOR, center, self.WIDTH / 2)
                return
            scaled = pygame.transform.smoothscale(
                image, (int(self.WIDTH * 2), int(self.HEIGHT * 2))
            )
            rotated = pygame.transform.rotate(scaled, -self.rotation)
            surface.blit(rotated, rotated.get_rect(center=center))
        elif self.node_type is NodeType.BODY_CIRCLE:
            radius = self.WIDTH / 2
            pygame.draw.circle(surface, YELLOW, center, radius)
            pygame.draw.circle(surface, BLACK, center, radius, 1)
        else:
            corners = self._rectangle_corners()
            pygame.draw.polygon(surface, BLACK, corners)
            pygame.draw.polygon(surface, YELLOW, corners, 1)