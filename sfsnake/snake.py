"""The player's snake: movement, growth and collisions."""

from __future__ import annotations

import math
from collections.abc import Callable, MutableSequence, Sequence
from typing import Optional, Union

import pygame

from .fruit import Fruit, FruitColor
from .geometry import Vector
from .snakenode import NodeType, SnakeNode

FIELD_WIDTH = 640
FIELD_HEIGHT = 480

GROWTH = {
    FruitColor.BROWN: 0,
    FruitColor.RED: 3,
    FruitColor.BLUE: 2,
    FruitColor.GREEN: 1,
}

Point = Union[Vector, tuple[float, float]]


def _body_type(index: int) -> NodeType:
    return NodeType.BODY_CIRCLE if index % 2 == 0 else NodeType.BODY_RECTANGLE


class Snake:
    """A snake steered by mouse clicks, or towards fruit in AI mode."""

    INITIAL_SIZE = 5

    def __init__(
        self,
        ai_mode: bool = False,
        on_pickup: Optional[Callable[[], None]] = None,
        on_die: Optional[Callable[[], None]] = None,
    ) -> None:
        self.ai_mode = ai_mode
        self._on_pickup = on_pickup
        self._on_die = on_die
        self._direction = Vector(0.0, -1.0)
        self._hit_self = False
        self._nodes: list[SnakeNode] = []
        self._init_nodes()

    @property
    def nodes(self) -> tuple[SnakeNode, ...]:
        """The segments, head first."""
        return tuple(self._nodes)

    @property
    def direction(self) -> Vector:
        """The current unit direction of travel."""
        return self._direction

    def _init_nodes(self) -> None:
        x = FIELD_WIDTH / 2 - SnakeNode.WIDTH / 2
        y = FIELD_HEIGHT / 2 - SnakeNode.HEIGHT / 2
        self._nodes = [SnakeNode(Vector(x, y), NodeType.HEAD)]
        self._nodes.extend(
            SnakeNode(Vector(x, y + SnakeNode.HEIGHT * i), _body_type(i))
            for i in range(1, self.INITIAL_SIZE)
        )
        self._update_node_rotation()

    def handle_input(self, mouse_pos: Optional[Point], fruits: Sequence[Fruit]) -> None:
        """Steer towards a left-click position, or towards the first fruit in AI mode.

        ``mouse_pos`` is None when the left button is not pressed.
        """
        head = self._nodes[0].position
        if not self.ai_mode:
            if mouse_pos is None:
                return
            target = mouse_pos if isinstance(mouse_pos, Vector) else Vector(*mouse_pos)
            offset = target - head
            if offset.length() == 0:
                return
            self._direction = offset.normalized()
            self._update_node_rotation()
            return

        if not fruits:
            return
        offset = fruits[0].position - head
        if offset.dot(self._direction) >= 0 and offset.length() > 0:
            self._direction = offset.normalized()

    def _update_node_rotation(self) -> None:
        angle = math.atan2(self._direction.y, self._direction.x)
        self._nodes[0].set_rotation(angle)

        last = len(self._nodes) - 1
        for i, node in enumerate(self._nodes):
            if i % 2 == 0:
                continue
            pos = node.position
            if i < last:
                next_pos = self._nodes[i + 1].position
            else:
                next_pos = pos + pos - self._nodes[i - 1].position
            node.set_rotation(math.atan2(next_pos.y - pos.y, next_pos.x - pos.x))

    def update(self, delta: float = 0.0) -> None:
        """Advance one step: move, wrap at edges, detect self-hits."""
        self._move()
        self._check_edge_collisions()
        self._check_self_collisions()
        self._update_node_rotation()

    def _move(self) -> None:
        for follower, leader in zip(reversed(self._nodes[1:]), reversed(self._nodes[:-1])):
            follower.position = leader.position
        self._nodes[0].move(
            SnakeNode.WIDTH * self._direction.x, SnakeNode.HEIGHT * self._direction.y
        )

    def _check_edge_collisions(self) -> None:
        head = self._nodes[0]
        x, y = head.position.x, head.position.y
        if x <= 0:
            head.position = Vector(FIELD_WIDTH, y)
        elif x >= FIELD_WIDTH:
            head.position = Vector(0, y)
        elif y <= 0:
            head.position = Vector(x, FIELD_HEIGHT)
        elif y >= FIELD_HEIGHT:
            head.position = Vector(x, 0)

    def _check_self_collisions(self) -> None:
        head_bounds = self._nodes[0].bounds()
        for node in self._nodes[3:]:
            if head_bounds.intersects(node.bounds()):
                if self._on_die is not None:
                    self._on_die()
                self._hit_self = True

    def check_fruit_collisions(self, fruits: MutableSequence[Fruit]) -> Optional[Fruit]:
        """Eat the last fruit touching the head, grow, and return it."""
        head_bounds = self._nodes[0].bounds()
        eaten_index = None
        for index, fruit in enumerate(fruits):
            if fruit.bounds().intersects(head_bounds):
                eaten_index = index
        if eaten_index is None:
            return None

        if self._on_pickup is not None:
            self._on_pickup()
        eaten = fruits[eaten_index]
        growth = GROWTH[eaten.color]
        if growth:
            self.grow(growth)
        del fruits[eaten_index]
        return eaten

    def grow(self, length: int) -> None:
        """Append ``length`` segments, continuing the line of the tail."""
        last_pos = self._nodes[-1].position
        second_last_pos = self._nodes[-2].position if len(self._nodes) > 1 else last_pos
        tail_direction = last_pos - second_last_pos
        if len(self._nodes) <= 1 or tail_direction.length() == 0:
            tail_direction = -self._direction
        tail_direction = tail_direction.normalized()

        size = len(self._nodes)
        for i in range(length):
            step = i + 1
            position = Vector(
                last_pos.x + SnakeNode.WIDTH * tail_direction.x * step,
                last_pos.y + SnakeNode.HEIGHT * tail_direction.y * step,
            )
            self._nodes.append(SnakeNode(position, _body_type(size + i)))

        self._update_node_rotation()

    def hit_self(self) -> bool:
        """Return True once the head has run into the body."""
        return self._hit_self

    def __len__(self) -> int:
        return len(self._nodes)

    def render(self, surface: pygame.Surface) -> None:
        """Draw every segment onto ``surface``."""
        for node in self._nodes:
            node.render(surface)