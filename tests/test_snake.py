import math

import pygame

from sfsnake.fruit import Fruit, FruitColor
from sfsnake.geometry import Vector
from sfsnake.snake import FIELD_HEIGHT, FIELD_WIDTH, GROWTH, Snake
from sfsnake.snakenode import NodeType, SnakeNode


def _positions(snake):
    return [node.position for node in snake.nodes]


def test_initial_snake_layout():
    snake = Snake()
    assert len(snake) == Snake.INITIAL_SIZE
    nodes = snake.nodes
    assert nodes[0].node_type is NodeType.HEAD
    assert nodes[0].position == Vector(
        FIELD_WIDTH / 2 - SnakeNode.WIDTH / 2, FIELD_HEIGHT / 2 - SnakeNode.HEIGHT / 2
    )
    for prev, node in zip(nodes, nodes[1:]):
        assert node.position.x == prev.position.x
        assert node.position.y - prev.position.y == SnakeNode.HEIGHT
    assert [n.node_type for n in nodes[1:]] == [
        NodeType.BODY_RECTANGLE,
        NodeType.BODY_CIRCLE,
        NodeType.BODY_RECTANGLE,
        NodeType.BODY_CIRCLE,
    ]
    assert snake.hit_self() is False


def test_update_moves_head_and_body_follows():
    snake = Snake()
    before = _positions(snake)
    snake.update(0.1)
    after = _positions(snake)
    assert after[1:] == before[:-1]
    assert after[0] == before[0] + Vector(0.0, -SnakeNode.HEIGHT)
    assert snake.hit_self() is False


def test_mouse_click_sets_normalized_direction():
    snake = Snake()
    head = snake.nodes[0].position
    target = head + Vector(30.0, 40.0)
    snake.handle_input((target.x, target.y), [])
    expected = Vector(30.0, 40.0).normalized()
    assert math.isclose(snake.direction.x, expected.x)
    assert math.isclose(snake.direction.y, expected.y)


def test_no_click_keeps_direction():
    snake = Snake()
    before = snake.direction
    snake.handle_input(None, [Fruit(Vector(0.0, 0.0))])
    assert snake.direction == before


def test_ai_mode_heads_to_first_fruit_in_front():
    snake = Snake(ai_mode=True)
    head = snake.nodes[0].position
    fruit = Fruit(head + Vector(100.0, -100.0), FruitColor.RED)
    snake.handle_input(None, [fruit])
    expected = (fruit.position - head).normalized()
    assert math.isclose(snake.direction.x, expected.x)
    assert math.isclose(snake.direction.y, expected.y)


def test_ai_mode_ignores_fruit_behind():
    snake = Snake(ai_mode=True)
    before = snake.direction
    head = snake.nodes[0].position
    snake.handle_input(None, [Fruit(head + Vector(0.0, 100.0))])
    assert snake.direction == before


def test_ai_mode_without_fruit_keeps_direction():
    snake = Snake(ai_mode=True)
    before = snake.direction
    snake.handle_input(None, [])
    assert snake.direction == before


def test_edge_wraps_to_far_side():
    snake = Snake()
    head = snake.nodes[0]
    head.position = Vector(5.0, head.position.y)
    snake.handle_input((0.0, head.position.y), [])
    snake.update(0.1)
    assert snake.nodes[0].position.x == FIELD_WIDTH


def test_eating_red_fruit_grows_and_removes_it():
    pickups = []
    snake = Snake(on_pickup=lambda: pickups.append(True))
    head = snake.nodes[0].position
    fruits = [Fruit(Vector(0.0, 0.0)), Fruit(head, FruitColor.RED)]
    eaten = snake.check_fruit_collisions(fruits)
    assert eaten.color is FruitColor.RED
    assert len(snake) == Snake.INITIAL_SIZE + GROWTH[FruitColor.RED]
    assert len(fruits) == 1 and fruits[0].color is FruitColor.BROWN
    assert pickups == [True]


def test_eating_brown_fruit_does_not_grow():
    snake = Snake()
    fruits = [Fruit(snake.nodes[0].position, FruitColor.BROWN)]
    snake.check_fruit_collisions(fruits)
    assert fruits == []
    assert len(snake) == Snake.INITIAL_SIZE


def test_missed_fruit_is_kept():
    pickups = []
    snake = Snake(on_pickup=lambda: pickups.append(True))
    fruits = [Fruit(Vector(0.0, 0.0), FruitColor.GREEN)]
    assert snake.check_fruit_collisions(fruits) is None
    assert len(fruits) == 1
    assert pickups == []


def test_grow_extends_along_tail():
    snake = Snake()
    snake.grow(2)
    nodes = snake.nodes
    assert len(nodes) == Snake.INITIAL_SIZE + 2
    for prev, node in zip(nodes[-3:], nodes[-2:]):
        assert math.isclose(node.position.y - prev.position.y, SnakeNode.HEIGHT)
        assert math.isclose(node.position.x, prev.position.x)
    assert nodes[-2].node_type is NodeType.BODY_RECTANGLE
    assert nodes[-1].node_type is NodeType.BODY_CIRCLE


def test_turning_back_hits_self():
    deaths = []
    snake = Snake(on_die=lambda: deaths.append(True))
    head = snake.nodes[0].position
    snake.handle_input((head.x, head.y + 200.0), [])
    snake.update(0.1)
    snake.update(0.1)
    assert snake.hit_self() is True
    assert len(deaths) >= 1


def test_render_draws_body():
    snake = Snake()
    surface = pygame.Surface((FIELD_WIDTH, FIELD_HEIGHT))
    surface.fill((0, 0, 0))
    snake.render(surface)
    circle = snake.nodes[2].position
    assert tuple(surface.get_at((int(circle.x), int(circle.y))))[:3] == (255, 255, 0)