import pygame
import pytest

from sfsnake.fruit import Fruit, FruitColor, to_rgb
from sfsnake.geometry import Vector


@pytest.mark.parametrize(
    "color, rgb",
    [
        (FruitColor.BROWN, (139, 69, 19)),
        (FruitColor.RED, (255, 0, 0)),
        (FruitColor.BLUE, (0, 0, 255)),
        (FruitColor.GREEN, (0, 255, 0)),
    ],
)
def test_to_rgb(color, rgb):
    assert to_rgb(color) == rgb


def test_colors_are_selectable_by_integer():
    assert [FruitColor(i) for i in range(4)] == list(FruitColor)


def test_default_fruit_is_brown_at_origin():
    fruit = Fruit()
    assert fruit.color is FruitColor.BROWN
    assert fruit.position == Vector(0.0, 0.0)


def test_bounds_start_at_position_with_diameter_size():
    fruit = Fruit(Vector(12.0, 34.0), FruitColor.RED)
    bounds = fruit.bounds()
    assert (bounds.left, bounds.top) == (12.0, 34.0)
    assert bounds.width == bounds.height == 2 * Fruit.RADIUS


def test_render_fills_center_with_color():
    surface = pygame.Surface((40, 40))
    surface.fill((0, 0, 0))
    fruit = Fruit(Vector(10.0, 10.0), FruitColor.BLUE)
    fruit.render(surface)
    center = (int(10 + Fruit.RADIUS), int(10 + Fruit.RADIUS))
    assert tuple(surface.get_at(center))[:3] == to_rgb(FruitColor.BLUE)