"""The game's screens (menu, play field, game over, settings) and their shared state."""

from __future__ import annotations

import random
import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pygame

from .fruit import Fruit, FruitColor
from .geometry import Vector
from .snake import FIELD_HEIGHT, FIELD_WIDTH, Snake
from .snakenode import SnakeNode

RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)
RED: RGB = (255, 0, 0)
GREEN: RGB = (0, 255, 0)
PINK: RGB = (255, 192, 203)
GRID_COLOR: RGB = (70, 70, 70)

TEXT_SIZE = 30
TITLE_SIZE = 64
TITLE_SWING = 10

MENU_TEXT = (
    "\n\n\n\n\nPress [A] to enter AI mode"
    "\n\n\nPress [S] to setting"
    "\n\nPress [SPACE] to play"
    "\n\nPress [ESC] to quit"
)
TITLE_TEXT = "Snake!"
SETTING_TEXT = (
    "Press [P] or [B] to \nchange the \nbackground color"
    "\n\nPress [Y] or [N] to \nchoose whether \nto show the grid"
    "\n\nPress [Space] to back"
)
GAME_OVER_HINTS = (
    "\n\nPress [SPACE] to retry"
    "\n\nPress [ESC] to quit"
    "\nPress [S] to setting"
)


@dataclass
class Settings:
    """Options shared by all screens."""

    bg_color: RGB = BLACK
    grid_visible: bool = False
    ai_mode: bool = False


@dataclass(frozen=True)
class InputState:
    """A snapshot of the input for one step.

    ``keys`` holds the names of the pressed keys ("space", "escape", "a", ...);
    ``mouse_pos`` is the cursor position while the left button is held, else None.
    """

    keys: frozenset[str] = frozenset()
    mouse_pos: Optional[tuple[float, float]] = None


@dataclass
class GameContext:
    """State the screens share: settings, assets and the active screen."""

    settings: Settings = field(default_factory=Settings)
    font_path: Optional[Path] = None
    pickup_sound: Optional[pygame.mixer.Sound] = None
    die_sound: Optional[pygame.mixer.Sound] = None
    screen: Optional[Screen] = None
    running: bool = True

    def close(self) -> None:
        """Ask the game to stop."""
        self.running = False


def _load_font(context: GameContext, size: int) -> Optional[pygame.font.Font]:
    if not pygame.font.get_init():
        return None
    if context.font_path is not None:
        try:
            return pygame.font.Font(str(context.font_path), size)
        except (pygame.error, OSError):
            print(f"Failed to open the file:{context.font_path}", file=sys.stderr)
    return pygame.font.Font(None, size)


def _text_surface(
    context: GameContext, text: str, size: int, color: RGB, bold: bool = False
) -> Optional[pygame.Surface]:
    font = _load_font(context, size)
    if font is None:
        return None
    font.set_bold(bold)
    lines = [font.render(line, True, color) for line in text.split("\n")]
    line_height = font.get_linesize()
    width = max(line.get_width() for line in lines)
    block = pygame.Surface((max(width, 1), line_height * len(lines)), pygame.SRCALPHA)
    for row, line in enumerate(lines):
        block.blit(line, (0, row * line_height))
    return block


def _blit_centered(
    surface: pygame.Surface, image: Optional[pygame.Surface], center: tuple[float, float]
) -> None:
    if image is not None:
        surface.blit(image, image.get_rect(center=center))


class Screen(ABC):
    """One state of the game that receives input, advances and draws itself."""

    @abstractmethod
    def handle_input(self, inputs: InputState) -> None:
        """React to the input of the current step."""

    @abstractmethod
    def update(self, delta: float) -> None:
        """Advance by ``delta`` seconds."""

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw onto ``surface``."""


class MenuScreen(Screen):
    """The title menu with a swinging title."""

    def __init__(self, context: GameContext) -> None:
        self.context = context
        self.title_rotation = 0.0  # degrees, in [0, 360)
        self._rotating_right = True
        self._rotating_left = False
        self._text = _text_surface(context, MENU_TEXT, TEXT_SIZE, WHITE)
        self._title = _text_surface(context, TITLE_TEXT, TITLE_SIZE, GREEN, bold=True)

    def handle_input(self, inputs: InputState) -> None:
        keys = inputs.keys
        if "space" in keys:
            self.context.screen = GameScreen(self.context)
        elif "escape" in keys:
            self.context.close()
        elif "s" in keys:
            self.context.screen = SettingScreen(self.context)
        elif "a" in keys:
            self.context.settings.ai_mode = True
            print("triggle on the ai mode")

    def update(self, delta: float) -> None:
        if self._rotating_right:
            self.title_rotation = (self.title_rotation + delta) % 360.0
            if int(self.title_rotation) == TITLE_SWING:
                self._rotating_right = False
                self._rotating_left = True

        if self._rotating_left:
            self.title_rotation = (self.title_rotation - delta) % 360.0
            if int(self.title_rotation) == 360 - TITLE_SWING:
                self._rotating_left = False
                self._rotating_right = True

    def render(self, surface: pygame.Surface) -> None:
        _blit_centered(surface, self._text, (FIELD_WIDTH / 2, FIELD_HEIGHT / 2))
        if self._title is not None:
            title = pygame.transform.rotate(self._title, -self.title_rotation)
            _blit_centered(surface, title, (FIELD_WIDTH / 2, FIELD_HEIGHT / 4))


class GameScreen(Screen):
    """The play field: the snake, the fruit and an optional grid."""

    def __init__(self, context: GameContext, rng: Optional[random.Random] = None) -> None:
        self.context = context
        self.rng = rng if rng is not None else random.Random()
        self.fruits: list[Fruit] = []
        self.snake = Snake(
            ai_mode=context.settings.ai_mode,
            on_pickup=self._play_pickup,
            on_die=self._play_die,
        )

    def _play_pickup(self) -> None:
        if self.context.pickup_sound is not None:
            self.context.pickup_sound.play()

    def _play_die(self) -> None:
        sound = self.context.die_sound
        if sound is not None:
            sound.play()
            time.sleep(sound.get_length())

    def handle_input(self, inputs: InputState) -> None:
        self.snake.ai_mode = self.context.settings.ai_mode
        self.snake.handle_input(inputs.mouse_pos, self.fruits)

    def update(self, delta: float) -> None:
        if not self.fruits:
            self.generate_fruit()

        self.snake.update(delta)
        self.snake.check_fruit_collisions(self.fruits)

        if self.snake.hit_self():
            self.context.screen = GameOverScreen(self.context, len(self.snake))

    def generate_fruit(self) -> Fruit:
        """Place a fruit of random colour at a random spot and return it."""
        x = self.rng.randint(0, int(FIELD_WIDTH - SnakeNode.WIDTH))
        y = self.rng.randint(0, int(FIELD_HEIGHT - SnakeNode.HEIGHT))
        color = FruitColor(self.rng.randint(0, 3))
        fruit = Fruit(Vector(float(x), float(y)), color)
        self.fruits.append(fruit)
        return fruit

    def grid_lines(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Return the grid's line segments, vertical ones first."""
        lines = []
        x = 0.0
        while x <= FIELD_WIDTH:
            lines.append(((x, 0.0), (x, float(FIELD_HEIGHT))))
            x += 2 * SnakeNode.WIDTH
        y = 0.0
        while y <= FIELD_HEIGHT:
            lines.append(((0.0, y), (float(FIELD_WIDTH), y)))
            y += 2 * SnakeNode.HEIGHT
        return lines

    def render(self, surface: pygame.Surface) -> None:
        self.snake.render(surface)
        for fruit in self.fruits:
            fruit.render(surface)
        if self.context.settings.grid_visible:
            for start, end in self.grid_lines():
                pygame.draw.line(surface, GRID_COLOR, start, end)


class GameOverScreen(Screen):
    """Shows the final score and offers a retry."""

    def __init__(self, context: GameContext, score: int) -> None:
        self.context = context
        self.score = score
        self.text = f"Your score: {score}!" + GAME_OVER_HINTS
        self._text = _text_surface(context, self.text, TEXT_SIZE, RED)

    def handle_input(self, inputs: InputState) -> None:
        keys = inputs.keys
        if "space" in keys:
            self.context.screen = GameScreen(self.context)
        elif "escape" in keys:
            self.context.close()
        elif "s" in keys:
            self.context.screen = SettingScreen(self.context)

    def update(self, delta: float) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        _blit_centered(surface, self._text, (FIELD_WIDTH / 2, FIELD_HEIGHT / 2))


class SettingScreen(Screen):
    """Lets the player pick the background colour and the grid."""

    def __init__(self, context: GameContext) -> None:
        self.context = context
        self._text = _text_surface(context, SETTING_TEXT, TEXT_SIZE, WHITE)

    def handle_input(self, inputs: InputState) -> None:
        keys = inputs.keys
        settings = self.context.settings
        if "p" in keys:
            settings.bg_color = PINK
        elif "b" in keys:
            settings.bg_color = BLACK
        elif "y" in keys:
            settings.grid_visible = True
            print("grid visible now")
        elif "n" in keys:
            settings.grid_visible = False
            print("grid invisible now")
        elif "space" in keys:
            self.context.screen = MenuScreen(self.context)

    def update(self, delta: float) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        _blit_centered(surface, self._text, (FIELD_WIDTH / 2, FIELD_HEIGHT / 2))