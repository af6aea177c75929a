"""The main window, the fixed-step game loop and the command entry point."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, Union

import pygame

from .screens import GameContext, InputState, MenuScreen
from .snake import FIELD_HEIGHT, FIELD_WIDTH
from .snakenode import SnakeNode

WIDTH = FIELD_WIDTH
HEIGHT = FIELD_HEIGHT
TIME_PER_FRAME = 1.0 / 10.0
MUSIC_LOOP_END_MS = 50_000

_KEY_NAMES = {
    pygame.K_SPACE: "space",
    pygame.K_ESCAPE: "escape",
    pygame.K_a: "a",
    pygame.K_s: "s",
    pygame.K_p: "p",
    pygame.K_b: "b",
    pygame.K_y: "y",
    pygame.K_n: "n",
}


class Game:
    """Owns the window and the audio, and drives the active screen."""

    def __init__(self, asset_dir: Union[str, Path, None] = None) -> None:
        self.asset_dir = Path(asset_dir) if asset_dir is not None else Path(".")
        pygame.init()
        self.window = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("sfSnake")

        self._load_head_image()
        self._music_playing = self._start_music()
        self.context = GameContext(
            font_path=self.asset_dir / "Fonts" / "game_over.ttf",
            pickup_sound=self._load_sound("Sounds/pickup.aiff", 0.3),
            die_sound=self._load_sound("Sounds/die.wav", 0.5),
        )
        self.context.screen = MenuScreen(self.context)

    def _load_head_image(self) -> None:
        path = self.asset_dir / "Textures" / "snake_head.png"
        try:
            SnakeNode.head_image = pygame.image.load(str(path)).convert_alpha()
        except (pygame.error, OSError):
            print("Failed to load the snake_head file", file=sys.stderr)

    def _start_music(self) -> bool:
        path = self.asset_dir / "Music" / "bg_music.wav"
        if pygame.mixer.get_init():
            try:
                pygame.mixer.music.load(str(path))
                pygame.mixer.music.play()
                return True
            except (pygame.error, OSError):
                pass
        print(f"Failed to open background music file:{path}", file=sys.stderr)
        return False

    def _keep_music_looping(self) -> None:
        if self._music_playing and pygame.mixer.music.get_pos() >= MUSIC_LOOP_END_MS:
            pygame.mixer.music.play()

    def _load_sound(self, relative: str, volume: float) -> Optional[pygame.mixer.Sound]:
        path = self.asset_dir / relative
        if pygame.mixer.get_init():
            try:
                sound = pygame.mixer.Sound(str(path))
            except (pygame.error, OSError):
                pass
            else:
                sound.set_volume(volume)
                return sound
        print(f"Failed to load sound from file:{path}", file=sys.stderr)
        return None

    def handle_input(self) -> None:
        """Process window events, then pass the input state to the screen."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.context.close()
        if not self.context.running:
            return

        pressed = pygame.key.get_pressed()
        keys = frozenset(name for code, name in _KEY_NAMES.items() if pressed[code])
        mouse_pos = pygame.mouse.get_pos() if pygame.mouse.get_pressed()[0] else None
        self.context.screen.handle_input(InputState(keys, mouse_pos))

    def update(self, delta: float) -> None:
        """Advance the active screen by ``delta`` seconds."""
        self.context.screen.update(delta)

    def render(self) -> None:
        """Clear to the background colour and draw the active screen."""
        self.window.fill(self.context.settings.bg_color)
        self.context.screen.render(self.window)
        pygame.display.flip()

    def run(self) -> None:
        """Run the fixed-step loop until the game is closed."""
        last = time.perf_counter()
        since_update = 0.0
        try:
            while self.context.running:
                now = time.perf_counter()
                since_update += now - last
                last = now

                while since_update > TIME_PER_FRAME and self.context.running:
                    since_update -= TIME_PER_FRAME
                    self.handle_input()
                    if self.context.running:
                        self.update(TIME_PER_FRAME)

                if self.context.running:
                    self._keep_music_looping()
                    self.render()
        finally:
            pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="sfsnake", description="Play snake.")
    parser.add_argument(
        "--assets",
        default=None,
        help="directory holding Fonts, Music, Sounds and Textures (default: current directory)",
    )
    args = parser.parse_args(argv)
    Game(args.assets).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())