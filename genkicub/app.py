"""The game window, its main loop and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import numpy as np
import pygame

from .controls import Key, QuitRequested, handle_press, handle_release, move_player, update_rotation
from .errors import DISPLAY_INIT_ERR, WINDOW_ERR, CubError, report_error
from .image import Image, load_textures
from .loader import load_scene, validate_arguments
from .raycast import raycast_image
from .scene import PROGRAM_NAME, WINDOW_HEIGHT, WINDOW_WIDTH, Scene

_FRAME_RATE = 60

_KEYMAP = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_LSHIFT: Key.SHIFT_L,
}


def _to_rgb(frame: Image) -> np.ndarray:
    """Turn a packed 0xRRGGBB frame into a (width, height, 3) array for pygame."""
    pixels = frame.pixels
    rgb = np.stack(
        ((pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF), axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


class Game:
    """A running level: the scene plus the frame it is rendered into."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.frame = Image.blank(WINDOW_WIDTH, WINDOW_HEIGHT)

    def update(self) -> Image:
        """Advance one frame: turn, move, and render the view."""
        update_rotation(self.scene.player)
        move_player(self.scene)
        raycast_image(self.scene, self.frame)
        return self.frame

    def _handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one window event; False when the game should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = _KEYMAP.get(event.key)
            if key is None:
                return True
            if event.type == pygame.KEYDOWN:
                handle_press(self.scene, key)
            else:
                handle_release(self.scene, key)
        return True

    def run(self) -> None:
        """Open the window, load the wall textures and play until asked to quit."""
        try:
            pygame.init()
        except pygame.error:
            raise CubError(DISPLAY_INIT_ERR) from None
        try:
            try:
                screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            except pygame.error:
                raise CubError(WINDOW_ERR) from None
            pygame.display.set_caption(PROGRAM_NAME)
            pygame.key.set_repeat()
            load_textures(self.scene.textures)
            clock = pygame.time.Clock()
            while True:
                try:
                    for event in pygame.event.get():
                        if not self._handle_event(event):
                            return
                except QuitRequested:
                    return
                frame = self.update()
                pygame.surfarray.blit_array(screen, _to_rgb(frame))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and play it; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = validate_arguments(args)
        scene = load_scene(path)
        Game(scene).run()
    except CubError as error:
        report_error(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())