"""Pixel images: the frame buffer and wall textures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image as PILImage

from .errors import TextureNotFoundError
from .scene import WINDOW_HEIGHT, WINDOW_WIDTH, Identifier, Textures

_LOAD_ORDER = (Identifier.NO, Identifier.EA, Identifier.WE, Identifier.SO)


@dataclass(eq=False)
class Image:
    """A grid of 0xRRGGBB pixels stored row by row."""

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def blank(cls, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> Image:
        """Return a black image of the given size."""
        return cls(np.zeros((height, width), dtype=np.uint32))

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set a pixel; positions outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (*x*, *y*)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return int(self.pixels[y, x])


def load_texture(path: str | Path | None) -> Image:
    """Load an image file as a texture."""
    if not path:
        raise TextureNotFoundError(None if path is None else str(path))
    try:
        with PILImage.open(path) as source:
            rgb = np.asarray(source.convert("RGB"), dtype=np.uint32)
    except (OSError, ValueError):
        raise TextureNotFoundError(str(path)) from None
    packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
    return Image(packed.astype(np.uint32))


def load_textures(textures: Textures) -> dict[Identifier, Image]:
    """Load the four wall textures named in *textures* into its images."""
    for ident in _LOAD_ORDER:
        textures.images[ident] = load_texture(textures.paths.get(ident))
    return textures.images