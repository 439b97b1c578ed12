"""Error types and the messages the game reports."""

from __future__ import annotations

import sys
from typing import TextIO

TOO_MANY_ARGS_ERR = "Only one argument is allowed"
MISSING_ARG_ERR = "Argument needed: a map in format *.cub"
PARSE_NL_ERR = "Found a new line when trying to parse a idetifier!"
INVALID_ID_ERR = "Invalid type identifier encountered!"
DUPLICATE_ID_ERR = "Only one identifier of a certain type allowed!"
MISSING_ID_ERR = "Not all type identiiers are specified!"
CLR_RANGE_ERR = "Colors must be a number and in range between [0,255]!"
CLR_COMMA_ERR = "There must be a comma ',' between the RGB values!"
MAP_EXT_ERR = "Invalid map! File extension must be of type *.cub!"
MAP_PATH_ERR = "Invalid map! Map cannot be opened!"
MAP_NL_ERR = "Invalid map! There is an empty line in the map!"
MAP_CHAR_ERR = "Invalid map! There is an invalid character used the map!"
TOO_MANY_SPAWNS_ERR = "Invalid map! Only one player spawn point allowed!"
NO_SPAWN_ERR = (
    "Invalid map! There is no player spawn point. Use 'N', 'E', 'S' or 'W'!"
)
FLOOD_FAIL = "Invalid map! The map must be fully enclosed by walls."
OPEN_FD_ERR = "Failed to open a file descriptor!"
READ_FD_ERR = "Failed to read from a file descriptor!"
DISPLAY_INIT_ERR = "Failed to initialize mlx!"
WINDOW_ERR = "Failed to create mlx window!"
IMAGE_ERR = "Failed to create mlx image!"

TEXTURE_NOT_FOUND_PREFIX = "Texture not found: "


class CubError(Exception):
    """An error that stops the game from loading or running."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class TextureNotFoundError(CubError):
    """A wall texture file could not be loaded."""

    def __init__(self, path: str | None) -> None:
        super().__init__(TEXTURE_NOT_FOUND_PREFIX + (path or ""))
        self.path = path


def report_error(error: BaseException, stream: TextIO | None = None) -> None:
    """Write an error report in the game's format to *stream* (stderr by default)."""
    out = sys.stderr if stream is None else stream
    out.write("Error\n")
    out.write(str(error))
    if not isinstance(error, TextureNotFoundError):
        out.write("\n")