"""Command-line argument checks and loading of a scene description file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .errors import MAP_EXT_ERR, MAP_PATH_ERR, MISSING_ARG_ERR, TOO_MANY_ARGS_ERR, CubError
from .identifiers import CharReader, read_textures
from .mapfile import parse_map
from .scene import Player, Scene

_EXTENSION = ".cub"


def validate_arguments(args: Sequence[str]) -> str:
    """Check the user arguments and return the map path they name."""
    if len(args) > 1:
        raise CubError(TOO_MANY_ARGS_ERR)
    if len(args) < 1:
        raise CubError(MISSING_ARG_ERR)
    path = args[0]
    if len(path) < len(_EXTENSION) or not path.endswith(_EXTENSION):
        raise CubError(MAP_EXT_ERR)
    return path


def load_scene(path: str | Path) -> Scene:
    """Read a ``.cub`` file and build the scene it describes."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        raise CubError(MAP_PATH_ERR) from None
    reader = CharReader(data.decode("latin-1"))
    textures = read_textures(reader)
    player = Player()
    game_map = parse_map(reader.remaining(), player)
    return Scene(textures=textures, game_map=game_map, player=player)