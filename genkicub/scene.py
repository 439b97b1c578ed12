"""Game state: player, map, textures and the constants that shape them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

FOV = 66
FOV_RAD = 1.1519173063
FOV_HALF = 33
FOV_RAD_HALF = 0.5759586532

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900
PROGRAM_NAME = "Genki Cub3D"

ACCEPTED_MAP_CHARS = "01 \t\nNESW"
WALK_CHAR = "X"
VALIDATED_WALK_CHAR = "0"
BORDER_CHAR = "1"
WHITE_SPACE_CHAR = " "
EMPTY_CELL = "\0"

_WHITESPACE = (" ", "\t", "\n")
_SPAWNS = ("N", "E", "S", "W")


def is_whitespace(c: str) -> bool:
    """True for a space, tab or newline."""
    return c in _WHITESPACE


def is_player_spawn(c: str) -> bool:
    """True for one of the spawn letters N, E, S or W."""
    return c in _SPAWNS


class Identifier(enum.IntEnum):
    """Type identifiers of the scene description header."""

    NO_ID = 0
    NO = 1
    EA = 2
    SO = 3
    WE = 4
    C = 5
    F = 6


@dataclass
class Movement:
    """Current movement input of the player."""

    dir_x: int = 0
    dir_y: int = 0
    is_sprinting: bool = False


@dataclass
class Player:
    """Player position, facing and input state."""

    x: float = 0.0
    y: float = 0.0
    rot: float = 0.0
    fov_mult: float = 1.0
    movement: Movement = field(default_factory=Movement)
    rotate_left: bool = False
    rotate_right: bool = False


@dataclass
class GameMap:
    """The map grid; rows are indexed by x, columns by y."""

    rows: list[list[str]] = field(default_factory=list)
    x_len: int = 0
    y_len: int = 0

    def cell(self, x: int, y: int) -> str:
        """Return the character at row *x*, column *y*."""
        return self.rows[x][y]


@dataclass
class Textures:
    """Wall texture paths, loaded images and floor/ceiling colours."""

    paths: dict[Identifier, str] = field(default_factory=dict)
    ceiling: int = -1
    floor: int = -1
    images: dict[Identifier, Any] = field(default_factory=dict)

    def has_all(self) -> bool:
        """True once both colours and all four wall paths are set."""
        if self.ceiling == -1 or self.floor == -1:
            return False
        return all(
            ident in self.paths
            for ident in (Identifier.NO, Identifier.EA, Identifier.SO, Identifier.WE)
        )


@dataclass
class Scene:
    """Everything needed to run a level."""

    textures: Textures = field(default_factory=Textures)
    game_map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)