"""Reading, filling and validating the map section of a scene description."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import (
    FLOOD_FAIL,
    MAP_CHAR_ERR,
    MAP_NL_ERR,
    NO_SPAWN_ERR,
    TOO_MANY_SPAWNS_ERR,
    CubError,
)
from .scene import (
    ACCEPTED_MAP_CHARS,
    BORDER_CHAR,
    EMPTY_CELL,
    VALIDATED_WALK_CHAR,
    WALK_CHAR,
    WHITE_SPACE_CHAR,
    GameMap,
    Player,
    is_player_spawn,
    is_whitespace,
)

_SPAWN_DEGREES = {"N": 180, "E": 270, "S": 0, "W": 90}


@dataclass
class MapInfo:
    """Size of the map section and where it starts in the text.

    ``x`` is the number of rows, ``y`` the length of the longest row and
    ``offset`` the index in the text at which the first map line begins.
    """

    x: int = 0
    y: int = 0
    spawn_count: int = 0
    offset: int = 0


def _map_start(text: str) -> int:
    """Index of the start of the line holding the first non-blank character."""
    offset = 0
    for index, c in enumerate(text):
        if not is_whitespace(c):
            return offset
        if c == "\n":
            offset = index + 1
    return len(text)


def _map_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def measure_map(text: str) -> MapInfo:
    """Validate the characters of the map section and measure it."""
    info = MapInfo(offset=_map_start(text))
    for line in _map_lines(text[info.offset:]):
        if not line:
            raise CubError(MAP_NL_ERR)
        for c in line:
            if c not in ACCEPTED_MAP_CHARS:
                raise CubError(MAP_CHAR_ERR)
            if is_player_spawn(c):
                if info.spawn_count:
                    raise CubError(TOO_MANY_SPAWNS_ERR)
                info.spawn_count += 1
        info.x += 1
        info.y = max(info.y, len(line))
    return info


def fill_map(text: str, info: MapInfo, player: Player) -> list[list[str]]:
    """Build the grid from the map text and place the player at the spawn point.

    Floor cells and the spawn become walk markers, whitespace becomes a
    space and cells past the end of a short row stay empty.
    """
    grid = [[EMPTY_CELL] * info.y for _ in range(info.x)]
    for i, line in enumerate(_map_lines(text[info.offset:])):
        for j, c in enumerate(line):
            if is_player_spawn(c):
                player.x = i + 0.5
                player.y = j + 0.5
                player.rot = _SPAWN_DEGREES[c] * math.pi / 180
                c = WALK_CHAR
            elif c == VALIDATED_WALK_CHAR:
                c = WALK_CHAR
            elif is_whitespace(c):
                c = WHITE_SPACE_CHAR
            grid[i][j] = c
    return grid


def _flood(grid: list[list[str]], row: int, col: int) -> bool:
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            return False
        cell = grid[r][c]
        if cell in (VALIDATED_WALK_CHAR, BORDER_CHAR):
            continue
        if cell == WHITE_SPACE_CHAR:
            return False
        grid[r][c] = VALIDATED_WALK_CHAR
        stack.extend(((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)))
    return True


def check_map(grid: list[list[str]]) -> bool:
    """Flood every walkable region; True if all are enclosed by walls.

    Walk markers reached by the flood are turned into validated floor.
    """
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == WALK_CHAR and not _flood(grid, r, c):
                return False
    return not any(WALK_CHAR in row for row in grid)


def parse_map(text: str, player: Player) -> GameMap:
    """Parse and validate the map section, placing *player* on it."""
    info = measure_map(text)
    if info.x < 1 or info.y < 1 or info.spawn_count == 0:
        raise CubError(NO_SPAWN_ERR)
    grid = fill_map(text, info, player)
    if not check_map(grid):
        raise CubError(FLOOD_FAIL)
    return GameMap(rows=grid, x_len=info.x, y_len=info.y)