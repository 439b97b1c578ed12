"""Keyboard handling, player rotation and movement with wall collision."""

from __future__ import annotations

import enum
import math

from .scene import VALIDATED_WALK_CHAR, GameMap, Movement, Player, Scene
from .vector import Vector2

PLAYER_MOVE_MULT = 0.03
SPRINT_MULT = 3
SPRINT_FOV_MULT = 1.05
ROTATION_STEP = 2


class Key(enum.IntEnum):
    """Keys the game reacts to, by X11 keysym value."""

    W = 0x0077
    A = 0x0061
    S = 0x0073
    D = 0x0064
    LEFT = 0xFF51
    RIGHT = 0xFF53
    ESCAPE = 0xFF1B
    SHIFT_L = 0xFFE1


FORWARD = Key.W
LEFT = Key.A
RIGHT = Key.D
BACKWARD = Key.S

_MOVE_KEYS = frozenset((Key.W, Key.A, Key.S, Key.D))


class QuitRequested(Exception):
    """The player asked to leave the game."""


def is_move_input(key: int) -> bool:
    """True for the W, A, S and D keys."""
    return key in _MOVE_KEYS


def change_mov_dir(movement: Movement, key: int, direction: int) -> None:
    """Add (*direction* = 1) or remove (-1) the effect of a movement key."""
    if key == FORWARD:
        movement.dir_x += direction
    elif key == BACKWARD:
        movement.dir_x -= direction
    elif key == RIGHT:
        movement.dir_y += direction
    elif key == LEFT:
        movement.dir_y -= direction


def rotate_player(player: Player, key: int) -> None:
    """Turn the player by a fixed step, left for LEFT and right otherwise."""
    degrees = player.rot * 180 / math.pi
    if key == Key.LEFT:
        degrees -= ROTATION_STEP
    else:
        degrees += ROTATION_STEP
    if degrees >= 360:
        degrees -= 360
    elif degrees < 0:
        degrees += 360
    player.rot = degrees * math.pi / 180


def handle_press(scene: Scene, key: int) -> None:
    """React to a key being pressed; Escape raises QuitRequested."""
    player = scene.player
    if key == Key.LEFT:
        player.rotate_left = True
    elif key == Key.RIGHT:
        player.rotate_right = True
    if key == Key.ESCAPE:
        raise QuitRequested()
    if is_move_input(key):
        change_mov_dir(player.movement, key, 1)
    if key == Key.SHIFT_L:
        player.movement.is_sprinting = True


def handle_release(scene: Scene, key: int) -> None:
    """React to a key being released."""
    player = scene.player
    if key == Key.LEFT:
        player.rotate_left = False
    elif key == Key.RIGHT:
        player.rotate_right = False
    if is_move_input(key):
        change_mov_dir(player.movement, key, -1)
    if key == Key.SHIFT_L:
        player.movement.is_sprinting = False


def update_rotation(player: Player) -> None:
    """Apply one rotation step for a held rotation key; left wins over right."""
    if player.rotate_left:
        rotate_player(player, Key.LEFT)
    elif player.rotate_right:
        rotate_player(player, Key.RIGHT)


def _blocked(game_map: GameMap, row: int, col: int) -> bool:
    return game_map.cell(row, col) != VALIDATED_WALK_CHAR


def _check_collision(player: Player, game_map: GameMap, step: Vector2) -> Vector2:
    dx, dy = step.x, step.y
    target = int(player.x + dx)
    if not 0 <= target < game_map.x_len or _blocked(game_map, target, int(player.y)):
        dx = 0.0
    target = int(player.y + dy)
    if not 0 <= target < game_map.y_len or _blocked(game_map, int(player.x), target):
        dy = 0.0
    return Vector2(dx, dy)


def move_player(scene: Scene) -> None:
    """Move the player one frame in the held direction, stopping at walls."""
    player = scene.player
    movement = player.movement
    if movement.dir_x == 0 and movement.dir_y == 0:
        return
    step = (
        Vector2(movement.dir_x, movement.dir_y)
        .normalized()
        .rotated(player.rot)
        .scaled(PLAYER_MOVE_MULT)
    )
    if movement.is_sprinting:
        step = step.scaled(SPRINT_MULT)
        player.fov_mult = SPRINT_FOV_MULT
    else:
        player.fov_mult = 1.0
    step = _check_collision(player, scene.game_map, step)
    player.x += step.x
    player.y += step.y