"""Ray casting: DDA wall search and drawing of textured wall columns."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

import numpy as np

from .image import Image
from .scene import (
    BORDER_CHAR,
    FOV_RAD_HALF,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameMap,
    Identifier,
    Player,
    Scene,
    Textures,
)
from .vector import Vector2

_MAX_LINE_HEIGHT = 2**31 - 1


class Side(enum.Enum):
    """Which kind of grid line a ray crossed last."""

    NO_SO = 0
    EA_WE = 1


@dataclass
class Ray:
    """A single ray cast from the player for one screen column."""

    start: Vector2
    rot: float
    relative_rot: float
    direction: Vector2
    step_size: Vector2
    length: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))
    step_x: int = 0
    step_y: int = 0
    map_x: int = 0
    map_y: int = 0
    side: Side = Side.NO_SO
    hit: bool = False


def _step_length(num: float, den: float) -> float:
    if den == 0:
        return math.inf
    ratio = num / den
    return math.sqrt(1 + ratio * ratio)


def setup_ray(player: Player, x: int) -> Ray:
    """Build the ray for screen column *x* from the player's position and facing."""
    relative_rot = (2 * x / float(WINDOW_WIDTH) - 1) * FOV_RAD_HALF * player.fov_mult
    rot = player.rot + relative_rot
    direction = Vector2(math.cos(rot), math.sin(rot))
    start = Vector2(player.x, player.y)
    step_size = Vector2(
        _step_length(direction.y, direction.x),
        _step_length(direction.x, direction.y),
    )
    return Ray(
        start=start,
        rot=rot,
        relative_rot=relative_rot,
        direction=direction,
        step_size=step_size,
        map_x=int(start.x),
        map_y=int(start.y),
    )


def _initial_length(start: float, cell: int, step_size: float, negative: bool) -> float:
    offset = start - cell if negative else (cell + 1) - start
    if offset == 0:
        return 0.0
    return offset * step_size


def dda(ray: Ray, game_map: GameMap) -> Ray:
    """Step the ray through the grid until it hits a wall or leaves the map."""
    ray.step_x = -1 if ray.direction.x < 0 else 1
    ray.step_y = -1 if ray.direction.y < 0 else 1
    length_x = _initial_length(
        ray.start.x, ray.map_x, ray.step_size.x, ray.direction.x < 0
    )
    length_y = _initial_length(
        ray.start.y, ray.map_y, ray.step_size.y, ray.direction.y < 0
    )
    while not ray.hit:
        if length_x < length_y:
            ray.map_x += ray.step_x
            length_x += ray.step_size.x
            ray.side = Side.EA_WE
        else:
            ray.map_y += ray.step_y
            length_y += ray.step_size.y
            ray.side = Side.NO_SO
        if not 0 <= ray.map_x < game_map.x_len:
            break
        if not 0 <= ray.map_y < game_map.y_len:
            break
        if game_map.cell(ray.map_x, ray.map_y) == BORDER_CHAR:
            ray.hit = True
    ray.length = Vector2(length_x, length_y)
    return ray


def find_side(textures: Textures, ray: Ray) -> Image | None:
    """Pick the wall texture for the face the ray hit."""
    images = textures.images
    if ray.side is Side.NO_SO:
        if ray.direction.y > 0:
            return images.get(Identifier.NO)
        if ray.direction.y < 0:
            return images.get(Identifier.SO)
    else:
        if ray.direction.x > 0:
            return images.get(Identifier.EA)
        if ray.direction.x < 0:
            return images.get(Identifier.WE)
    return None


def _wall_distance(ray: Ray) -> float:
    if ray.side is Side.EA_WE:
        return ray.length.x - ray.step_size.x
    return ray.length.y - ray.step_size.y


def _line_height(ray: Ray) -> int:
    distance = _wall_distance(ray) * math.cos(ray.relative_rot)
    if distance <= 0:
        return _MAX_LINE_HEIGHT
    return min(int(WINDOW_HEIGHT / distance), _MAX_LINE_HEIGHT)


def draw_vert_line(ray: Ray, img: Image, x_pos: int, texture: Image) -> None:
    """Draw the textured wall slice for *ray* into column *x_pos* of *img*."""
    wall_dist = _wall_distance(ray)
    if ray.side is Side.NO_SO:
        wall_x = ray.start.x + wall_dist * ray.direction.x
    else:
        wall_x = ray.start.y + wall_dist * ray.direction.y
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * float(texture.width))
    if (ray.side is Side.NO_SO and ray.direction.y > 0) or (
        ray.side is Side.EA_WE and ray.direction.x < 0
    ):
        tex_x = texture.width - tex_x - 1
    tex_x = min(max(tex_x, 0), texture.width - 1)

    line_height = _line_height(ray)
    half = line_height // 2
    start = max(-half + WINDOW_HEIGHT // 2, 0)
    end = min(half + WINDOW_HEIGHT // 2, WINDOW_HEIGHT - 1)
    step = texture.height / line_height if line_height else 0.0
    tex_pos = (start - WINDOW_HEIGHT // 2 + half) * step

    if not 0 <= x_pos < img.width or end < start:
        return
    ys = np.arange(start, end + 1)
    positions = tex_pos + step * np.arange(ys.size)
    tex_ys = positions.astype(np.int64) & (texture.height - 1)
    inside = ys < img.height
    img.pixels[ys[inside], x_pos] = texture.pixels[tex_ys[inside], tex_x]


def fill_background(img: Image, ceiling: int, floor: int) -> None:
    """Paint the upper half of *img* with *ceiling* and the lower half with *floor*."""
    half = img.height // 2
    img.pixels[:half, :] = ceiling & 0xFFFFFFFF
    img.pixels[half:, :] = floor & 0xFFFFFFFF


def raycast_image(scene: Scene, img: Image) -> Image:
    """Render the scene from the player's point of view into *img*."""
    fill_background(img, scene.textures.ceiling, scene.textures.floor)
    for x in range(WINDOW_WIDTH):
        ray = dda(setup_ray(scene.player, x), scene.game_map)
        if not ray.hit:
            continue
        texture = find_side(scene.textures, ray)
        if texture is None:
            continue
        draw_vert_line(ray, img, x, texture)
    return img