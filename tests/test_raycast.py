import math

import numpy as np
import pytest

from genkicub.image import Image
from genkicub.raycast import (
    Ray,
    Side,
    dda,
    draw_vert_line,
    fill_background,
    find_side,
    raycast_image,
    setup_ray,
)
from genkicub.scene import (
    FOV_RAD_HALF,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameMap,
    Identifier,
    Player,
    Scene,
    Textures,
)
from genkicub.vector import Vector2

CEILING = 0x112233
FLOOR = 0x445566
COLORS = {
    Identifier.NO: 0x0000AA,
    Identifier.EA: 0x00AA00,
    Identifier.SO: 0xAA0000,
    Identifier.WE: 0xAAAA00,
}


def _room(size=5):
    rows = []
    for i in range(size):
        if i in (0, size - 1):
            rows.append(["1"] * size)
        else:
            rows.append(["1"] + ["0"] * (size - 2) + ["1"])
    return GameMap(rows=rows, x_len=size, y_len=size)


def _textures():
    textures = Textures(ceiling=CEILING, floor=FLOOR)
    for ident, color in COLORS.items():
        textures.images[ident] = Image(np.full((4, 4), color, dtype=np.uint32))
    return textures


def _scene(x=2.5, y=2.5, rot=0.0, size=5):
    return Scene(
        textures=_textures(),
        game_map=_room(size),
        player=Player(x=x, y=y, rot=rot),
    )


def _ray(side, dx, dy):
    return Ray(
        start=Vector2(2.5, 2.5),
        rot=0.0,
        relative_rot=0.0,
        direction=Vector2(dx, dy),
        step_size=Vector2(1.0, 1.0),
        side=side,
    )


def test_setup_ray_centre_column_follows_player_facing():
    player = Player(x=2.5, y=3.5, rot=0.0)
    ray = setup_ray(player, WINDOW_WIDTH // 2)
    assert ray.relative_rot == pytest.approx(0.0)
    assert ray.direction.x == pytest.approx(1.0)
    assert ray.direction.y == pytest.approx(0.0)
    assert (ray.map_x, ray.map_y) == (2, 3)
    assert ray.hit is False


def test_setup_ray_left_edge_uses_half_fov():
    player = Player(rot=1.0, fov_mult=1.05)
    ray = setup_ray(player, 0)
    assert ray.relative_rot == pytest.approx(-FOV_RAD_HALF * 1.05)
    assert ray.rot == pytest.approx(player.rot + ray.relative_rot)


def test_setup_ray_direction_is_unit_length():
    ray = setup_ray(Player(rot=0.7), 123)
    assert math.hypot(ray.direction.x, ray.direction.y) == pytest.approx(1.0)


def test_dda_hits_wall_along_x():
    scene = _scene()
    ray = dda(setup_ray(scene.player, WINDOW_WIDTH // 2), scene.game_map)
    assert ray.hit is True
    assert ray.side is Side.EA_WE
    assert (ray.map_x, ray.map_y) == (4, 2)
    assert scene.game_map.cell(ray.map_x, ray.map_y) == "1"


def test_dda_hits_wall_along_y():
    scene = _scene(rot=math.pi / 2)
    ray = dda(setup_ray(scene.player, WINDOW_WIDTH // 2), scene.game_map)
    assert ray.hit is True
    assert ray.side is Side.NO_SO
    assert (ray.map_x, ray.map_y) == (2, 4)


def test_dda_without_walls_leaves_map():
    open_map = GameMap(rows=[["0"] * 3 for _ in range(3)], x_len=3, y_len=3)
    ray = dda(setup_ray(Player(x=1.5, y=1.5, rot=0.3), 800), open_map)
    assert ray.hit is False
    assert not (0 <= ray.map_x < 3 and 0 <= ray.map_y < 3)


@pytest.mark.parametrize(
    "side, dx, dy, ident",
    [
        (Side.NO_SO, 0.0, 1.0, Identifier.NO),
        (Side.NO_SO, 0.0, -1.0, Identifier.SO),
        (Side.EA_WE, 1.0, 0.0, Identifier.EA),
        (Side.EA_WE, -1.0, 0.0, Identifier.WE),
    ],
)
def test_find_side_picks_texture(side, dx, dy, ident):
    textures = _textures()
    assert find_side(textures, _ray(side, dx, dy)) is textures.images[ident]


def test_find_side_without_direction_returns_none():
    assert find_side(_textures(), _ray(Side.EA_WE, 0.0, 1.0)) is None


def test_fill_background_splits_halves():
    img = Image.blank(4, 6)
    fill_background(img, CEILING, FLOOR)
    assert set(img.pixels[:3].ravel().tolist()) == {CEILING}
    assert set(img.pixels[3:].ravel().tolist()) == {FLOOR}


def _column_after_draw(scene, x_pos=10):
    img = Image.blank()
    fill_background(img, CEILING, FLOOR)
    ray = dda(setup_ray(scene.player, WINDOW_WIDTH // 2), scene.game_map)
    draw_vert_line(ray, img, x_pos, find_side(scene.textures, ray))
    return img.pixels[:, x_pos].tolist()


def test_draw_vert_line_is_centred_and_contiguous():
    column = _column_after_draw(_scene())
    wall = COLORS[Identifier.EA]
    rows = [i for i, c in enumerate(column) if c == wall]
    assert rows
    assert rows == list(range(rows[0], rows[-1] + 1))
    assert abs(rows[0] + rows[-1] - WINDOW_HEIGHT) <= 1
    assert column[0] == CEILING
    assert column[-1] == FLOOR


def test_closer_wall_draws_taller_line():
    wall = COLORS[Identifier.EA]
    far = _column_after_draw(_scene(x=1.5)).count(wall)
    near = _column_after_draw(_scene(x=3.5)).count(wall)
    assert near > far


def test_draw_vert_line_outside_image_changes_nothing():
    scene = _scene()
    img = Image.blank()
    ray = dda(setup_ray(scene.player, WINDOW_WIDTH // 2), scene.game_map)
    draw_vert_line(ray, img, WINDOW_WIDTH + 5, scene.textures.images[Identifier.EA])
    assert not img.pixels.any()


def test_raycast_image_draws_a_wall_in_every_column():
    scene = _scene()
    img = raycast_image(scene, Image.blank())
    centre_row = img.pixels[WINDOW_HEIGHT // 2].tolist()
    assert set(centre_row) <= set(COLORS.values())
    assert centre_row[WINDOW_WIDTH // 2] == COLORS[Identifier.EA]
    assert img.pixels[0, 0] == CEILING
    assert img.pixels[WINDOW_HEIGHT - 1, 0] == FLOOR