import pytest

from tilecrawl.errors import OutOfBoundsError
from tilecrawl.mapgen import (
    DEMO_LAYOUT,
    VERTICAL,
    Layout,
    Rect,
    Tunnel,
    carve_h_tunnel,
    carve_room,
    carve_tunnel,
    carve_v_tunnel,
    make_map,
)
from tilecrawl.state.world import Grid, Tile


def _clear_cells(grid):
    return {(x, y) for x, y, tile in grid.cells() if not tile.blocked}


def test_rect_from_size():
    assert Rect.from_size(20, 15, 10, 15) == Rect(20, 15, 30, 30)


def test_room_carves_interior_only():
    grid = Grid(10, 10)
    room = Rect.from_size(1, 1, 4, 3)  # x1=1, y1=1, x2=5, y2=4
    carve_room(grid, room)
    expected = {(x, y) for x in range(2, 5) for y in range(2, 4)}
    assert _clear_cells(grid) == expected
    # the rectangle's own edges stay wall
    for x in range(1, 6):
        assert grid.tile_at(x, 1).blocked
    for y in range(1, 5):
        assert grid.tile_at(1, y).blocked


def test_overlapping_rooms_union():
    grid = Grid(12, 12)
    carve_room(grid, Rect(0, 0, 5, 5))
    carve_room(grid, Rect(2, 2, 7, 7))
    expected = {(x, y) for x in range(1, 5) for y in range(1, 5)}
    expected |= {(x, y) for x in range(3, 7) for y in range(3, 7)}
    assert _clear_cells(grid) == expected


def test_h_tunnel_is_inclusive_and_order_independent():
    a = Grid(10, 5)
    b = Grid(10, 5)
    carve_h_tunnel(a, 2, 7, 3)
    carve_h_tunnel(b, 7, 2, 3)
    assert _clear_cells(a) == _clear_cells(b) == {(x, 3) for x in range(2, 8)}


def test_v_tunnel_is_inclusive_and_order_independent():
    a = Grid(5, 10)
    b = Grid(5, 10)
    carve_v_tunnel(a, 1, 6, 2)
    carve_v_tunnel(b, 6, 1, 2)
    assert _clear_cells(a) == _clear_cells(b) == {(2, y) for y in range(1, 7)}


def test_tunnel_over_cleared_cells_is_harmless():
    grid = Grid(10, 5)
    carve_h_tunnel(grid, 0, 9, 2)
    carve_h_tunnel(grid, 3, 5, 2)
    assert _clear_cells(grid) == {(x, 2) for x in range(10)}


def test_carve_tunnel_dispatches_on_orientation():
    grid = Grid(5, 5)
    carve_tunnel(grid, Tunnel(VERTICAL, 4, 0, 1))
    assert _clear_cells(grid) == {(1, y) for y in range(5)}
    with pytest.raises(ValueError):
        carve_tunnel(grid, Tunnel("diagonal", 0, 1, 1))


def test_carving_off_the_grid_fails_loudly():
    grid = Grid(5, 5)
    with pytest.raises(OutOfBoundsError):
        carve_h_tunnel(grid, 0, 5, 0)


def test_demo_map_scenario():
    grid = make_map(80, 45)
    assert not grid.tile_at(25, 23).blocked
    assert not grid.tile_at(55, 23).blocked
    assert not grid.tile_at(35, 23).blocked
    assert grid.tile_at(0, 0).blocked
    assert grid.tile_at(35, 10).blocked


def test_demo_map_cleared_cells_are_exactly_rooms_and_tunnel():
    grid = make_map(80, 45)
    expected = set()
    for room in DEMO_LAYOUT.rooms:
        expected |= {(x, y) for x in range(room.x1 + 1, room.x2) for y in range(room.y1 + 1, room.y2)}
    expected |= {(x, 23) for x in range(25, 56)}

    for x, y, tile in grid.cells():
        if (x, y) in expected:
            assert tile == Tile.empty(), (x, y)
        else:
            assert tile == Tile.wall(), (x, y)


def test_empty_layout_is_solid_rock():
    grid = make_map(6, 4, Layout())
    assert _clear_cells(grid) == set()


def test_layout_extent_covers_rooms_tunnels_and_spawns():
    assert DEMO_LAYOUT.extent() == (60, 30)
    assert Layout(tunnels=(Tunnel(VERTICAL, 9, 2, 4),)).extent() == (5, 10)
    assert Layout(spawns=((7, 3),)).extent() == (8, 4)
    assert Layout().extent() == (0, 0)


def test_make_world_rejects_a_map_too_small_for_the_layout():
    from dataclasses import replace

    from tilecrawl.config import GameConfig
    from tilecrawl.errors import ConfigError
    from tilecrawl.mapgen import make_world

    cfg = replace(GameConfig(), map_width=40, map_height=20)
    with pytest.raises(ConfigError):
        make_world(cfg)
