import pytest

from towerdefence.tilemap import (
    Direction,
    GameMap,
    MapError,
    Route,
    Tile,
    parse_tile,
)

MAP_TEXT = "\n".join(
    [
        "0\\-1\\4\\1, 0\\-1\\4, 0\\-1\\2",
        "",
        "0, 0, 0\\-1\\0\\0",
    ]
)


def test_parse_tile_all_fields():
    tile = parse_tile("1\\2\\3\\4")
    assert tile == Tile(terrain=1, decoration=2, special_flag=4, direction=Direction.LEFT)


def test_parse_tile_empty_gives_defaults():
    assert parse_tile("") == Tile()


def test_parse_tile_invalid_numbers():
    tile = parse_tile("x\\y")
    assert tile.terrain == 0
    assert tile.decoration == -1


def test_parse_tile_direction_out_of_range():
    assert parse_tile("0\\0\\7").direction == Direction.NONE
    assert parse_tile("0\\0\\-2").direction == Direction.NONE


def test_parse_tile_numeric_prefix_and_whitespace():
    tile = parse_tile(" 12abc \\ 3 ")
    assert (tile.terrain, tile.decoration) == (12, 3)


def test_parse_tile_negative_terrain_clamped():
    assert parse_tile("-5").terrain == 0


def test_map_parse_dimensions_and_home():
    game_map = GameMap()
    game_map.parse(MAP_TEXT)
    assert (game_map.width, game_map.height) == (3, 2)
    assert game_map.idx_home == (2, 1)


def test_map_route_follows_directions():
    game_map = GameMap()
    game_map.parse(MAP_TEXT)
    route = game_map.spawner_routes[1]
    assert route.points == [(0, 0), (1, 0), (2, 0), (2, 1)]
    assert route[0] == (0, 0)
    assert len(route) == 4


def test_route_stops_on_cycle():
    tiles = [[Tile(direction=Direction.RIGHT), Tile(direction=Direction.LEFT)]]
    assert list(Route(tiles, (0, 0))) == [(0, 0), (1, 0)]


def test_route_stops_at_edge():
    tiles = [[Tile(direction=Direction.UP)]]
    assert Route(tiles, (0, 0)).points == [(0, 0)]


def test_place_tower_marks_tile():
    game_map = GameMap()
    game_map.parse(MAP_TEXT)
    game_map.place_tower((1, 1))
    assert game_map.tiles[1][1].has_tower
    assert not game_map.tiles[1][0].has_tower


def test_parse_empty_raises():
    with pytest.raises(MapError):
        GameMap().parse(" \n\t\n")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        GameMap().load(tmp_path / "missing.csv")


def test_load_from_file(tmp_path):
    path = tmp_path / "map.csv"
    path.write_text(MAP_TEXT, encoding="utf-8")
    game_map = GameMap()
    game_map.load(path)
    assert set(game_map.spawner_routes) == {1}
    assert game_map.tiles[0][0].special_flag == 1